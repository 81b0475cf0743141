from __future__ import annotations

import json

from attendance_roster.storage.json_file_store import JsonFileKeyValueStore
from attendance_roster.storage.key_value_roster_repository import KeyValueRosterRepository


def test_set_get_remove(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "data" / "roster.json")

    assert store.get("classes") is None
    store.set("classes", "[]")
    store.set("selectedClassId", "1")
    assert store.get("classes") == "[]"

    store.remove("selectedClassId")
    assert store.get("selectedClassId") is None
    assert json.loads(store.path.read_text(encoding="utf-8")) == {"classes": "[]"}


def test_repository_survives_restart(tmp_path, snapshot):
    path = tmp_path / "roster.json"
    KeyValueRosterRepository(JsonFileKeyValueStore(path)).save(snapshot)

    assert KeyValueRosterRepository(JsonFileKeyValueStore(path)).load() == snapshot


def test_garbage_file_is_overwritten_on_write(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text("{{{", encoding="utf-8")
    store = JsonFileKeyValueStore(path)

    store.set("classes", "[]")

    assert store.get("classes") == "[]"
