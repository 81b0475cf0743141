from __future__ import annotations

import json
import logging

from attendance_roster.core.enums import AttendanceStatus
from attendance_roster.roster.model import Snapshot
from attendance_roster.storage.key_value import InMemoryKeyValueStore
from attendance_roster.storage.key_value_roster_repository import (
    KeyValueRosterRepository,
    default_snapshot,
)


def test_round_trip_reproduces_snapshot(snapshot):
    store = InMemoryKeyValueStore()
    repo = KeyValueRosterRepository(store)

    repo.save(snapshot)
    loaded = repo.load()

    assert loaded == snapshot
    assert set(loaded.classes) == set(snapshot.classes)
    assert loaded.history["2024-01-09"][1] is AttendanceStatus.PRESENT


def test_saved_layout_uses_camel_case_keys_and_string_student_ids(snapshot):
    store = InMemoryKeyValueStore()
    KeyValueRosterRepository(store).save(snapshot)

    assert json.loads(store.get("classes")) == [{"id": 1, "name": "10A"}, {"id": 2, "name": "10B"}]
    assert json.loads(store.get("students"))[0] == {"id": 1, "name": "Alice", "rollNumber": "S001", "classId": 1}
    assert json.loads(store.get("attendanceHistory")) == {"2024-01-09": {"1": "Present", "3": "Absent"}}
    assert json.loads(store.get("selectedClassId")) == 1


def test_selected_class_key_removed_when_no_class(snapshot):
    store = InMemoryKeyValueStore()
    repo = KeyValueRosterRepository(store)
    repo.save(snapshot)

    repo.save(Snapshot())

    assert store.get("selectedClassId") is None
    assert repo.load() == Snapshot()


def test_missing_store_gives_default_roster():
    loaded = KeyValueRosterRepository(InMemoryKeyValueStore()).load()

    assert loaded == default_snapshot()
    assert [c.name for c in loaded.classes] == ["Sample Class"]
    assert [s.roll_number for s in loaded.students] == ["S001", "S002"]
    assert loaded.selected_class_id == 1


def test_unparsable_store_falls_back_and_logs(caplog):
    store = InMemoryKeyValueStore({"classes": "[not json", "students": "[]"})

    with caplog.at_level(logging.ERROR):
        loaded = KeyValueRosterRepository(store).load()

    assert loaded == default_snapshot()
    assert "falling back" in caplog.text


def test_wrong_shape_falls_back():
    store = InMemoryKeyValueStore({"classes": json.dumps([{"id": "x"}]), "students": "[]"})
    assert KeyValueRosterRepository(store).load() == default_snapshot()


def test_missing_history_and_selection_use_defaults():
    store = InMemoryKeyValueStore(
        {
            "classes": json.dumps([{"id": 7, "name": "7B"}, {"id": 8, "name": "8C"}]),
            "students": json.dumps([]),
        }
    )
    loaded = KeyValueRosterRepository(store).load()

    assert loaded.history == {}
    assert loaded.selected_class_id == 7


def test_stale_selection_is_repaired_to_first_class():
    store = InMemoryKeyValueStore(
        {
            "classes": json.dumps([{"id": 7, "name": "7B"}]),
            "students": json.dumps([]),
            "selectedClassId": "42",
        }
    )
    assert KeyValueRosterRepository(store).load().selected_class_id == 7


def test_stored_unmarked_entries_are_dropped():
    store = InMemoryKeyValueStore(
        {
            "classes": json.dumps([{"id": 1, "name": "A"}]),
            "students": json.dumps([{"id": 1, "name": "X", "rollNumber": "1", "classId": 1}]),
            "attendanceHistory": json.dumps({"2024-01-01": {"1": "Unmarked"}, "2024-01-02": {"1": "Absent"}}),
        }
    )
    loaded = KeyValueRosterRepository(store).load()

    assert loaded.history == {"2024-01-02": {1: AttendanceStatus.ABSENT}}


def test_orphaned_students_are_kept_but_logged(caplog):
    store = InMemoryKeyValueStore(
        {
            "classes": json.dumps([{"id": 1, "name": "A"}]),
            "students": json.dumps([{"id": 5, "name": "Lost", "rollNumber": "L1", "classId": 9}]),
        }
    )
    with caplog.at_level(logging.WARNING):
        loaded = KeyValueRosterRepository(store).load()

    assert len(loaded.students) == 1
    assert "missing class" in caplog.text
