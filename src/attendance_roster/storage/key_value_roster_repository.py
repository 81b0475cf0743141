from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..attendance.model import AttendanceHistory
from ..classes.model import SchoolClass
from ..core.constants import (
    CLASSES_KEY,
    DEFAULT_CLASS,
    DEFAULT_STUDENTS,
    HISTORY_KEY,
    SELECTED_CLASS_KEY,
    STUDENTS_KEY,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import CorruptPersistedStateError
from ..roster.derivations import orphaned_students
from ..roster.model import Snapshot
from ..students.model import Student
from .key_value import KeyValueStore

logger = logging.getLogger(__name__)


def default_snapshot() -> Snapshot:
    """Roster for first-time users."""
    return Snapshot(
        classes=(_class_from_json(DEFAULT_CLASS),),
        students=tuple(_student_from_json(s) for s in DEFAULT_STUDENTS),
        history={},
        selected_class_id=DEFAULT_CLASS["id"],
    )


def _require_int(value: Any, what: str) -> int:
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, int):
        raise CorruptPersistedStateError(f"{what} must be an integer, got {value!r}")
    return value


def _require_str(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise CorruptPersistedStateError(f"{what} must be a string, got {value!r}")
    return value


def _class_from_json(raw: Any) -> SchoolClass:
    if not isinstance(raw, dict):
        raise CorruptPersistedStateError(f"class entry must be an object, got {raw!r}")
    return SchoolClass(id=_require_int(raw.get("id"), "class id"), name=_require_str(raw.get("name"), "class name"))


def _student_from_json(raw: Any) -> Student:
    if not isinstance(raw, dict):
        raise CorruptPersistedStateError(f"student entry must be an object, got {raw!r}")
    return Student(
        id=_require_int(raw.get("id"), "student id"),
        name=_require_str(raw.get("name"), "student name"),
        roll_number=_require_str(raw.get("rollNumber"), "roll number"),
        class_id=_require_int(raw.get("classId"), "student classId"),
    )


def _history_from_json(raw: Any) -> dict[str, dict[int, AttendanceStatus]]:
    if not isinstance(raw, dict):
        raise CorruptPersistedStateError("attendanceHistory must be an object")

    history: dict[str, dict[int, AttendanceStatus]] = {}
    for day, records in raw.items():
        if not isinstance(records, dict):
            raise CorruptPersistedStateError(f"attendance for {day} must be an object")
        bucket: dict[int, AttendanceStatus] = {}
        for student_id, status in records.items():
            try:
                sid = int(student_id)
                value = AttendanceStatus(status)
            except (TypeError, ValueError) as e:
                raise CorruptPersistedStateError(f"bad attendance entry {student_id!r}: {status!r}") from e
            if value.is_marked:
                bucket[sid] = value
        if bucket:
            history[str(day)] = bucket
    return history


def snapshot_to_layout(snapshot: Snapshot) -> dict[str, Any]:
    """Plain JSON-ready values for the four persisted keys."""
    layout: dict[str, Any] = {
        CLASSES_KEY: [{"id": c.id, "name": c.name} for c in snapshot.classes],
        STUDENTS_KEY: [
            {"id": s.id, "name": s.name, "rollNumber": s.roll_number, "classId": s.class_id}
            for s in snapshot.students
        ],
        HISTORY_KEY: {
            day: {str(sid): status.value for sid, status in records.items() if status.is_marked}
            for day, records in snapshot.history.items()
        },
    }
    if snapshot.selected_class_id is not None:
        layout[SELECTED_CLASS_KEY] = snapshot.selected_class_id
    return layout


class KeyValueRosterRepository:
    """Stores a Snapshot as four independent JSON values in a key-value store."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _get_json(self, key: str) -> Optional[Any]:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError as e:
            raise CorruptPersistedStateError(f"{key} is not valid JSON") from e

    def _decode(self) -> Optional[Snapshot]:
        raw_classes = self._get_json(CLASSES_KEY)
        raw_students = self._get_json(STUDENTS_KEY)
        if raw_classes is None or raw_students is None:
            return None
        if not isinstance(raw_classes, list) or not isinstance(raw_students, list):
            raise CorruptPersistedStateError("classes and students must be arrays")

        classes = tuple(_class_from_json(c) for c in raw_classes)
        students = tuple(_student_from_json(s) for s in raw_students)

        raw_history = self._get_json(HISTORY_KEY)
        history: AttendanceHistory = _history_from_json(raw_history) if raw_history is not None else {}

        raw_selected = self._get_json(SELECTED_CLASS_KEY)
        selected = _require_int(raw_selected, "selectedClassId") if raw_selected is not None else None

        snapshot = Snapshot(classes=classes, students=students, history=history, selected_class_id=selected)
        return snapshot.with_valid_selection()

    def load(self) -> Snapshot:
        try:
            snapshot = self._decode()
        except (CorruptPersistedStateError, OSError, ValueError):
            logger.exception("Could not parse stored roster, falling back to the default roster")
            return default_snapshot()

        if snapshot is None:
            logger.info("No stored roster found, starting with the default roster")
            return default_snapshot()

        orphans = orphaned_students(snapshot)
        if orphans:
            logger.warning("%d stored student(s) reference a missing class and are hidden", len(orphans))
        return snapshot

    def save(self, snapshot: Snapshot) -> None:
        layout = snapshot_to_layout(snapshot)
        self._store.set(CLASSES_KEY, json.dumps(layout[CLASSES_KEY]))
        self._store.set(STUDENTS_KEY, json.dumps(layout[STUDENTS_KEY]))
        self._store.set(HISTORY_KEY, json.dumps(layout[HISTORY_KEY]))
        if SELECTED_CLASS_KEY in layout:
            self._store.set(SELECTED_CLASS_KEY, json.dumps(layout[SELECTED_CLASS_KEY]))
        else:
            self._store.remove(SELECTED_CLASS_KEY)
