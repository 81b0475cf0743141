"""Pure read-side derivations over the roster model."""

from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import AttendanceHistory, AttendanceSummary, CurrentRecords, HistoryEntry
from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import Snapshot


def students_in_class(students: Sequence[Student], class_id: Optional[int]) -> list[Student]:
    if class_id is None:
        return []
    return [s for s in students if s.class_id == class_id]


def filtered_students(in_class: Sequence[Student], query: str) -> list[Student]:
    q = (query or "").strip().lower()
    if not q:
        return list(in_class)
    return [s for s in in_class if q in s.name.lower() or q in s.roll_number.lower()]


def current_records(history: AttendanceHistory, day: str, in_class: Sequence[Student]) -> dict[int, AttendanceStatus]:
    records = history.get(day, {})
    return {s.id: records.get(s.id, AttendanceStatus.UNMARKED) for s in in_class}


def is_attendance_complete(records: CurrentRecords, in_class: Sequence[Student]) -> bool:
    if not in_class:
        return False
    return all(records.get(s.id, AttendanceStatus.UNMARKED).is_marked for s in in_class)


def summarize(records: CurrentRecords) -> AttendanceSummary:
    present = absent = unmarked = 0
    for status in records.values():
        if status is AttendanceStatus.PRESENT:
            present += 1
        elif status is AttendanceStatus.ABSENT:
            absent += 1
        else:
            unmarked += 1
    return AttendanceSummary(present=present, absent=absent, unmarked=unmarked)


def marked_count(records: CurrentRecords) -> int:
    return sum(1 for status in records.values() if status.is_marked)


def student_history(history: AttendanceHistory, student_id: int) -> list[HistoryEntry]:
    """Marked days of one student, newest first."""
    entries = [
        HistoryEntry(date=day, status=records[student_id])
        for day, records in history.items()
        if student_id in records
    ]
    entries.sort(key=lambda e: e.date, reverse=True)
    return entries


def orphaned_students(snapshot: Snapshot) -> list[Student]:
    class_ids = {c.id for c in snapshot.classes}
    return [s for s in snapshot.students if s.class_id not in class_ids]
