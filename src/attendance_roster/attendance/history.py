"""Copy-on-write helpers over AttendanceHistory.

Every function returns a new mapping and leaves its input untouched; buckets
that end up empty are dropped so the history never holds empty dates.
"""

from __future__ import annotations

from typing import Iterable

from ..core.enums import AttendanceStatus
from .model import AttendanceHistory


def _copy(history: AttendanceHistory) -> dict[str, dict[int, AttendanceStatus]]:
    return {day: dict(records) for day, records in history.items()}


def with_status(
    history: AttendanceHistory,
    day: str,
    student_ids: Iterable[int],
    status: AttendanceStatus,
) -> dict[str, dict[int, AttendanceStatus]]:
    if status is AttendanceStatus.UNMARKED:
        return without_entries(history, day, student_ids)

    out = _copy(history)
    bucket = out.setdefault(day, {})
    for student_id in student_ids:
        bucket[int(student_id)] = status
    if not bucket:
        del out[day]
    return out


def without_entries(
    history: AttendanceHistory, day: str, student_ids: Iterable[int]
) -> dict[str, dict[int, AttendanceStatus]]:
    out = _copy(history)
    bucket = out.get(day)
    if bucket is None:
        return out
    for student_id in student_ids:
        bucket.pop(int(student_id), None)
    if not bucket:
        del out[day]
    return out


def without_students(
    history: AttendanceHistory, student_ids: Iterable[int]
) -> dict[str, dict[int, AttendanceStatus]]:
    """Purge the given students from every date."""
    removed = {int(s) for s in student_ids}
    out: dict[str, dict[int, AttendanceStatus]] = {}
    for day, records in history.items():
        kept = {sid: status for sid, status in records.items() if sid not in removed}
        if kept:
            out[day] = kept
    return out
