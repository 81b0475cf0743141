from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import date_key
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..core.pending import PendingAction
from ..roster.derivations import (
    current_records,
    is_attendance_complete,
    marked_count,
    students_in_class,
    summarize,
)
from ..roster.session import RosterSession
from .history import with_status, without_entries
from .model import AttendanceSummary

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: mark daily attendance for the students of a class."""

    def __init__(self, session: RosterSession):
        self._session = session

    def _in_class(self, class_id: Optional[int]):
        return students_in_class(self._session.snapshot.students, class_id)

    def records_for(self, day, class_id: Optional[int]) -> dict[int, AttendanceStatus]:
        return current_records(self._session.snapshot.history, date_key(day), self._in_class(class_id))

    def summary(self, day, class_id: Optional[int]) -> AttendanceSummary:
        return summarize(self.records_for(day, class_id))

    def is_complete(self, day, class_id: Optional[int]) -> bool:
        return is_attendance_complete(self.records_for(day, class_id), self._in_class(class_id))

    def set_status(self, day, student_id: int, status: AttendanceStatus | str) -> None:
        status = AttendanceStatus(status)
        snap = self._session.snapshot
        student = snap.get_student(int(student_id))
        if not student:
            raise ValidationError("Student does not exist")
        self._session.commit(replace(snap, history=with_status(snap.history, date_key(day), [student.id], status)))

    def clear_student_status(self, day, student_id: int) -> None:
        self.set_status(day, student_id, AttendanceStatus.UNMARKED)

    def propose_mark_all(self, day, class_id: Optional[int], status: AttendanceStatus | str) -> Optional[PendingAction]:
        status = AttendanceStatus(status)
        if not status.is_marked:
            raise ValidationError("Bulk marking needs Present or Absent")
        if not self._in_class(class_id):
            return None

        key = date_key(day)

        def _apply() -> None:
            ids = [s.id for s in self._in_class(class_id)]
            snap = self._session.snapshot
            self._session.commit(replace(snap, history=with_status(snap.history, key, ids, status)))
            logger.info("Marked %d student(s) %s on %s", len(ids), status.value, key)

        return PendingAction(
            title=f"Mark All {status.value}",
            description=f"Are you sure you want to mark all students as {status.value} for the selected date?",
            confirm_text="Yes",
            _apply=_apply,
        )

    def propose_mark_all_present(self, day, class_id: Optional[int]) -> Optional[PendingAction]:
        return self.propose_mark_all(day, class_id, AttendanceStatus.PRESENT)

    def propose_mark_all_absent(self, day, class_id: Optional[int]) -> Optional[PendingAction]:
        return self.propose_mark_all(day, class_id, AttendanceStatus.ABSENT)

    def propose_clear_status(self, day, class_id: Optional[int]) -> Optional[PendingAction]:
        if marked_count(self.records_for(day, class_id)) == 0:
            return None

        key = date_key(day)

        def _apply() -> None:
            ids = [s.id for s in self._in_class(class_id)]
            snap = self._session.snapshot
            self._session.commit(replace(snap, history=without_entries(snap.history, key, ids)))
            logger.info("Cleared attendance of class %s on %s", class_id, key)

        return PendingAction(
            title="Clear Attendance Status",
            description="Are you sure you want to clear attendance status for all marked students?",
            confirm_text="Yes",
            _apply=_apply,
        )
