from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from ..attendance.history import without_students
from ..attendance.model import HistoryEntry
from ..common.validators import require_non_empty, roll_key
from ..core.exceptions import DuplicateRollNumberError, NoClassSelectedError, ValidationError
from ..core.pending import PendingAction
from ..roster.derivations import filtered_students, student_history, students_in_class
from ..roster.session import RosterSession
from .model import Student

logger = logging.getLogger(__name__)

FIELDS_REQUIRED = "Both name and roll number are required."


class StudentService:
    """Use case: manage the students of a class."""

    def __init__(self, session: RosterSession):
        self._session = session

    def list_students(self, class_id: Optional[int], query: str = "") -> list[Student]:
        return filtered_students(students_in_class(self._session.snapshot.students, class_id), query)

    def get_student(self, student_id: int) -> Student:
        student = self._session.snapshot.get_student(int(student_id))
        if not student:
            raise ValidationError("Student does not exist")
        return student

    def history(self, student_id: int) -> list[HistoryEntry]:
        student = self.get_student(student_id)
        return student_history(self._session.snapshot.history, student.id)

    def _check_roll_number(self, class_id: int, roll_number: str, *, exclude_id: Optional[int] = None) -> None:
        key = roll_key(roll_number)
        for other in students_in_class(self._session.snapshot.students, class_id):
            if other.id != exclude_id and roll_key(other.roll_number) == key:
                raise DuplicateRollNumberError(roll_number, other)

    def add_student(self, *, name: str, roll_number: str, class_id: Optional[int]) -> Student:
        snap = self._session.snapshot
        if class_id is None or not snap.get_class(int(class_id)):
            raise NoClassSelectedError("A class must be selected to add a student.")

        name = require_non_empty(name, FIELDS_REQUIRED)
        roll_number = require_non_empty(roll_number, FIELDS_REQUIRED)
        self._check_roll_number(int(class_id), roll_number)

        student = Student(
            id=self._session.new_id(s.id for s in snap.students),
            name=name,
            roll_number=roll_number,
            class_id=int(class_id),
        )
        self._session.commit(replace(snap, students=snap.students + (student,)))
        logger.info("Added student %s (%s) to class %s", student.id, student.roll_number, student.class_id)
        return student

    def edit_student(self, student_id: int, *, name: str, roll_number: str) -> Student:
        current = self.get_student(student_id)
        name = require_non_empty(name, FIELDS_REQUIRED)
        roll_number = require_non_empty(roll_number, FIELDS_REQUIRED)
        self._check_roll_number(current.class_id, roll_number, exclude_id=current.id)

        updated = replace(current, name=name, roll_number=roll_number)
        snap = self._session.snapshot
        students = tuple(updated if s.id == current.id else s for s in snap.students)
        self._session.commit(replace(snap, students=students))
        return updated

    def propose_delete_student(self, student_id: int) -> PendingAction:
        student = self.get_student(student_id)
        return PendingAction(
            title="Delete Student",
            description=(
                f"Are you sure you want to delete {student.name or 'this student'} and all their "
                "attendance records? This action cannot be undone."
            ),
            confirm_text="Delete",
            _apply=lambda: self._delete_students([student.id]),
        )

    def propose_bulk_delete(self, student_ids: Optional[Iterable[int]] = None) -> Optional[PendingAction]:
        """Stage deletion of the given ids, or of the current selection."""
        ids = sorted({int(s) for s in (self._session.selected_ids if student_ids is None else student_ids)})
        if not ids:
            return None

        def _apply() -> None:
            self._delete_students(ids)
            self._session.clear_selection()

        return PendingAction(
            title="Delete Multiple Students",
            description=(
                f"Are you sure you want to delete {len(ids)} selected student(s) and all their "
                "attendance records? This action cannot be undone."
            ),
            confirm_text="Delete",
            _apply=_apply,
        )

    def _delete_students(self, student_ids: list[int]) -> None:
        removed = set(student_ids)
        snap = self._session.snapshot
        self._session.deselect(removed)
        self._session.commit(
            replace(
                snap,
                students=tuple(s for s in snap.students if s.id not in removed),
                history=without_students(snap.history, removed),
            )
        )
        logger.info("Deleted %d student(s)", len(removed))

    # Bulk selection

    def select(self, student_id: int, checked: bool = True) -> frozenset[int]:
        self._session.select_student(student_id, checked)
        return self._session.selected_ids

    def select_all(self, class_id: Optional[int], query: str = "", checked: bool = True) -> frozenset[int]:
        self._session.select_all((s.id for s in self.list_students(class_id, query)), checked)
        return self._session.selected_ids

    @property
    def selected_ids(self) -> frozenset[int]:
        return self._session.selected_ids
