from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ..attendance.model import AttendanceHistory
from ..classes.model import SchoolClass
from ..students.model import Student


@dataclass(frozen=True)
class Snapshot:
    """The whole persisted roster at one point in time.

    Snapshots are never changed in place; mutations build a new one.
    """

    classes: tuple[SchoolClass, ...] = ()
    students: tuple[Student, ...] = ()
    history: AttendanceHistory = field(default_factory=dict)
    selected_class_id: Optional[int] = None

    def get_class(self, class_id: Optional[int]) -> Optional[SchoolClass]:
        for cls in self.classes:
            if cls.id == class_id:
                return cls
        return None

    def get_student(self, student_id: int) -> Optional[Student]:
        for student in self.students:
            if student.id == student_id:
                return student
        return None

    @property
    def selected_class(self) -> Optional[SchoolClass]:
        return self.get_class(self.selected_class_id)

    def with_valid_selection(self) -> "Snapshot":
        """Fall back to the first class when the selected one is gone."""
        if self.selected_class_id is not None and self.get_class(self.selected_class_id):
            return self
        fallback = self.classes[0].id if self.classes else None
        if fallback == self.selected_class_id:
            return self
        return replace(self, selected_class_id=fallback)
