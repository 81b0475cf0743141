from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..attendance.history import without_students
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..core.pending import PendingAction
from ..roster.session import RosterSession
from .model import SchoolClass

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Class name is required."


class ClassService:
    """Use case: create, rename, delete and select classes."""

    def __init__(self, session: RosterSession):
        self._session = session

    def list_classes(self) -> tuple[SchoolClass, ...]:
        return self._session.snapshot.classes

    @property
    def selected_class(self) -> Optional[SchoolClass]:
        return self._session.snapshot.selected_class

    def _require_class(self, class_id: int) -> SchoolClass:
        cls = self._session.snapshot.get_class(int(class_id))
        if not cls:
            raise ValidationError("Class does not exist")
        return cls

    def add_class(self, name: str) -> SchoolClass:
        name = require_non_empty(name, NAME_REQUIRED)
        snap = self._session.snapshot
        cls = SchoolClass(id=self._session.new_id(c.id for c in snap.classes), name=name)
        self._session.commit(replace(snap, classes=snap.classes + (cls,), selected_class_id=cls.id))
        logger.info("Added class %s (%r)", cls.id, cls.name)
        return cls

    def edit_class(self, class_id: int, name: str) -> SchoolClass:
        name = require_non_empty(name, NAME_REQUIRED)
        current = self._require_class(class_id)
        updated = replace(current, name=name)
        snap = self._session.snapshot
        classes = tuple(updated if c.id == current.id else c for c in snap.classes)
        self._session.commit(replace(snap, classes=classes))
        return updated

    def select_class(self, class_id: Optional[int]) -> None:
        snap = self._session.snapshot
        if class_id is None or not snap.get_class(int(class_id)):
            logger.debug("Ignoring selection of unknown class %r", class_id)
            return
        if snap.selected_class_id == int(class_id):
            return
        self._session.commit(replace(snap, selected_class_id=int(class_id)))

    def propose_delete_class(self, class_id: int) -> PendingAction:
        cls = self._require_class(class_id)
        count = sum(1 for s in self._session.snapshot.students if s.class_id == cls.id)
        return PendingAction(
            title="Delete Class",
            description=(
                f'Are you sure you want to delete "{cls.name}"? This will also delete {count} student(s) '
                "and all their attendance records. This action is irreversible."
            ),
            confirm_text="Delete",
            _apply=lambda: self._delete_class(cls.id),
        )

    def _delete_class(self, class_id: int) -> None:
        snap = self._session.snapshot
        doomed = [s.id for s in snap.students if s.class_id == class_id]
        self._session.deselect(doomed)
        self._session.commit(
            replace(
                snap,
                classes=tuple(c for c in snap.classes if c.id != class_id),
                students=tuple(s for s in snap.students if s.class_id != class_id),
                history=without_students(snap.history, doomed),
            )
        )
        logger.info("Deleted class %s with %d student(s)", class_id, len(doomed))
