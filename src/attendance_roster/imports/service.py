from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..common.validators import roll_key
from ..core.exceptions import NoClassSelectedError
from ..roster.session import RosterSession
from ..students.model import Student
from .model import ImportPreview, ImportResult, ImportRow
from .parser import RosterFileParser

logger = logging.getLogger(__name__)


def classify_rows(rows: Sequence[ImportRow], existing_roll_numbers: Iterable[str]) -> ImportPreview:
    """Split rows into accepted and duplicate ones in a single pass.

    A row is a duplicate when its roll number (case-insensitive) belongs to an
    existing student or appeared earlier in the same batch; the first
    occurrence wins.
    """
    existing = {roll_key(r) for r in existing_roll_numbers}
    seen: set[str] = set()
    accepted: list[ImportRow] = []
    duplicates: list[ImportRow] = []
    for row in rows:
        key = roll_key(row.roll_number)
        if key in existing or key in seen:
            duplicates.append(row)
        else:
            accepted.append(row)
        seen.add(key)
    return ImportPreview(accepted=tuple(accepted), duplicates=tuple(duplicates))


class ImportService:
    """Use case: bulk import students from a spreadsheet."""

    def __init__(self, session: RosterSession, parser: Optional[RosterFileParser] = None):
        self._session = session
        self._parser = parser or RosterFileParser()

    def parse_file(self, data: bytes, filename: str) -> list[ImportRow]:
        return self._parser.parse(data, filename)

    def preview(self, rows: Sequence[ImportRow]) -> ImportPreview:
        return classify_rows(rows, (s.roll_number for s in self._session.snapshot.students))

    def import_students(self, rows: Sequence[ImportRow], class_id: Optional[int]) -> ImportResult:
        snap = self._session.snapshot
        if class_id is None or not snap.get_class(int(class_id)):
            raise NoClassSelectedError("A class must be selected to import students.")

        preview = self.preview(rows)
        if preview.has_duplicates:
            logger.info("Skipping %d duplicate roll number(s) on import", len(preview.duplicates))
        if not preview.accepted:
            return ImportResult(imported=(), skipped=preview.duplicates)

        max_id = max((s.id for s in snap.students), default=0)
        new_students = tuple(
            Student(id=max_id + index + 1, name=row.name, roll_number=row.roll_number, class_id=int(class_id))
            for index, row in enumerate(preview.accepted)
        )
        self._session.commit(replace(snap, students=snap.students + new_students))
        logger.info("Imported %d student(s) into class %s", len(new_students), class_id)
        return ImportResult(imported=new_students, skipped=preview.duplicates)

    def import_file(self, data: bytes, filename: str, class_id: Optional[int]) -> ImportResult:
        if class_id is None or not self._session.snapshot.get_class(int(class_id)):
            raise NoClassSelectedError("A class must be selected to import students.")
        return self.import_students(self.parse_file(data, filename), class_id)
