from __future__ import annotations

from dataclasses import dataclass

from ..students.model import Student


@dataclass(frozen=True)
class ImportRow:
    """Candidate student read from an uploaded file.

    ``position`` is the zero-based index among the parsed rows.
    """

    position: int
    roll_number: str
    name: str = ""


@dataclass(frozen=True)
class ImportPreview:
    accepted: tuple[ImportRow, ...]
    duplicates: tuple[ImportRow, ...]

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)


@dataclass(frozen=True)
class ImportResult:
    imported: tuple[Student, ...]
    skipped: tuple[ImportRow, ...]

    @property
    def imported_count(self) -> int:
        return len(self.imported)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
