from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily mark of a student. UNMARKED is never stored."""

    PRESENT = "Present"
    ABSENT = "Absent"
    UNMARKED = "Unmarked"

    @property
    def is_marked(self) -> bool:
        return self is not AttendanceStatus.UNMARKED


class StorageBackend(str, Enum):
    MEMORY = "memory"
    FILE = "file"
