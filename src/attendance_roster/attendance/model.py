from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.enums import AttendanceStatus

# date key (YYYY-MM-DD) -> student id -> PRESENT/ABSENT
AttendanceHistory = Mapping[str, Mapping[int, AttendanceStatus]]

# student id -> status, one entry per in-class student
CurrentRecords = Mapping[int, AttendanceStatus]


@dataclass(frozen=True)
class AttendanceSummary:
    present: int
    absent: int
    unmarked: int

    @property
    def total(self) -> int:
        return self.present + self.absent + self.unmarked


@dataclass(frozen=True)
class HistoryEntry:
    """One marked day of a single student."""

    date: str
    status: AttendanceStatus
