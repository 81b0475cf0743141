from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class ReportRow:
    roll_number: str
    name: str
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceReport:
    """Read-model of one class on one date, ready for rendering."""

    class_name: str
    report_date: str
    rows: tuple[ReportRow, ...]
    summary_rows: tuple[tuple[str, int], ...]
    filename_stem: str

    def filename(self, extension: str) -> str:
        return f"{self.filename_stem}.{extension.lstrip('.')}"
