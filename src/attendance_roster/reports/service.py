from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import date_key
from ..roster.derivations import current_records, students_in_class, summarize
from ..roster.session import RosterSession
from .exporters.base import ReportExporter
from .exporters.pdf_exporter import PdfReportExporter
from .model import AttendanceReport, ReportRow


class ReportService:
    def __init__(self, session: RosterSession, *, exporter: Optional[ReportExporter] = None):
        self._session = session
        self._exporter = exporter or PdfReportExporter()

    def build_attendance_report(self, *, class_id: Optional[int], day) -> AttendanceReport:
        key = date_key(day)
        snap = self._session.snapshot
        cls = snap.get_class(class_id) if class_id is not None else None
        in_class = students_in_class(snap.students, cls.id if cls else None)
        records = current_records(snap.history, key, in_class)
        summary = summarize(records)

        return AttendanceReport(
            class_name=cls.name if cls else "N/A",
            report_date=key,
            rows=tuple(ReportRow(s.roll_number, s.name, records[s.id]) for s in in_class),
            summary_rows=(
                ("Total Students", len(in_class)),
                ("Present", summary.present),
                ("Absent", summary.absent),
            ),
            filename_stem=f"attendance_{cls.name if cls else 'report'}_{key}",
        )

    def export(self, *, class_id: Optional[int], day, exporter: Optional[ReportExporter] = None) -> tuple[str, bytes]:
        """Render the report, returning (download name, file bytes)."""
        exporter = exporter or self._exporter
        report = self.build_attendance_report(class_id=class_id, day=day)
        return report.filename(exporter.extension), exporter.render(report)
