from __future__ import annotations

import io

import pandas as pd

from ...core.constants import REPORT_COLUMNS
from ..model import AttendanceReport
from .base import ReportExporter


class ExcelReportExporter(ReportExporter):
    extension = "xlsx"
    mimetype = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

    def render(self, report: AttendanceReport) -> bytes:
        roster = pd.DataFrame(
            [[r.roll_number, r.name, r.status.value] for r in report.rows],
            columns=list(REPORT_COLUMNS),
        )
        summary = pd.DataFrame(list(report.summary_rows), columns=["Metric", "Count"])

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            roster.to_excel(writer, index=False, sheet_name="Roster")
            summary.to_excel(writer, index=False, sheet_name="Summary")
        return out.getvalue()
