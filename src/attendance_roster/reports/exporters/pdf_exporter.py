from __future__ import annotations

import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...core.constants import REPORT_COLUMNS, REPORT_TITLE, SUMMARY_TITLE
from ..model import AttendanceReport
from .base import ReportExporter

logger = logging.getLogger(__name__)

HEADER_GREY = colors.Color(75 / 255, 85 / 255, 99 / 255)
SUMMARY_INDIGO = colors.Color(49 / 255, 46 / 255, 229 / 255)


class PdfReportExporter(ReportExporter):
    extension = "pdf"
    mimetype = "application/pdf"

    def _roster_table(self, report: AttendanceReport) -> Table:
        data = [list(REPORT_COLUMNS)]
        data.extend([r.roll_number, r.name, r.status.value] for r in report.rows)

        table = Table(data, repeatRows=1, hAlign="LEFT")
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), HEADER_GREY),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("ALIGN", (0, 0), (-1, -1), "LEFT"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ]
        # striped body rows
        for i in range(1, len(data)):
            if i % 2 == 0:
                style.append(("BACKGROUND", (0, i), (-1, i), colors.whitesmoke))
        table.setStyle(TableStyle(style))
        return table

    def _summary_table(self, report: AttendanceReport) -> Table:
        data = [[SUMMARY_TITLE, ""]]
        data.extend([label, str(count)] for label, count in report.summary_rows)

        table = Table(data, hAlign="LEFT")
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), SUMMARY_INDIGO),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ]
            )
        )
        return table

    def render(self, report: AttendanceReport) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(buf, pagesize=A4, title=f"{REPORT_TITLE} - {report.class_name}")
        styles = getSampleStyleSheet()

        elements = [
            Paragraph(REPORT_TITLE, styles["Heading1"]),
            Paragraph(f"Class: {escape(report.class_name)}", styles["Normal"]),
            Paragraph(f"Date: {report.report_date}", styles["Normal"]),
            Spacer(1, 12),
            self._roster_table(report),
            Spacer(1, 20),
            self._summary_table(report),
        ]
        doc.build(elements)
        logger.debug("Rendered PDF report for %s on %s", report.class_name, report.report_date)
        return buf.getvalue()
