from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceReport


class ReportExporter(ABC):
    """Renders an AttendanceReport into a downloadable document."""

    extension: str = ""
    mimetype: str = "application/octet-stream"

    @abstractmethod
    def render(self, report: AttendanceReport) -> bytes:
        raise NotImplementedError
