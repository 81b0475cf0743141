from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceService
from .classes.service import ClassService
from .core.enums import StorageBackend
from .core.pending import PendingActionRegistry
from .imports.parser import RosterFileParser
from .imports.service import ImportService
from .reports.exporters.excel_exporter import ExcelReportExporter
from .reports.exporters.pdf_exporter import PdfReportExporter
from .reports.service import ReportService
from .roster.session import RosterSession
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.key_value import InMemoryKeyValueStore, KeyValueStore
from .storage.key_value_roster_repository import KeyValueRosterRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    repository: KeyValueRosterRepository
    session: RosterSession
    pending: PendingActionRegistry

    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    import_service: ImportService
    report_service: ReportService

    pdf_exporter: PdfReportExporter
    excel_exporter: ExcelReportExporter


def build_store(*, backend: str, path: Optional[str] = None) -> KeyValueStore:
    if StorageBackend(backend) is StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if not path:
        raise ValueError("STORAGE_PATH is required for the file backend")
    return JsonFileKeyValueStore(Path(path))


def build_container(*, storage_backend: str = "memory", storage_path: Optional[str] = None, store: Optional[KeyValueStore] = None) -> Container:
    store = store if store is not None else build_store(backend=storage_backend, path=storage_path)
    repository = KeyValueRosterRepository(store)
    session = RosterSession(repository)

    pdf_exporter = PdfReportExporter()
    excel_exporter = ExcelReportExporter()

    return Container(
        store=store,
        repository=repository,
        session=session,
        pending=PendingActionRegistry(),
        class_service=ClassService(session),
        student_service=StudentService(session),
        attendance_service=AttendanceService(session),
        import_service=ImportService(session, RosterFileParser()),
        report_service=ReportService(session, exporter=pdf_exporter),
        pdf_exporter=pdf_exporter,
        excel_exporter=excel_exporter,
    )
