from __future__ import annotations

import pytest

from attendance_roster.attendance.service import AttendanceService
from attendance_roster.classes.model import SchoolClass
from attendance_roster.classes.service import ClassService
from attendance_roster.common.ids import MonotonicIdGenerator
from attendance_roster.core.enums import AttendanceStatus
from attendance_roster.imports.service import ImportService
from attendance_roster.reports.service import ReportService
from attendance_roster.roster.model import Snapshot
from attendance_roster.roster.session import RosterSession
from attendance_roster.students.model import Student
from attendance_roster.students.service import StudentService


class RecordingRepository:
    """In-memory RosterRepository that keeps every saved snapshot."""

    def __init__(self, snapshot: Snapshot):
        self._snapshot = snapshot
        self.saved: list[Snapshot] = []

    def load(self) -> Snapshot:
        return self._snapshot

    def save(self, snapshot: Snapshot) -> None:
        self._snapshot = snapshot
        self.saved.append(snapshot)


@pytest.fixture
def alice():
    return Student(id=1, name="Alice", roll_number="S001", class_id=1)


@pytest.fixture
def bob():
    return Student(id=2, name="Bob", roll_number="S002", class_id=1)


@pytest.fixture
def carol():
    return Student(id=3, name="Carol", roll_number="S003", class_id=2)


@pytest.fixture
def snapshot(alice, bob, carol):
    return Snapshot(
        classes=(SchoolClass(id=1, name="10A"), SchoolClass(id=2, name="10B")),
        students=(alice, bob, carol),
        history={"2024-01-09": {1: AttendanceStatus.PRESENT, 3: AttendanceStatus.ABSENT}},
        selected_class_id=1,
    )


@pytest.fixture
def repo(snapshot):
    return RecordingRepository(snapshot)


@pytest.fixture
def session(repo):
    # fixed clock: ids come out as 5000, 5001, ...
    return RosterSession(repo, ids=MonotonicIdGenerator(clock=lambda: 5000))


@pytest.fixture
def class_service(session):
    return ClassService(session)


@pytest.fixture
def student_service(session):
    return StudentService(session)


@pytest.fixture
def attendance_service(session):
    return AttendanceService(session)


@pytest.fixture
def import_service(session):
    return ImportService(session)


@pytest.fixture
def report_service(session):
    return ReportService(session)
