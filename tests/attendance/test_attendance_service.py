from __future__ import annotations

from datetime import date, datetime

import pytest

from attendance_roster.core.enums import AttendanceStatus
from attendance_roster.core.exceptions import ValidationError
from attendance_roster.imports.model import ImportRow

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT
U = AttendanceStatus.UNMARKED


def test_set_status_creates_date_bucket(attendance_service, session, repo):
    attendance_service.set_status("2024-01-10", 2, P)

    assert session.snapshot.history["2024-01-10"] == {2: P}
    assert repo.saved[-1].history["2024-01-10"] == {2: P}


def test_set_status_accepts_date_objects_and_strings(attendance_service, session):
    attendance_service.set_status(date(2024, 1, 10), 1, "Absent")
    assert session.snapshot.history["2024-01-10"] == {1: A}


def test_set_status_keys_datetimes_by_calendar_day(attendance_service, session):
    attendance_service.set_status(datetime(2024, 1, 10, 14, 30), 1, P)

    assert session.snapshot.history["2024-01-10"] == {1: P}


def test_set_status_is_idempotent(attendance_service, session):
    attendance_service.set_status("2024-01-10", 1, P)
    once = session.snapshot
    attendance_service.set_status("2024-01-10", 1, P)

    assert session.snapshot == once


def test_clearing_single_status_removes_entry_and_empty_bucket(attendance_service, session):
    attendance_service.set_status("2024-01-10", 1, P)
    attendance_service.clear_student_status("2024-01-10", 1)

    assert "2024-01-10" not in session.snapshot.history


def test_set_status_rejects_unknown_student_so_imports_start_unmarked(attendance_service, import_service, session):
    with pytest.raises(ValidationError):
        attendance_service.set_status("2024-01-10", 4, P)
    assert "2024-01-10" not in session.snapshot.history

    result = import_service.import_students([ImportRow(0, "NEW1", "Newcomer")], 1)

    assert result.imported[0].id == 4
    assert attendance_service.records_for("2024-01-10", 1)[4] is U


def test_bad_date_rejected(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.set_status("10/01/2024", 1, P)


def test_records_summary_and_completeness(attendance_service):
    attendance_service.set_status("2024-01-10", 1, P)
    assert attendance_service.records_for("2024-01-10", 1) == {1: P, 2: U}
    assert attendance_service.is_complete("2024-01-10", 1) is False

    attendance_service.set_status("2024-01-10", 2, A)
    summary = attendance_service.summary("2024-01-10", 1)
    assert (summary.present, summary.absent, summary.unmarked) == (1, 1, 0)
    assert attendance_service.is_complete("2024-01-10", 1) is True


def test_mark_all_present_only_touches_class_after_confirm(attendance_service, session):
    pending = attendance_service.propose_mark_all_present("2024-01-10", 1)
    assert pending.title == "Mark All Present"
    assert "2024-01-10" not in session.snapshot.history

    pending.apply()

    assert session.snapshot.history["2024-01-10"] == {1: P, 2: P}


def test_mark_all_absent_overwrites_existing_marks(attendance_service, session):
    attendance_service.propose_mark_all_absent("2024-01-09", 1).apply()
    assert session.snapshot.history["2024-01-09"] == {1: A, 2: A, 3: A}


def test_mark_all_on_empty_class_is_noop(attendance_service, class_service):
    empty = class_service.add_class("Empty")
    assert attendance_service.propose_mark_all_present("2024-01-10", empty.id) is None
    assert attendance_service.propose_mark_all_present("2024-01-10", None) is None


def test_mark_all_unmarked_is_rejected(attendance_service):
    with pytest.raises(ValidationError):
        attendance_service.propose_mark_all("2024-01-10", 1, U)


def test_clear_status_only_for_class_and_drops_empty_bucket(attendance_service, session):
    pending = attendance_service.propose_clear_status("2024-01-09", 1)
    pending.apply()
    assert session.snapshot.history == {"2024-01-09": {3: A}}

    attendance_service.propose_clear_status("2024-01-09", 2).apply()
    assert session.snapshot.history == {}


def test_clear_status_with_nothing_marked_is_noop(attendance_service):
    assert attendance_service.propose_clear_status("2024-01-10", 1) is None
