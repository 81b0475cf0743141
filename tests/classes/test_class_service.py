from __future__ import annotations

import pytest

from attendance_roster.core.enums import AttendanceStatus
from attendance_roster.core.exceptions import ValidationError


def test_add_class_selects_it_and_writes_through(class_service, session, repo):
    cls = class_service.add_class("  11C ")

    assert cls.name == "11C"
    assert cls.id == 5000
    assert session.snapshot.selected_class_id == cls.id
    assert repo.saved[-1] is session.snapshot


def test_add_class_requires_name(class_service, repo):
    with pytest.raises(ValidationError, match="Class name is required"):
        class_service.add_class("   ")
    assert repo.saved == []


def test_class_ids_are_not_reused(class_service):
    first = class_service.add_class("X")
    class_service.propose_delete_class(first.id).apply()
    second = class_service.add_class("Y")

    assert second.id > first.id


def test_edit_class_renames_in_place(class_service, session):
    class_service.edit_class(2, "10B (science)")

    assert [c.name for c in session.snapshot.classes] == ["10A", "10B (science)"]


def test_edit_unknown_class_rejected(class_service):
    with pytest.raises(ValidationError):
        class_service.edit_class(99, "Nope")


def test_select_class_ignores_unknown_ids(class_service, session, repo):
    class_service.select_class(99)
    assert session.snapshot.selected_class_id == 1
    assert repo.saved == []

    class_service.select_class(2)
    assert session.snapshot.selected_class_id == 2


def test_select_class_clears_bulk_selection(class_service, session):
    session.select_student(1, True)
    class_service.select_class(2)
    assert session.selected_ids == frozenset()


def test_delete_class_is_staged_until_confirmed(class_service, session):
    pending = class_service.propose_delete_class(1)

    assert pending.title == "Delete Class"
    assert '"10A"' in pending.description
    assert "2 student(s)" in pending.description
    assert len(session.snapshot.classes) == 2


def test_delete_class_cascades_to_students_and_history(class_service, attendance_service, session):
    attendance_service.set_status("2024-01-10", 2, AttendanceStatus.ABSENT)

    assert class_service.propose_delete_class(1).apply() is True

    snap = session.snapshot
    assert [c.id for c in snap.classes] == [2]
    assert {s.class_id for s in snap.students} == {2}
    remaining_ids = {sid for records in snap.history.values() for sid in records}
    assert remaining_ids == {3}
    assert "2024-01-10" not in snap.history


def test_deleting_selected_class_falls_back_to_first_remaining(class_service, session):
    class_service.select_class(2)
    class_service.propose_delete_class(2).apply()
    assert session.snapshot.selected_class_id == 1

    class_service.propose_delete_class(1).apply()
    assert session.snapshot.selected_class_id is None
    assert session.snapshot.classes == ()


def test_pending_action_applies_once(class_service, session):
    pending = class_service.propose_delete_class(2)

    assert pending.apply() is True
    assert pending.apply() is False
    assert [c.id for c in session.snapshot.classes] == [1]
