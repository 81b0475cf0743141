from __future__ import annotations

from dataclasses import replace

from attendance_roster.classes.model import SchoolClass
from attendance_roster.roster.session import RosterSession


class FailingRepository:
    def __init__(self, snapshot):
        self._snapshot = snapshot

    def load(self):
        return self._snapshot

    def save(self, snapshot):
        raise OSError("disk full")


def test_commit_keeps_new_state_when_save_fails(snapshot, caplog):
    session = RosterSession(FailingRepository(snapshot))
    updated = replace(snapshot, classes=snapshot.classes + (SchoolClass(id=3, name="10C"),))

    result = session.commit(updated)

    assert result.get_class(3) is not None
    assert session.snapshot.get_class(3) is not None
    assert "Failed to persist roster" in caplog.text


def test_commit_clears_selection_when_selected_class_changes(session):
    session.select_student(1, True)
    session.commit(replace(session.snapshot, selected_class_id=2))

    assert session.selected_ids == frozenset()
