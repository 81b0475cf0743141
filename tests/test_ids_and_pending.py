from __future__ import annotations

from attendance_roster.common.ids import MonotonicIdGenerator
from attendance_roster.core.pending import PendingAction, PendingActionRegistry


def test_ids_increase_even_with_a_stuck_clock():
    ids = MonotonicIdGenerator(clock=lambda: 100)

    assert [ids.next_id(), ids.next_id(), ids.next_id()] == [100, 101, 102]


def test_ids_stay_above_existing_ids():
    ids = MonotonicIdGenerator(clock=lambda: 10)
    assert ids.next_id([5, 500]) == 501


def test_registry_confirm_applies_and_forgets():
    calls = []
    registry = PendingActionRegistry()
    token = registry.stage(PendingAction("T", "d", "Yes", lambda: calls.append(1)))

    assert registry.confirm(token) is not None
    assert calls == [1]
    assert registry.confirm(token) is None
    assert len(registry) == 0


def test_registry_cancel_never_applies():
    calls = []
    registry = PendingActionRegistry()
    token = registry.stage(PendingAction("T", "d", "Yes", lambda: calls.append(1)))

    registry.cancel(token)

    assert calls == []
    assert registry.confirm(token) is None


def test_registry_drops_oldest_unanswered_actions_past_the_cap():
    calls = []
    registry = PendingActionRegistry(max_pending=2)
    first = registry.stage(PendingAction("first", "d", "Yes", lambda: calls.append("first")))
    registry.stage(PendingAction("second", "d", "Yes", lambda: calls.append("second")))
    third = registry.stage(PendingAction("third", "d", "Yes", lambda: calls.append("third")))

    assert len(registry) == 2
    assert registry.confirm(first) is None
    assert registry.confirm(third) is not None
    assert calls == ["third"]
