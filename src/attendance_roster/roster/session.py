from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.ids import MonotonicIdGenerator
from ..storage.repository import RosterRepository
from .model import Snapshot

logger = logging.getLogger(__name__)


class RosterSession:
    """Holds the single authoritative roster snapshot.

    Services read ``snapshot`` and hand a replacement to ``commit``, which
    swaps it in and writes it through the repository. The bulk-action
    selection lives here too but is never persisted.
    """

    def __init__(
        self,
        repository: RosterRepository,
        *,
        ids: Optional[MonotonicIdGenerator] = None,
        snapshot: Optional[Snapshot] = None,
    ):
        self._repository = repository
        self._ids = ids or MonotonicIdGenerator()
        self._snapshot = snapshot if snapshot is not None else repository.load()
        self._selected: set[int] = set()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def commit(self, snapshot: Snapshot) -> Snapshot:
        snapshot = snapshot.with_valid_selection()
        if snapshot.selected_class_id != self._snapshot.selected_class_id:
            self._selected.clear()
        self._snapshot = snapshot
        try:
            self._repository.save(snapshot)
        except OSError:
            logger.exception("Failed to persist roster; keeping in-memory state")
        return snapshot

    def reload(self) -> Snapshot:
        self._snapshot = self._repository.load()
        self._selected.clear()
        return self._snapshot

    def new_id(self, existing_ids: Iterable[int]) -> int:
        return self._ids.next_id(existing_ids)

    # Bulk selection (ephemeral)

    @property
    def selected_ids(self) -> frozenset[int]:
        return frozenset(self._selected)

    def select_student(self, student_id: int, checked: bool) -> None:
        if checked:
            self._selected.add(int(student_id))
        else:
            self._selected.discard(int(student_id))

    def select_all(self, student_ids: Iterable[int], checked: bool) -> None:
        """Select exactly the given ids (the filtered list) or nothing."""
        self._selected = {int(s) for s in student_ids} if checked else set()

    def deselect(self, student_ids: Iterable[int]) -> None:
        self._selected.difference_update(int(s) for s in student_ids)

    def clear_selection(self) -> None:
        self._selected.clear()
