from __future__ import annotations

from typing import Protocol

from ..roster.model import Snapshot


class RosterRepository(Protocol):
    def load(self) -> Snapshot:
        """Read the persisted roster.

        Never raises for bad stored data: implementations fall back to the
        default roster instead.
        """

        raise NotImplementedError

    def save(self, snapshot: Snapshot) -> None:
        raise NotImplementedError
