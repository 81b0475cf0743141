from __future__ import annotations

from typing import Callable, Iterable

from .datetime_utils import now_millis


class MonotonicIdGenerator:
    """Timestamp based ids that never repeat within a session.

    A new id is the clock value, bumped past the last issued id and past any id
    already present in the collection, so deleted ids are not handed out again.
    """

    def __init__(self, clock: Callable[[], int] = now_millis):
        self._clock = clock
        self._last = 0

    def next_id(self, existing_ids: Iterable[int] = ()) -> int:
        floor = max(existing_ids, default=0)
        candidate = max(int(self._clock()), self._last + 1, floor + 1)
        self._last = candidate
        return candidate
