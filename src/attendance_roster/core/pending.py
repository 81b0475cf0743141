from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass
class PendingAction:
    """A destructive operation staged until the user confirms it.

    Nothing is mutated when the action is proposed. ``apply()`` runs the staged
    mutation once; declining is simply never calling it.
    """

    title: str
    description: str
    confirm_text: str
    _apply: Callable[[], None] = field(repr=False)
    applied: bool = False

    def apply(self) -> bool:
        if self.applied:
            logger.debug("Pending action %r already applied", self.title)
            return False
        self._apply()
        self.applied = True
        logger.info("Applied pending action %r", self.title)
        return True


class PendingActionRegistry:
    """Pending actions waiting for a confirm/cancel from the client.

    At most ``max_pending`` tokens are kept; staging past that drops the
    oldest unanswered ones.
    """

    def __init__(self, max_pending: int = 32):
        self._max_pending = max_pending
        self._pending: dict[str, PendingAction] = {}

    def stage(self, action: PendingAction) -> str:
        while self._pending and len(self._pending) >= self._max_pending:
            stale = next(iter(self._pending))
            logger.info("Dropping unanswered pending action %r", self._pending.pop(stale).title)
        token = secrets.token_urlsafe(16)
        self._pending[token] = action
        return token

    def confirm(self, token: str) -> Optional[PendingAction]:
        action = self._pending.pop(token, None)
        if action is not None:
            action.apply()
        return action

    def cancel(self, token: str) -> Optional[PendingAction]:
        action = self._pending.pop(token, None)
        if action is not None:
            logger.info("Cancelled pending action %r", action.title)
        return action

    def __len__(self) -> int:
        return len(self._pending)
