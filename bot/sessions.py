from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from bot.callbacks import BroadcastType
from core.states import ConversationState

ADMIN_SESSION_TTL_SECONDS = 10 * 60


@dataclass
class BroadcastDraft:
    type: BroadcastType
    text: str | None = None
    file_id: str | None = None

    @property
    def is_ready(self) -> bool:
        if self.type is BroadcastType.TEXT:
            return bool(self.text and self.text.strip())
        return bool(self.file_id)


@dataclass
class AdminSession:
    state: ConversationState
    expires_at: float
    broadcast: BroadcastDraft | None = field(default=None)


class AdminSessionStore:
    """In-memory admin sub-flow state with a per-entry TTL checked on read."""

    def __init__(
        self,
        ttl_seconds: float = ADMIN_SESSION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: dict[int, AdminSession] = {}

    def start(
        self,
        user_id: int,
        state: ConversationState,
        *,
        broadcast: BroadcastDraft | None = None,
    ) -> AdminSession:
        session = AdminSession(
            state=state,
            expires_at=self._clock() + self.ttl_seconds,
            broadcast=broadcast,
        )
        self._sessions[user_id] = session
        return session

    def get(self, user_id: int) -> AdminSession | None:
        session = self._sessions.get(user_id)
        if session is None:
            return None
        if session.expires_at <= self._clock():
            self._sessions.pop(user_id, None)
            return None
        return session

    def clear(self, user_id: int) -> None:
        self._sessions.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["AdminSession", "AdminSessionStore", "BroadcastDraft"]
