from __future__ import annotations

from enum import Enum


class ConversationState(str, Enum):
    IDLE = "IDLE"
    AWAITING_LANGUAGE_SELECTION = "AWAITING_LANGUAGE_SELECTION"
    AWAITING_GREETING = "AWAITING_GREETING"
    ADMIN_AWAITING_BROADCAST_CONTENT = "ADMIN_AWAITING_BROADCAST_CONTENT"
    ADMIN_CONFIRM_BROADCAST = "ADMIN_CONFIRM_BROADCAST"
    ADMIN_AWAITING_USER_STATUS = "ADMIN_AWAITING_USER_STATUS"
    ADMIN_AWAITING_GRANT_PREMIUM = "ADMIN_AWAITING_GRANT_PREMIUM"

    @property
    def is_admin(self) -> bool:
        return self in ADMIN_STATES

    @classmethod
    def parse(cls, raw: str | None) -> "ConversationState | None":
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


ADMIN_STATES = frozenset(
    {
        ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT,
        ConversationState.ADMIN_CONFIRM_BROADCAST,
        ConversationState.ADMIN_AWAITING_USER_STATUS,
        ConversationState.ADMIN_AWAITING_GRANT_PREMIUM,
    }
)


class Mode(str, Enum):
    RECIPES = "recipes"
    CALORIE = "calorie"
    INGREDIENT = "ingredient"
    HELP = "help"

    @classmethod
    def parse(cls, raw: str | None) -> "Mode | None":
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


__all__ = ["ADMIN_STATES", "ConversationState", "Mode"]
