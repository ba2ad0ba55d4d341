"""Callback payload grammar for inline buttons.

Payloads are decoded into one of three action families, tried in order:
main-menu mode selection (``mode:<mode>``), admin actions (``admin:<action>``)
and language selection (``lang:set:<code>`` / ``lang:other``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from core.states import Mode


class BroadcastType(str, Enum):
    TEXT = "text"
    PHOTO = "photo"
    VIDEO = "video"


class AdminCommand(str, Enum):
    STATS = "stats"
    BROADCAST = "broadcast"
    BROADCAST_TYPE = "broadcast_type"
    BROADCAST_SEND = "broadcast_send"
    CANCEL = "cancel"
    USER_STATUS = "user_status"
    GRANT_PREMIUM = "grant_premium"
    LANG_STATS = "lang_stats"


@dataclass(frozen=True)
class MainMenuAction:
    mode: Mode


@dataclass(frozen=True)
class AdminAction:
    command: AdminCommand
    broadcast_type: BroadcastType | None = None


@dataclass(frozen=True)
class LanguageAction:
    locale: str | None = None

    @property
    def is_other(self) -> bool:
        return self.locale is None


CallbackAction = Union[MainMenuAction, AdminAction, LanguageAction]

MODE_PREFIX = "mode:"
ADMIN_PREFIX = "admin:"
LANG_SET_PREFIX = "lang:set:"
LANG_OTHER = "lang:other"
BROADCAST_TYPE_PREFIX = "broadcast_type:"


def parse_main_menu(data: str) -> MainMenuAction | None:
    if not data.startswith(MODE_PREFIX):
        return None
    mode = Mode.parse(data[len(MODE_PREFIX):])
    return MainMenuAction(mode) if mode else None


def parse_admin(data: str) -> AdminAction | None:
    if not data.startswith(ADMIN_PREFIX):
        return None
    payload = data[len(ADMIN_PREFIX):]
    if payload.startswith(BROADCAST_TYPE_PREFIX):
        raw_type = payload[len(BROADCAST_TYPE_PREFIX):]
        try:
            broadcast_type = BroadcastType(raw_type)
        except ValueError:
            return None
        return AdminAction(AdminCommand.BROADCAST_TYPE, broadcast_type)
    if payload == AdminCommand.BROADCAST_TYPE.value:
        return None
    try:
        return AdminAction(AdminCommand(payload))
    except ValueError:
        return None


def parse_language(data: str) -> LanguageAction | None:
    if data == LANG_OTHER:
        return LanguageAction(None)
    if data.startswith(LANG_SET_PREFIX):
        locale = data[len(LANG_SET_PREFIX):].strip().lower()
        return LanguageAction(locale) if locale else None
    return None


_PARSERS = (parse_main_menu, parse_admin, parse_language)


def parse_callback(data: str | None) -> CallbackAction | None:
    if not data:
        return None
    for parser in _PARSERS:
        action = parser(data)
        if action is not None:
            return action
    return None


def mode_callback(mode: Mode) -> str:
    return f"{MODE_PREFIX}{mode.value}"


def admin_callback(command: AdminCommand, broadcast_type: BroadcastType | None = None) -> str:
    if command is AdminCommand.BROADCAST_TYPE and broadcast_type is not None:
        return f"{ADMIN_PREFIX}{BROADCAST_TYPE_PREFIX}{broadcast_type.value}"
    return f"{ADMIN_PREFIX}{command.value}"


def language_callback(locale: str | None) -> str:
    return LANG_OTHER if locale is None else f"{LANG_SET_PREFIX}{locale}"


__all__ = [
    "AdminAction",
    "AdminCommand",
    "BroadcastType",
    "CallbackAction",
    "LanguageAction",
    "MainMenuAction",
    "admin_callback",
    "language_callback",
    "mode_callback",
    "parse_admin",
    "parse_callback",
    "parse_language",
    "parse_main_menu",
]
