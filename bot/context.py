from __future__ import annotations

from dataclasses import dataclass

from bot.services.broadcast import BroadcastService
from bot.services.reminders import ReminderService
from bot.sessions import AdminSessionStore
from bot.telegram import TelegramClient
from bot.texts.i18n import I18n
from core.completion import CompletionGateway
from core.config import Settings
from core.db import ChefDB


@dataclass
class BotContext:
    """Everything a handler needs, passed explicitly instead of module globals."""

    settings: Settings
    db: ChefDB
    i18n: I18n
    telegram: TelegramClient
    gateway: CompletionGateway
    admin_sessions: AdminSessionStore
    broadcast: BroadcastService
    reminders: ReminderService


__all__ = ["BotContext"]
