from __future__ import annotations

import logging
from dataclasses import dataclass

from bot.context import BotContext
from bot.dispatcher import UpdateDispatcher
from bot.polling import LongPollingRunner, OffsetStore
from bot.services.broadcast import BroadcastService
from bot.services.reminders import ReminderService
from bot.sessions import AdminSessionStore
from bot.telegram import TelegramClient, build_bot
from bot.texts.i18n import I18n
from core.completion import CompletionGateway, build_openai_client
from core.config import Settings, check_db_driver
from core.db import ChefDB
from core.translation import OpenAITranslator

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    ctx: BotContext
    dispatcher: UpdateDispatcher

    @property
    def settings(self) -> Settings:
        return self.ctx.settings

    def polling_runner(self) -> LongPollingRunner:
        settings = self.ctx.settings
        return LongPollingRunner(
            self.ctx.telegram,
            self.dispatcher,
            OffsetStore(settings.offset_file),
            poll_timeout_sec=settings.poll_timeout_sec,
            poll_interval_ms=settings.poll_interval_ms,
            reminders=self.ctx.reminders,
        )

    async def close(self) -> None:
        await self.ctx.i18n.drain()
        await self.ctx.telegram.close()


def build_runtime(settings: Settings) -> Runtime:
    check_db_driver(settings)
    db = ChefDB(settings.db_path)
    db.init_db()

    openai_client = build_openai_client(settings)
    translator = None
    if settings.auto_translate and openai_client is not None:
        translator = OpenAITranslator(openai_client, settings.openai_model)
    i18n = I18n(default_locale=settings.default_locale, translator=translator)

    telegram = TelegramClient(
        build_bot(settings),
        parse_mode=settings.telegram_parse_mode,
        on_blocked=db.mark_blocked,
    )
    ctx = BotContext(
        settings=settings,
        db=db,
        i18n=i18n,
        telegram=telegram,
        gateway=CompletionGateway.from_settings(settings, openai_client),
        admin_sessions=AdminSessionStore(),
        broadcast=BroadcastService(telegram),
        reminders=ReminderService(db, telegram, i18n, settings),
    )
    logger.info(
        "Runtime ready",
        extra={
            "transport": settings.transport,
            "db_path": settings.db_path,
            "auto_translate": translator is not None,
            "admin_ids_count": len(settings.admin_ids),
        },
    )
    return Runtime(ctx=ctx, dispatcher=UpdateDispatcher(ctx))


__all__ = ["Runtime", "build_runtime"]
