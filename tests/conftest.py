from __future__ import annotations

from typing import Any

import pytest

from bot.context import BotContext
from bot.dispatcher import UpdateDispatcher
from bot.services.broadcast import BroadcastService
from bot.services.reminders import ReminderService
from bot.sessions import AdminSessionStore
from bot.texts.i18n import I18n
from core.config import Settings
from core.db import ChefDB

ADMIN_ID = 999


class StubTelegram:
    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.answered: list[tuple[str, str | None]] = []
        self.edited: list[tuple[int, int]] = []
        self.deleted: list[tuple[int, int]] = []
        self.failing_chats: set[int] = set()
        self.blocked_chats: set[int] = set()
        self.webhook_deleted = 0
        self.webhook_set: list[tuple[str, str | None]] = []
        self.updates: list[Any] = []
        self._next_id = 100

    def _record(self, method: str, chat_id: int, text: str | None, **extra: Any) -> int | None:
        if chat_id in self.failing_chats or chat_id in self.blocked_chats:
            return None
        self._next_id += 1
        self.sent.append(
            {"method": method, "chat_id": chat_id, "text": text, "message_id": self._next_id, **extra}
        )
        return self._next_id

    async def send_message(self, chat_id: int, text: str, *, reply_markup=None) -> int | None:
        return self._record("send_message", chat_id, text, reply_markup=reply_markup)

    async def send_photo(self, chat_id: int, photo: str, *, caption=None, reply_markup=None):
        return self._record("send_photo", chat_id, caption, file_id=photo, reply_markup=reply_markup)

    async def send_video(self, chat_id: int, video: str, *, caption=None, reply_markup=None):
        return self._record("send_video", chat_id, caption, file_id=video, reply_markup=reply_markup)

    async def edit_reply_markup(self, chat_id: int, message_id: int, reply_markup=None) -> bool:
        self.edited.append((chat_id, message_id))
        return True

    async def delete_message(self, chat_id: int, message_id: int) -> bool:
        self.deleted.append((chat_id, message_id))
        return True

    async def answer_callback(self, callback_query_id: str, text: str | None = None) -> bool:
        self.answered.append((callback_query_id, text))
        return True

    async def get_updates(self, offset, timeout):
        return self.updates.pop(0) if self.updates else []

    async def delete_webhook(self) -> bool:
        self.webhook_deleted += 1
        return True

    async def set_webhook(self, url: str, secret_token: str | None = None) -> bool:
        self.webhook_set.append((url, secret_token))
        return True

    async def close(self) -> None:
        return None

    def is_blocked(self, chat_id: int) -> bool:
        return chat_id in self.blocked_chats

    def texts(self, chat_id: int | None = None) -> list[str]:
        return [
            item["text"]
            for item in self.sent
            if item["text"] is not None and (chat_id is None or item["chat_id"] == chat_id)
        ]


class StubGateway:
    def __init__(self, reply: str | None = "Tomato pasta") -> None:
        self.reply = reply
        self.calls: list[list[dict[str, str]]] = []

    @property
    def is_configured(self) -> bool:
        return True

    async def complete(self, messages) -> str | None:
        self.calls.append(list(messages))
        return self.reply


async def _no_sleep(_: float) -> None:
    return None


@pytest.fixture
def settings() -> Settings:
    return Settings(
        telegram_bot_token="123456:TESTTOKEN",
        telegram_secret_token="s3cret",
        admin_ids=frozenset({ADMIN_ID}),
        openai_api_key="sk-test",
        free_total_msg_limit=3,
    )


@pytest.fixture
def db(tmp_path) -> ChefDB:
    chef_db = ChefDB(tmp_path / "chef.db")
    chef_db.init_db()
    return chef_db


@pytest.fixture
def telegram() -> StubTelegram:
    return StubTelegram()


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture
def i18n(settings) -> I18n:
    return I18n(default_locale=settings.default_locale)


@pytest.fixture
def ctx(settings, db, telegram, gateway, i18n) -> BotContext:
    return BotContext(
        settings=settings,
        db=db,
        i18n=i18n,
        telegram=telegram,
        gateway=gateway,
        admin_sessions=AdminSessionStore(),
        broadcast=BroadcastService(telegram, sleep=_no_sleep),
        reminders=ReminderService(db, telegram, i18n, settings),
    )


@pytest.fixture
def dispatcher(ctx) -> UpdateDispatcher:
    return UpdateDispatcher(ctx)
