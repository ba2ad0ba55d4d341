from __future__ import annotations

import logging
from typing import Callable, Union

from aiogram import Bot
from aiogram.client.session.aiohttp import AiohttpSession
from aiogram.exceptions import TelegramAPIError, TelegramForbiddenError
from aiogram.types import InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove

from bot.models import Update
from bot.utils.markdown import escape_markdown_v2
from core.config import Settings

logger = logging.getLogger(__name__)

ReplyMarkup = Union[InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove]

DEFAULT_REQUEST_TIMEOUT = 30


def build_bot(settings: Settings) -> Bot:
    session = AiohttpSession(timeout=DEFAULT_REQUEST_TIMEOUT + settings.poll_timeout_sec)
    return Bot(token=settings.telegram_bot_token, session=session)


class TelegramClient:
    """Outbound Bot API calls that log failures and report them as ``None``/``False``.

    Only :meth:`get_updates` propagates errors, so the polling loop can back off.
    """

    def __init__(
        self,
        bot: Bot,
        *,
        parse_mode: str | None = None,
        on_blocked: Callable[[int], None] | None = None,
        request_timeout: int = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self.bot = bot
        self.parse_mode = parse_mode
        self.on_blocked = on_blocked
        self.request_timeout = request_timeout
        self.blocked_chats: set[int] = set()

    def _format(self, text: str | None) -> str | None:
        if text is None:
            return None
        if self.parse_mode == "MarkdownV2":
            return escape_markdown_v2(text)
        return text

    def _handle_send_error(self, method: str, chat_id: int, exc: TelegramAPIError) -> None:
        if isinstance(exc, TelegramForbiddenError):
            logger.info("Chat %s blocked the bot", chat_id)
            self.blocked_chats.add(chat_id)
            if self.on_blocked is not None:
                self.on_blocked(chat_id)
        logger.warning("%s failed for chat %s: %s", method, chat_id, exc)

    def is_blocked(self, chat_id: int) -> bool:
        """Whether a send to ``chat_id`` was refused with 403 during this run."""
        return chat_id in self.blocked_chats

    async def send_message(
        self, chat_id: int, text: str, *, reply_markup: ReplyMarkup | None = None
    ) -> int | None:
        try:
            message = await self.bot.send_message(
                chat_id=chat_id,
                text=self._format(text),
                parse_mode=self.parse_mode,
                reply_markup=reply_markup,
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            self._handle_send_error("sendMessage", chat_id, exc)
            return None
        return message.message_id

    async def send_photo(
        self,
        chat_id: int,
        photo: str,
        *,
        caption: str | None = None,
        reply_markup: ReplyMarkup | None = None,
    ) -> int | None:
        try:
            message = await self.bot.send_photo(
                chat_id=chat_id,
                photo=photo,
                caption=self._format(caption),
                parse_mode=self.parse_mode,
                reply_markup=reply_markup,
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            self._handle_send_error("sendPhoto", chat_id, exc)
            return None
        return message.message_id

    async def send_video(
        self,
        chat_id: int,
        video: str,
        *,
        caption: str | None = None,
        reply_markup: ReplyMarkup | None = None,
    ) -> int | None:
        try:
            message = await self.bot.send_video(
                chat_id=chat_id,
                video=video,
                caption=self._format(caption),
                parse_mode=self.parse_mode,
                reply_markup=reply_markup,
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            self._handle_send_error("sendVideo", chat_id, exc)
            return None
        return message.message_id

    async def edit_reply_markup(
        self, chat_id: int, message_id: int, reply_markup: InlineKeyboardMarkup | None = None
    ) -> bool:
        try:
            await self.bot.edit_message_reply_markup(
                chat_id=chat_id,
                message_id=message_id,
                reply_markup=reply_markup,
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            logger.debug("editMessageReplyMarkup failed for %s/%s: %s", chat_id, message_id, exc)
            return False
        return True

    async def delete_message(self, chat_id: int, message_id: int) -> bool:
        try:
            await self.bot.delete_message(
                chat_id=chat_id, message_id=message_id, request_timeout=self.request_timeout
            )
        except TelegramAPIError as exc:
            logger.debug("deleteMessage failed for %s/%s: %s", chat_id, message_id, exc)
            return False
        return True

    async def answer_callback(self, callback_query_id: str, text: str | None = None) -> bool:
        try:
            await self.bot.answer_callback_query(
                callback_query_id=callback_query_id,
                text=text,
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            logger.debug("answerCallbackQuery failed: %s", exc)
            return False
        return True

    async def get_updates(self, offset: int | None, timeout: int) -> list[Update]:
        raw_updates = await self.bot.get_updates(
            offset=offset,
            timeout=timeout,
            allowed_updates=["message", "callback_query"],
            request_timeout=timeout + self.request_timeout,
        )
        return [
            Update.model_validate(item.model_dump(mode="json", by_alias=True, exclude_none=True))
            for item in raw_updates
        ]

    async def delete_webhook(self) -> bool:
        try:
            await self.bot.delete_webhook(request_timeout=self.request_timeout)
        except TelegramAPIError as exc:
            logger.warning("deleteWebhook failed: %s", exc)
            return False
        return True

    async def set_webhook(self, url: str, secret_token: str | None = None) -> bool:
        try:
            await self.bot.set_webhook(
                url=url,
                secret_token=secret_token or None,
                allowed_updates=["message", "callback_query"],
                request_timeout=self.request_timeout,
            )
        except TelegramAPIError as exc:
            logger.error("setWebhook failed: %s", exc)
            return False
        return True

    async def close(self) -> None:
        await self.bot.session.close()


__all__ = ["ReplyMarkup", "TelegramClient", "build_bot"]
