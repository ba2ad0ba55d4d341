from __future__ import annotations

import logging
from datetime import datetime

from bot.callbacks import AdminAction, AdminCommand, BroadcastType
from bot.context import BotContext
from bot.keyboards.admin import admin_menu_kb, broadcast_confirm_kb, broadcast_type_kb, cancel_kb
from bot.models import CallbackQuery, Message
from bot.services.reminders import format_date
from bot.sessions import BroadcastDraft
from bot.utils.validators import parse_grant_args, parse_user_id
from core.states import ConversationState

logger = logging.getLogger(__name__)

_CONTENT_PROMPTS = {
    BroadcastType.TEXT: "ADMIN_BROADCAST_PROMPT_TEXT",
    BroadcastType.PHOTO: "ADMIN_BROADCAST_PROMPT_PHOTO",
    BroadcastType.VIDEO: "ADMIN_BROADCAST_PROMPT_VIDEO",
}


class AdminFlow:
    """Admin panel callbacks and the stateful sub-flows behind them."""

    def __init__(self, ctx: BotContext) -> None:
        self.ctx = ctx

    def _t(self, lang: str, key: str, **variables) -> str:
        return self.ctx.i18n.translate(lang, key, variables or None)

    def _enter(
        self,
        user_id: int,
        state: ConversationState,
        *,
        broadcast: BroadcastDraft | None = None,
    ) -> None:
        self.ctx.admin_sessions.start(user_id, state, broadcast=broadcast)
        self.ctx.db.set_state(user_id, state)

    def reset(self, user_id: int, reason: str) -> None:
        self.ctx.admin_sessions.clear(user_id)
        self.ctx.db.set_state(user_id, ConversationState.IDLE)
        logger.info("Admin state cleared", extra={"user_id": user_id, "reason": reason})

    async def open_panel(self, user_id: int, chat_id: int, lang: str) -> None:
        if not self.ctx.settings.is_admin(user_id):
            logger.warning("Non-admin %s attempted to open the admin panel", user_id)
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "NOT_AUTHORIZED"))
            return
        self.reset(user_id, "opening admin panel")
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "ADMIN_PANEL_TITLE"),
            reply_markup=admin_menu_kb(self.ctx.i18n, lang),
        )

    # callbacks

    async def handle_callback(self, query: CallbackQuery, action: AdminAction, lang: str) -> None:
        user_id = query.from_user.id
        chat_id = query.message.chat.id if query.message else user_id
        if not self.ctx.settings.is_admin(user_id):
            logger.warning("Non-admin %s triggered admin callback %s", user_id, action.command.value)
            await self.ctx.telegram.answer_callback(query.id, self._t(lang, "NOT_AUTHORIZED"))
            return

        await self.ctx.telegram.answer_callback(query.id, self._t(lang, "ADMIN_ACK"))
        command = action.command
        if command is AdminCommand.STATS:
            await self._send_stats(chat_id, lang)
        elif command is AdminCommand.LANG_STATS:
            await self._send_language_stats(chat_id, lang)
        elif command is AdminCommand.BROADCAST:
            self._enter(user_id, ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT)
            await self._prompt_broadcast_type(chat_id, lang)
        elif command is AdminCommand.BROADCAST_TYPE and action.broadcast_type is not None:
            self._enter(
                user_id,
                ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT,
                broadcast=BroadcastDraft(type=action.broadcast_type),
            )
            await self._prompt_broadcast_content(chat_id, lang, action.broadcast_type)
        elif command is AdminCommand.BROADCAST_SEND:
            await self._send_broadcast(user_id, chat_id, lang)
        elif command is AdminCommand.CANCEL:
            self.reset(user_id, "cancelled")
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_CANCELLED"))
        elif command is AdminCommand.USER_STATUS:
            self._enter(user_id, ConversationState.ADMIN_AWAITING_USER_STATUS)
            await self.ctx.telegram.send_message(
                chat_id,
                self._t(lang, "ADMIN_USER_STATUS_PROMPT"),
                reply_markup=cancel_kb(self.ctx.i18n, lang),
            )
        elif command is AdminCommand.GRANT_PREMIUM:
            self._enter(user_id, ConversationState.ADMIN_AWAITING_GRANT_PREMIUM)
            await self.ctx.telegram.send_message(
                chat_id,
                self._t(lang, "ADMIN_GRANT_PROMPT"),
                reply_markup=cancel_kb(self.ctx.i18n, lang),
            )
        logger.info("Admin %s ran %s", user_id, command.value)

    async def _send_stats(self, chat_id: int, lang: str) -> None:
        overview = self.ctx.db.collect_overview()
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(
                lang,
                "ADMIN_STATS",
                total=overview.total_users,
                active7=overview.active_7_days,
                active30=overview.active_30_days,
                premium=overview.active_premium,
                blocked=overview.blocked_users,
            ),
        )

    async def _send_language_stats(self, chat_id: int, lang: str) -> None:
        stats = self.ctx.db.collect_language_stats()
        if not stats:
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_LANG_STATS_EMPTY"))
            return
        lines = [self._t(lang, "ADMIN_LANG_STATS_TITLE")]
        lines.extend(
            self._t(lang, "ADMIN_LANG_STATS_ROW", locale=stat.locale, count=stat.count)
            for stat in stats
        )
        await self.ctx.telegram.send_message(chat_id, "\n".join(lines))

    async def _prompt_broadcast_type(self, chat_id: int, lang: str) -> None:
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "ADMIN_BROADCAST_TYPE_TITLE"),
            reply_markup=broadcast_type_kb(self.ctx.i18n, lang),
        )

    async def _prompt_broadcast_content(
        self, chat_id: int, lang: str, broadcast_type: BroadcastType
    ) -> None:
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, _CONTENT_PROMPTS[broadcast_type]),
            reply_markup=cancel_kb(self.ctx.i18n, lang),
        )

    async def _send_broadcast(self, user_id: int, chat_id: int, lang: str) -> None:
        session = self.ctx.admin_sessions.get(user_id)
        draft = session.broadcast if session else None
        if (
            session is None
            or session.state is not ConversationState.ADMIN_CONFIRM_BROADCAST
            or draft is None
            or not draft.is_ready
        ):
            self.reset(user_id, "nothing to broadcast")
            await self.ctx.telegram.send_message(
                chat_id, self._t(lang, "ADMIN_BROADCAST_NOTHING_TO_SEND")
            )
            return

        self.reset(user_id, "broadcast confirmed")
        await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_BROADCAST_STARTED"))
        targets = self.ctx.db.list_user_ids()
        result = await self.ctx.broadcast.send(targets, draft)
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(
                lang,
                "ADMIN_BROADCAST_RESULT",
                delivered=result.delivered,
                failed=result.failed,
                total=result.total,
            ),
        )

    # messages

    async def handle_message(
        self, message: Message, state: ConversationState, lang: str
    ) -> None:
        """Route a message sent while the account is in an admin sub-state."""
        user_id = message.from_user.id if message.from_user else message.chat.id
        chat_id = message.chat.id
        session = self.ctx.admin_sessions.get(user_id)
        if session is None or session.state is not state:
            self.reset(user_id, "session expired")
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_EXPIRED"))
            return

        if state is ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT:
            await self._collect_broadcast_content(user_id, chat_id, lang, message)
        elif state is ConversationState.ADMIN_CONFIRM_BROADCAST:
            await self._show_preview(chat_id, lang, session.broadcast)
        elif state is ConversationState.ADMIN_AWAITING_USER_STATUS:
            await self._lookup_user(user_id, chat_id, lang, message.text)
        elif state is ConversationState.ADMIN_AWAITING_GRANT_PREMIUM:
            await self._grant_premium(user_id, chat_id, lang, message.text)

    async def _collect_broadcast_content(
        self, user_id: int, chat_id: int, lang: str, message: Message
    ) -> None:
        session = self.ctx.admin_sessions.get(user_id)
        draft = session.broadcast if session else None
        if draft is None:
            await self._prompt_broadcast_type(chat_id, lang)
            return

        if draft.type is BroadcastType.TEXT:
            candidate = BroadcastDraft(type=draft.type, text=(message.text or "").strip() or None)
        elif draft.type is BroadcastType.PHOTO:
            candidate = BroadcastDraft(
                type=draft.type, text=message.caption, file_id=message.largest_photo_id
            )
        else:
            candidate = BroadcastDraft(
                type=draft.type,
                text=message.caption,
                file_id=message.video.file_id if message.video else None,
            )

        if not candidate.is_ready:
            await self._prompt_broadcast_content(chat_id, lang, draft.type)
            return

        self._enter(user_id, ConversationState.ADMIN_CONFIRM_BROADCAST, broadcast=candidate)
        await self._show_preview(chat_id, lang, candidate)

    async def _show_preview(
        self, chat_id: int, lang: str, draft: BroadcastDraft | None
    ) -> None:
        if draft is None or not draft.is_ready:
            await self.ctx.telegram.send_message(
                chat_id, self._t(lang, "ADMIN_BROADCAST_NOTHING_TO_SEND")
            )
            return
        await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_BROADCAST_PREVIEW_TITLE"))
        confirm = broadcast_confirm_kb(self.ctx.i18n, lang)
        if draft.type is BroadcastType.PHOTO:
            await self.ctx.telegram.send_photo(
                chat_id, draft.file_id, caption=draft.text, reply_markup=confirm
            )
        elif draft.type is BroadcastType.VIDEO:
            await self.ctx.telegram.send_video(
                chat_id, draft.file_id, caption=draft.text, reply_markup=confirm
            )
        else:
            await self.ctx.telegram.send_message(chat_id, draft.text or "", reply_markup=confirm)

    async def _lookup_user(
        self, user_id: int, chat_id: int, lang: str, text: str | None
    ) -> None:
        target_id = parse_user_id(text)
        if target_id is None:
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_INVALID_USER_ID"))
            return
        status = self.ctx.db.find_user_status(target_id)
        if status is None:
            await self.ctx.telegram.send_message(
                chat_id, self._t(lang, "ADMIN_USER_NOT_FOUND", id=target_id)
            )
            return

        none_value = self._t(lang, "ADMIN_VALUE_NONE")
        self.reset(user_id, "user status delivered")
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(
                lang,
                "ADMIN_USER_STATUS_RESULT",
                id=status.user_id,
                locale=status.locale or none_value,
                premium=_format_optional(status.premium_until, none_value),
                last_activity=_format_optional(status.last_activity, none_value),
            ),
        )

    async def _grant_premium(
        self, user_id: int, chat_id: int, lang: str, text: str | None
    ) -> None:
        parsed = parse_grant_args(text)
        if parsed is None:
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ADMIN_INVALID_ARGS"))
            return
        target_id, days = parsed
        target = self.ctx.db.get_user(target_id)
        if target is None:
            await self.ctx.telegram.send_message(
                chat_id, self._t(lang, "ADMIN_USER_NOT_FOUND", id=target_id)
            )
            return

        until = self.ctx.db.grant_premium(target_id, days)
        self.reset(user_id, "premium granted")
        logger.info(
            "Premium granted",
            extra={"admin_id": user_id, "target_id": target_id, "days": days},
        )
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "ADMIN_GRANT_OK", id=target_id, days=days, date=format_date(until)),
        )
        await self.ctx.telegram.send_message(
            target_id,
            self.ctx.i18n.translate(
                target.locale, "USER_PREMIUM_GRANTED", {"date": format_date(until)}
            ),
        )


def _format_optional(value: datetime | None, fallback: str) -> str:
    return format_date(value) if value is not None else fallback


__all__ = ["AdminFlow"]
