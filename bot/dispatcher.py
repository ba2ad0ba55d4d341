from __future__ import annotations

import logging

from bot.callbacks import AdminAction, LanguageAction, MainMenuAction, parse_callback
from bot.context import BotContext
from bot.handlers.admin import AdminFlow
from bot.keyboards.common import base_menu_kb
from bot.keyboards.main_menu import language_menu_kb, main_menu_kb
from bot.models import CallbackQuery, Message, TelegramUser, Update
from bot.services.reminders import format_date
from bot.texts.languages import SUPPORTED_LOCALES, native_name, supported_language_list
from bot.utils.language_detection import detect_language
from bot.utils.validators import command_name
from core.db import HISTORY_WINDOW, UserRecord
from core.logging import request_id_var
from core.prompts import build_completion_messages
from core.states import ConversationState, Mode

logger = logging.getLogger(__name__)

_MODE_ACTIVATION_KEYS = {
    Mode.RECIPES: "MODE_RECIPES_ACTIVATED",
    Mode.CALORIE: "MODE_CALORIE_ACTIVATED",
    Mode.INGREDIENT: "MODE_INGREDIENT_ACTIVATED",
}


class UpdateDispatcher:
    """Route one inbound update to the matching handler.

    :meth:`handle` never raises: anything unexpected is logged with the update id
    and answered with the localized fallback message.
    """

    def __init__(self, ctx: BotContext) -> None:
        self.ctx = ctx
        self.admin = AdminFlow(ctx)

    def _t(self, lang: str | None, key: str, **variables) -> str:
        return self.ctx.i18n.translate(lang, key, variables or None)

    def _lang_for(self, user: UserRecord | None, from_user: TelegramUser | None) -> str:
        if user is not None and user.locale:
            return self.ctx.i18n.resolve(user.locale)
        return self.ctx.i18n.resolve(from_user.language_code if from_user else None)

    async def handle(self, update: Update) -> None:
        token = request_id_var.set(f"upd:{update.update_id}")
        try:
            if update.callback_query is not None:
                await self._handle_callback(update.callback_query)
            elif update.message is not None:
                await self._handle_message(update.message)
            else:
                logger.debug("Ignoring update %s without message or callback", update.update_id)
        except Exception:
            logger.exception("Failed to process update %s", update.update_id)
            await self._send_failure(update)
        finally:
            request_id_var.reset(token)

    async def _send_failure(self, update: Update) -> None:
        query = update.callback_query
        message = update.message or (query.message if query else None)
        from_user = query.from_user if query else (message.from_user if message else None)
        lang = self.ctx.i18n.resolve(from_user.language_code if from_user else None)
        if query is not None:
            await self.ctx.telegram.answer_callback(query.id)
        if message is not None:
            await self.ctx.telegram.send_message(message.chat.id, self._t(lang, "AI_ERROR"))

    # callbacks

    async def _handle_callback(self, query: CallbackQuery) -> None:
        action = parse_callback(query.data)
        if action is None:
            logger.info("Ignoring unknown callback payload %r", query.data)
            await self.ctx.telegram.answer_callback(query.id)
            return

        from_user = query.from_user
        user = self.ctx.db.ensure_user(
            from_user.id,
            username=from_user.username,
            first_name=from_user.first_name,
            platform_language=from_user.language_code,
        )
        lang = self._lang_for(user, from_user)
        chat_id = query.message.chat.id if query.message else from_user.id

        if isinstance(action, MainMenuAction):
            await self._select_mode(query, user, chat_id, lang, action.mode)
        elif isinstance(action, AdminAction):
            await self.admin.handle_callback(query, action, lang)
        elif isinstance(action, LanguageAction):
            if action.is_other:
                await self._ask_for_greeting(query, user, chat_id, lang)
            else:
                await self._select_language(query, user, chat_id, action.locale)

    async def _select_mode(
        self, query: CallbackQuery, user: UserRecord, chat_id: int, lang: str, mode: Mode
    ) -> None:
        if mode is Mode.HELP:
            await self.ctx.telegram.answer_callback(query.id)
            await self._send_help(chat_id, lang)
            return

        self.ctx.db.set_mode(user.user_id, mode)
        self.ctx.db.set_state(user.user_id, ConversationState.IDLE)
        self.ctx.db.clear_history(user.user_id)
        logger.info("User %s switched to %s", user.user_id, mode.value)
        await self.ctx.telegram.answer_callback(query.id)
        await self._clear_welcome(user, chat_id)
        await self.ctx.telegram.send_message(chat_id, self._t(lang, _MODE_ACTIVATION_KEYS[mode]))

    async def _ask_for_greeting(
        self, query: CallbackQuery, user: UserRecord, chat_id: int, lang: str
    ) -> None:
        await self.ctx.telegram.answer_callback(query.id)
        self.ctx.db.set_state(user.user_id, ConversationState.AWAITING_GREETING)
        if query.message is not None:
            await self.ctx.telegram.edit_reply_markup(chat_id, query.message.message_id)
        await self.ctx.telegram.send_message(chat_id, self._t(lang, "LANG_OTHER_PROMPT"))

    async def _select_language(
        self, query: CallbackQuery, user: UserRecord, chat_id: int, code: str | None
    ) -> None:
        locale = (code or "").strip().lower()
        if locale not in SUPPORTED_LOCALES:
            logger.warning("Unsupported language code %r from %s", code, user.user_id)
            fallback = self.ctx.i18n.default_locale
            await self.ctx.telegram.answer_callback(query.id)
            await self.ctx.telegram.send_message(
                chat_id,
                self._t(fallback, "LANG_OTHER_UNSUPPORTED", language=native_name(fallback)),
            )
            return

        already = user.locale == locale and user.language_selected
        key = "LANG_ALREADY" if already else "LANG_CHANGED"
        confirmation = self._t(locale, key, language=native_name(locale))
        await self.ctx.telegram.answer_callback(query.id, confirmation)
        if query.message is not None:
            await self.ctx.telegram.edit_reply_markup(chat_id, query.message.message_id)
        await self.ctx.telegram.send_message(chat_id, confirmation)

        if not already:
            self.ctx.db.set_locale(user.user_id, locale)
        self.ctx.db.set_mode(user.user_id, None)
        self.ctx.db.set_state(user.user_id, ConversationState.IDLE)
        logger.info("User %s selected language %s", user.user_id, locale)
        await self._send_welcome(user, chat_id, locale)

    # messages

    async def _handle_message(self, message: Message) -> None:
        from_user = message.from_user
        chat_id = message.chat.id
        if from_user is None:
            logger.debug("Ignoring message %s without sender", message.message_id)
            return

        user = self.ctx.db.ensure_user(
            from_user.id,
            username=from_user.username,
            first_name=from_user.first_name,
            platform_language=from_user.language_code,
        )
        lang = self._lang_for(user, from_user)
        state = user.conversation_state or ConversationState.IDLE
        text = message.text
        command = command_name(text)

        if state.is_admin and command is not None:
            self.admin.reset(user.user_id, f"command {command} received")
            state = ConversationState.IDLE

        if state.is_admin and not self.ctx.settings.is_admin(user.user_id):
            self.admin.reset(user.user_id, "not an admin")
            state = ConversationState.IDLE

        collecting_broadcast = state is ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT
        if not collecting_broadcast and (message.has_media or text is None):
            await self.ctx.telegram.send_message(chat_id, self._t(lang, "ONLY_TEXT"))
            return

        if state.is_admin:
            await self.admin.handle_message(message, state, lang)
            return

        if state is ConversationState.AWAITING_GREETING and command is None:
            await self._handle_greeting(user, from_user, chat_id, text or "")
            return

        await self._handle_text(message, user, from_user, lang, text or "", command)

    async def _handle_text(
        self,
        message: Message,
        user: UserRecord,
        from_user: TelegramUser,
        lang: str,
        text: str,
        command: str | None,
    ) -> None:
        chat_id = message.chat.id
        if command == "/start":
            await self._handle_start(message, user, lang)
        elif command == "/help":
            await self._send_help(chat_id, lang)
        elif command == "/language" or self._is_change_language_button(text):
            await self._show_language_menu(user, chat_id, lang)
        elif command == "/premiumstatus":
            await self._send_premium_status(user, chat_id, lang)
        elif command == "/admin":
            await self.admin.open_panel(user.user_id, chat_id, lang)
        elif command == "/whoami":
            await self._send_whoami(from_user, chat_id, lang)
        else:
            await self._handle_content(user, chat_id, lang, text)

    def _is_change_language_button(self, text: str) -> bool:
        cleaned = text.strip().lower()
        if not cleaned:
            return False
        variants = {value.lower() for value in self.ctx.i18n.variants("CHANGE_LANGUAGE_BUTTON")}
        variants.add("change language")
        return cleaned in variants

    async def _handle_start(self, message: Message, user: UserRecord, lang: str) -> None:
        chat_id = message.chat.id
        await self._clear_welcome(user, chat_id)
        self.ctx.db.set_mode(user.user_id, None)
        self.ctx.db.set_message_ids(user.user_id, start_command=message.message_id)
        user.last_start_command_message_id = message.message_id

        needs_language = (
            user.conversation_state is ConversationState.AWAITING_LANGUAGE_SELECTION
            or not user.locale
            or user.locale not in SUPPORTED_LOCALES
        )
        if needs_language:
            await self._show_language_menu(user, chat_id, lang)
            return

        self.ctx.db.set_state(user.user_id, ConversationState.IDLE)
        await self._send_welcome(user, chat_id, lang)

    async def _show_language_menu(self, user: UserRecord, chat_id: int, lang: str) -> None:
        self.ctx.db.set_state(user.user_id, ConversationState.AWAITING_LANGUAGE_SELECTION)
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "LANG_MENU_PROMPT"),
            reply_markup=language_menu_kb(self.ctx.i18n, lang),
        )

    async def _handle_greeting(
        self, user: UserRecord, from_user: TelegramUser, chat_id: int, text: str
    ) -> None:
        lang = self._lang_for(user, from_user)
        detected = detect_language(text, from_user.language_code)
        if detected is None:
            await self.ctx.telegram.send_message(
                chat_id,
                self._t(lang, "LANG_OTHER_UNKNOWN", languages=supported_language_list()),
            )
            return

        self.ctx.db.set_locale(user.user_id, detected)
        self.ctx.db.set_state(user.user_id, ConversationState.IDLE)
        self.ctx.db.set_mode(user.user_id, None)
        logger.info("Detected language %s for %s", detected, user.user_id)
        await self.ctx.telegram.send_message(
            chat_id, self._t(detected, "LANG_CHANGED", language=native_name(detected))
        )
        await self._send_welcome(user, chat_id, detected)

    async def _send_help(self, chat_id: int, lang: str) -> None:
        settings = self.ctx.settings
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(
                lang,
                "HELP_BODY",
                website=settings.help_website_url,
                privacy=settings.help_privacy_url,
                offer=settings.help_offer_url,
                support_email=settings.support_email,
            ),
        )

    async def _send_premium_status(self, user: UserRecord, chat_id: int, lang: str) -> None:
        until = self.ctx.db.get_premium_until(user.user_id)
        if until is not None and self.ctx.db.is_premium_active(user.user_id):
            text = self._t(lang, "PREMIUM_STATUS_ACTIVE", date=format_date(until))
        else:
            text = self._t(lang, "PREMIUM_STATUS_INACTIVE")
        await self.ctx.telegram.send_message(chat_id, text)

    async def _send_whoami(self, from_user: TelegramUser, chat_id: int, lang: str) -> None:
        await self.ctx.telegram.send_message(
            chat_id,
            self._t(
                lang,
                "WHOAMI",
                id=from_user.id,
                username=f"@{from_user.username}" if from_user.username else "-",
                first_name=(from_user.first_name or "").strip() or "-",
            ),
        )

    # welcome sequence

    async def _clear_welcome(self, user: UserRecord, chat_id: int) -> None:
        previous = {
            "welcome_image": user.last_welcome_image_message_id,
            "greeting": user.last_greeting_message_id,
            "menu": user.last_menu_message_id,
            "start_command": user.last_start_command_message_id,
        }
        stale = {slot: message_id for slot, message_id in previous.items() if message_id}
        if not stale:
            return
        for message_id in stale.values():
            await self.ctx.telegram.delete_message(chat_id, message_id)
        self.ctx.db.set_message_ids(user.user_id, **{slot: None for slot in stale})
        user.last_welcome_image_message_id = None
        user.last_greeting_message_id = None
        user.last_menu_message_id = None
        user.last_start_command_message_id = None

    async def _send_welcome(
        self, user: UserRecord, chat_id: int, lang: str, *, include_image: bool = True
    ) -> None:
        image_id = None
        image_url = self.ctx.settings.welcome_image_url
        if include_image and image_url:
            image_id = await self.ctx.telegram.send_photo(chat_id, image_url)

        greeting_id = await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "START_GREETING"),
            reply_markup=base_menu_kb(self.ctx.i18n, lang),
        )
        menu_id = await self.ctx.telegram.send_message(
            chat_id,
            self._t(lang, "MENU_MAIN_TITLE"),
            reply_markup=main_menu_kb(self.ctx.i18n, lang),
        )
        self.ctx.db.set_message_ids(
            user.user_id, welcome_image=image_id, greeting=greeting_id, menu=menu_id
        )
        user.last_welcome_image_message_id = image_id
        user.last_greeting_message_id = greeting_id
        user.last_menu_message_id = menu_id

    # content

    async def _handle_content(
        self, user: UserRecord, chat_id: int, lang: str, text: str
    ) -> None:
        mode = user.mode
        if mode is None:
            await self._send_welcome(user, chat_id, lang, include_image=False)
            return
        if mode is Mode.HELP:
            await self._send_help(chat_id, lang)
            self.ctx.db.set_mode(user.user_id, None)
            return

        user_id = user.user_id
        if not self.ctx.settings.is_admin(user_id):
            premium = self.ctx.db.is_premium_active(user_id)
            limit = self.ctx.settings.free_total_msg_limit
            if not premium and self.ctx.db.get_usage(user_id) >= limit:
                logger.info("Free limit reached", extra={"user_id": user_id, "limit": limit})
                await self.ctx.telegram.send_message(
                    chat_id,
                    self._t(
                        lang,
                        "LIMIT_REACHED",
                        limit=limit,
                        duration=self.ctx.settings.premium_duration_days,
                        price=self.ctx.settings.premium_price_eur,
                    ),
                )
                return
            self.ctx.db.increment_usage(user_id)

        history = [
            (entry.role, entry.content)
            for entry in self.ctx.db.load_recent_history(user_id, HISTORY_WINDOW)
        ]
        self.ctx.db.append_history(user_id, "user", text)
        history.append(("user", text))
        messages = build_completion_messages(mode, lang, history)

        answer = await self.ctx.gateway.complete(messages)
        if answer and answer.strip():
            body = answer.strip()
            reply = f"{self._t(lang, 'CHEF_INTRO')}\n{body}"
        else:
            logger.warning("Completion returned no text", extra={"user_id": user_id})
            body = self._t(lang, "AI_ERROR")
            reply = body
        await self.ctx.telegram.send_message(chat_id, reply)
        self.ctx.db.append_history(user_id, "assistant", body)


__all__ = ["UpdateDispatcher"]
