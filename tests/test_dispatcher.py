from __future__ import annotations

import asyncio
import threading

from bot.models import Update
from bot.texts import de, en, es
from core.states import ConversationState, Mode


USER_ID = 42
ADMIN_ID = 999


def message_update(text=None, *, update_id=1, user_id=USER_ID, language_code=None, **extra) -> Update:
    sender = {"id": user_id, "is_bot": False, "first_name": "Ana"}
    if language_code:
        sender["language_code"] = language_code
    message = {
        "message_id": 10 + update_id,
        "chat": {"id": user_id, "type": "private"},
        "date": 0,
        "from": sender,
        **extra,
    }
    if text is not None:
        message["text"] = text
    return Update.model_validate({"update_id": update_id, "message": message})


def callback_update(data: str, *, update_id=1, user_id=USER_ID) -> Update:
    return Update.model_validate(
        {
            "update_id": update_id,
            "callback_query": {
                "id": f"cb-{update_id}",
                "from": {"id": user_id, "is_bot": False},
                "message": {"message_id": 77, "chat": {"id": user_id, "type": "private"}},
                "data": data,
            },
        }
    )


def run(dispatcher, update: Update) -> None:
    asyncio.run(dispatcher.handle(update))


def prepare_user(db, user_id=USER_ID, *, locale="en", mode=None):
    db.ensure_user(user_id)
    db.set_locale(user_id, locale)
    db.set_state(user_id, ConversationState.IDLE)
    db.set_mode(user_id, mode)


def test_first_start_creates_account_and_shows_language_menu(dispatcher, db, telegram):
    run(dispatcher, message_update("/start"))

    user = db.get_user(USER_ID)
    assert user is not None
    assert user.conversation_state is ConversationState.AWAITING_LANGUAGE_SELECTION
    assert user.mode is None
    assert user.locale is None
    assert telegram.texts(USER_ID) == [en.TEXTS["LANG_MENU_PROMPT"]]
    keyboard = telegram.sent[0]["reply_markup"]
    payloads = [button.callback_data for row in keyboard.inline_keyboard for button in row]
    assert payloads == [
        "lang:set:en",
        "lang:set:de",
        "lang:set:it",
        "lang:set:es",
        "lang:set:fr",
        "lang:other",
    ]


def test_language_callback_sets_locale_and_sends_german_welcome(dispatcher, db, telegram):
    db.ensure_user(USER_ID)
    assert db.get_user(USER_ID).conversation_state is ConversationState.AWAITING_LANGUAGE_SELECTION

    run(dispatcher, callback_update("lang:set:de"))

    user = db.get_user(USER_ID)
    assert user.locale == "de"
    assert user.conversation_state is ConversationState.IDLE
    texts = telegram.texts(USER_ID)
    assert de.TEXTS["START_GREETING"] in texts
    assert de.TEXTS["MENU_MAIN_TITLE"] in texts
    assert telegram.answered[0][0] == "cb-1"
    assert telegram.edited == [(USER_ID, 77)]
    assert user.last_menu_message_id is not None


def test_selecting_the_current_language_reports_already_active(dispatcher, db, telegram):
    prepare_user(db, locale="de")

    run(dispatcher, callback_update("lang:set:de"))

    assert telegram.texts(USER_ID)[0] == de.TEXTS["LANG_ALREADY"].replace("{language}", "Deutsch")


def test_unknown_callback_payload_is_acknowledged_silently(dispatcher, db, telegram):
    run(dispatcher, callback_update("nonsense:payload"))

    assert telegram.answered == [("cb-1", None)]
    assert telegram.sent == []
    assert db.get_user(USER_ID) is None


def test_other_language_then_greeting_switches_locale(dispatcher, db, telegram):
    prepare_user(db)

    run(dispatcher, callback_update("lang:other"))
    assert db.get_user(USER_ID).conversation_state is ConversationState.AWAITING_GREETING

    run(dispatcher, message_update("¡Hola amigo!", update_id=2))

    user = db.get_user(USER_ID)
    assert user.locale == "es"
    assert user.conversation_state is ConversationState.IDLE
    assert es.TEXTS["MENU_MAIN_TITLE"] in telegram.texts(USER_ID)


def test_unrecognised_greeting_keeps_waiting(dispatcher, db, telegram):
    prepare_user(db)
    db.set_state(USER_ID, ConversationState.AWAITING_GREETING)

    run(dispatcher, message_update("qwrtzpk"))

    assert db.get_user(USER_ID).conversation_state is ConversationState.AWAITING_GREETING
    assert telegram.texts(USER_ID)[0].startswith("I couldn't recognise that language")


def test_mode_callback_activates_mode_and_clears_history(dispatcher, db, telegram):
    prepare_user(db)
    db.append_history(USER_ID, "user", "old question")

    run(dispatcher, callback_update("mode:recipes"))

    user = db.get_user(USER_ID)
    assert user.mode is Mode.RECIPES
    assert db.load_recent_history(USER_ID) == []
    assert telegram.texts(USER_ID) == [en.TEXTS["MODE_RECIPES_ACTIVATED"]]


def test_content_message_calls_completion_with_history(dispatcher, db, telegram, gateway):
    prepare_user(db, mode=Mode.RECIPES)
    db.append_history(USER_ID, "user", "eggs and flour")
    db.append_history(USER_ID, "assistant", "Pancakes")

    run(dispatcher, message_update("and some milk?"))

    assert len(gateway.calls) == 1
    messages = gateway.calls[0]
    assert messages[0]["role"] == "system"
    assert [item["role"] for item in messages[1:]] == ["user", "assistant", "user"]
    assert messages[-1]["content"].endswith("\nand some milk?")
    assert messages[-1]["content"].startswith("[Reply in English")
    assert telegram.texts(USER_ID) == [f"{en.TEXTS['CHEF_INTRO']}\nTomato pasta"]
    history = db.load_recent_history(USER_ID)
    assert [(entry.role, entry.content) for entry in history[-2:]] == [
        ("user", "and some milk?"),
        ("assistant", "Tomato pasta"),
    ]
    assert db.get_usage(USER_ID) == 1


def test_empty_completion_records_fallback_turn(dispatcher, db, telegram, gateway):
    prepare_user(db, mode=Mode.CALORIE)
    gateway.reply = None

    run(dispatcher, message_update("male, 30, 180cm"))

    assert telegram.texts(USER_ID) == [en.TEXTS["AI_ERROR"]]
    assert db.load_recent_history(USER_ID)[-1].content == en.TEXTS["AI_ERROR"]


def test_free_limit_sends_upsell_without_completion(dispatcher, db, telegram, gateway, settings):
    prepare_user(db, mode=Mode.RECIPES)
    for _ in range(settings.free_total_msg_limit):
        db.increment_usage(USER_ID)

    run(dispatcher, message_update("one more recipe"))

    assert gateway.calls == []
    assert telegram.texts(USER_ID)[0].startswith("🔒 You've used all 3 free messages.")
    assert db.get_usage(USER_ID) == settings.free_total_msg_limit


def test_premium_bypasses_limit_but_still_counts(dispatcher, db, gateway, settings):
    prepare_user(db, mode=Mode.INGREDIENT)
    for _ in range(settings.free_total_msg_limit + 5):
        db.increment_usage(USER_ID)
    db.grant_premium(USER_ID, 30)

    run(dispatcher, message_update("avocado"))

    assert len(gateway.calls) == 1
    assert db.get_usage(USER_ID) == settings.free_total_msg_limit + 6


def test_admin_is_not_limited_or_counted(dispatcher, db, gateway, settings):
    prepare_user(db, user_id=ADMIN_ID, mode=Mode.RECIPES)
    for _ in range(settings.free_total_msg_limit):
        db.increment_usage(ADMIN_ID)

    run(dispatcher, message_update("risotto", user_id=ADMIN_ID))

    assert len(gateway.calls) == 1
    assert db.get_usage(ADMIN_ID) == settings.free_total_msg_limit


def test_text_without_mode_shows_main_menu(dispatcher, db, telegram, gateway):
    prepare_user(db)

    run(dispatcher, message_update("hello there"))

    assert gateway.calls == []
    assert telegram.texts(USER_ID) == [en.TEXTS["START_GREETING"], en.TEXTS["MENU_MAIN_TITLE"]]


def test_media_message_gets_text_only_notice(dispatcher, db, telegram):
    prepare_user(db, mode=Mode.RECIPES)

    run(dispatcher, message_update(None, photo=[{"file_id": "ph-1"}]))

    assert telegram.texts(USER_ID) == [en.TEXTS["ONLY_TEXT"]]


def test_expired_admin_state_resets_to_idle(dispatcher, db, telegram):
    prepare_user(db, user_id=ADMIN_ID)
    db.set_state(ADMIN_ID, ConversationState.ADMIN_AWAITING_USER_STATUS)

    run(dispatcher, message_update("12345", user_id=ADMIN_ID))

    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE
    assert telegram.texts(ADMIN_ID) == [en.TEXTS["ADMIN_EXPIRED"]]


def test_command_resets_admin_state(dispatcher, ctx, db, telegram):
    prepare_user(db, user_id=ADMIN_ID)
    ctx.admin_sessions.start(ADMIN_ID, ConversationState.ADMIN_AWAITING_GRANT_PREMIUM)
    db.set_state(ADMIN_ID, ConversationState.ADMIN_AWAITING_GRANT_PREMIUM)

    run(dispatcher, message_update("/whoami", user_id=ADMIN_ID))

    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE
    assert ctx.admin_sessions.get(ADMIN_ID) is None
    assert telegram.texts(ADMIN_ID)[0].startswith(f"🆔 Your id: {ADMIN_ID}")


def test_non_admin_cannot_open_admin_panel(dispatcher, db, telegram):
    prepare_user(db)

    run(dispatcher, message_update("/admin"))

    assert telegram.texts(USER_ID) == [en.TEXTS["NOT_AUTHORIZED"]]


def test_change_language_button_opens_language_menu(dispatcher, db, telegram):
    prepare_user(db, locale="de")

    run(dispatcher, message_update(de.TEXTS["CHANGE_LANGUAGE_BUTTON"]))

    assert db.get_user(USER_ID).conversation_state is ConversationState.AWAITING_LANGUAGE_SELECTION
    assert telegram.texts(USER_ID) == [de.TEXTS["LANG_MENU_PROMPT"]]


def test_premium_status_reports_expiry(dispatcher, db, telegram):
    prepare_user(db)
    until = db.grant_premium(USER_ID, 10)

    run(dispatcher, message_update("/premiumstatus"))

    assert telegram.texts(USER_ID) == [f"⭐ Premium is active until {until:%Y-%m-%d}."]


def test_unexpected_failure_is_answered_with_fallback(dispatcher, db, telegram, monkeypatch):
    prepare_user(db)

    def boom(*args, **kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr(db, "set_mode", boom)

    run(dispatcher, callback_update("mode:recipes"))

    assert ("cb-1", None) in telegram.answered
    assert telegram.texts(USER_ID) == [en.TEXTS["AI_ERROR"]]


def test_auto_translation_runs_outside_the_dispatch_path(dispatcher, ctx, db, telegram):
    prepare_user(db, locale="pl")
    threads: list[int] = []

    class PrefixTranslator:
        def translate(self, target_locale: str, text: str) -> str | None:
            threads.append(threading.get_ident())
            return f"[{target_locale}] {text}"

    ctx.i18n.translator = PrefixTranslator()

    async def scenario() -> None:
        await dispatcher.handle(message_update("/premiumstatus"))
        await ctx.i18n.drain()
        await dispatcher.handle(message_update("/premiumstatus", update_id=2))

    asyncio.run(scenario())

    inactive = en.TEXTS["PREMIUM_STATUS_INACTIVE"]
    assert telegram.texts(USER_ID) == [inactive, f"[pl] {inactive}"]
    assert threads and threading.get_ident() not in threads
