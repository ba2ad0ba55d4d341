from __future__ import annotations

import asyncio

from bot.models import Update
from bot.texts import en
from core.states import ConversationState

ADMIN_ID = 999


def admin_message(update_id: int, text: str | None = None, **extra) -> Update:
    message = {
        "message_id": update_id,
        "chat": {"id": ADMIN_ID, "type": "private"},
        "from": {"id": ADMIN_ID, "is_bot": False, "first_name": "Root"},
        **extra,
    }
    if text is not None:
        message["text"] = text
    return Update.model_validate({"update_id": update_id, "message": message})


def admin_press(update_id: int, data: str) -> Update:
    return Update.model_validate(
        {
            "update_id": update_id,
            "callback_query": {
                "id": f"cb-{update_id}",
                "from": {"id": ADMIN_ID, "is_bot": False},
                "message": {"message_id": 5, "chat": {"id": ADMIN_ID, "type": "private"}},
                "data": data,
            },
        }
    )


def run(dispatcher, *updates: Update) -> None:
    async def _run_all() -> None:
        for update in updates:
            await dispatcher.handle(update)

    asyncio.run(_run_all())


def seed_users(db, *user_ids: int) -> None:
    for user_id in user_ids:
        db.ensure_user(user_id)
        db.set_locale(user_id, "en")
        db.set_state(user_id, ConversationState.IDLE)


def test_admin_panel_opens_for_admin(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID)

    run(dispatcher, admin_message(1, "/admin"))

    assert telegram.texts(ADMIN_ID) == [en.TEXTS["ADMIN_PANEL_TITLE"]]
    markup = telegram.sent[0]["reply_markup"]
    payloads = {button.callback_data for row in markup.inline_keyboard for button in row}
    assert {"admin:stats", "admin:broadcast", "admin:user_status", "admin:grant_premium"} <= payloads


def test_text_broadcast_reaches_every_user(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 1, 2, 3)

    run(
        dispatcher,
        admin_press(1, "admin:broadcast"),
        admin_press(2, "admin:broadcast_type:text"),
        admin_message(3, "Fresh summer recipes are here!"),
    )
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.ADMIN_CONFIRM_BROADCAST
    assert en.TEXTS["ADMIN_BROADCAST_PREVIEW_TITLE"] in telegram.texts(ADMIN_ID)

    run(dispatcher, admin_press(4, "admin:broadcast_send"))

    for user_id in (1, 2, 3):
        assert telegram.texts(user_id) == ["Fresh summer recipes are here!"]
    assert telegram.texts(ADMIN_ID)[-1] == (
        "✅ Broadcast finished. Delivered: 4, failed: 0, total: 4."
    )
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE


def test_photo_broadcast_uses_largest_photo(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 7)

    run(
        dispatcher,
        admin_press(1, "admin:broadcast"),
        admin_press(2, "admin:broadcast_type:photo"),
        admin_message(
            3,
            caption="New dish",
            photo=[{"file_id": "small"}, {"file_id": "large"}],
        ),
        admin_press(4, "admin:broadcast_send"),
    )

    photos = [item for item in telegram.sent if item["method"] == "send_photo" and item["chat_id"] == 7]
    assert [(item["file_id"], item["text"]) for item in photos] == [("large", "New dish")]


def test_broadcast_content_of_wrong_type_reprompts(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID)

    run(
        dispatcher,
        admin_press(1, "admin:broadcast"),
        admin_press(2, "admin:broadcast_type:video"),
        admin_message(3, "just text"),
    )

    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_BROADCAST_PROMPT_VIDEO"]
    assert (
        db.get_user(ADMIN_ID).conversation_state
        is ConversationState.ADMIN_AWAITING_BROADCAST_CONTENT
    )


def test_cancel_clears_admin_state(dispatcher, ctx, db, telegram):
    seed_users(db, ADMIN_ID)

    run(dispatcher, admin_press(1, "admin:user_status"), admin_press(2, "admin:cancel"))

    assert ctx.admin_sessions.get(ADMIN_ID) is None
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE
    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_CANCELLED"]


def test_send_without_preview_reports_nothing_to_send(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 1)

    run(dispatcher, admin_press(1, "admin:broadcast_send"))

    assert telegram.texts(ADMIN_ID) == [en.TEXTS["ADMIN_BROADCAST_NOTHING_TO_SEND"]]
    assert telegram.texts(1) == []


def test_user_status_lookup_reprompts_on_bad_input(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 555)
    db.set_locale(555, "it")

    run(
        dispatcher,
        admin_press(1, "admin:user_status"),
        admin_message(2, "not-a-number"),
    )
    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_INVALID_USER_ID"]
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.ADMIN_AWAITING_USER_STATUS

    run(dispatcher, admin_message(3, "555"))

    result = telegram.texts(ADMIN_ID)[-1]
    assert result.startswith("👤 User 555")
    assert "Language: it" in result
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE


def test_grant_premium_extends_and_notifies_target(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 321)

    run(
        dispatcher,
        admin_press(1, "admin:grant_premium"),
        admin_message(2, "321"),
    )
    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_INVALID_ARGS"]

    run(dispatcher, admin_message(3, "321 30"))

    assert db.is_premium_active(321)
    until = db.get_premium_until(321)
    assert telegram.texts(ADMIN_ID)[-1] == (
        f"🎁 Premium for 321 extended by 30 days, until {until:%Y-%m-%d}."
    )
    assert telegram.texts(321) == [f"🎁 You've been granted Premium until {until:%Y-%m-%d}. Enjoy!"]


def test_stats_and_language_stats(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID, 1, 2)
    db.set_locale(2, "de")

    run(dispatcher, admin_press(1, "admin:stats"), admin_press(2, "admin:lang_stats"))

    stats, languages = telegram.texts(ADMIN_ID)
    assert "Total users: 3" in stats
    assert languages.splitlines() == [en.TEXTS["ADMIN_LANG_STATS_TITLE"], "en: 2", "de: 1"]


def test_non_admin_callback_is_refused(dispatcher, db, telegram):
    update = Update.model_validate(
        {
            "update_id": 1,
            "callback_query": {
                "id": "cb-x",
                "from": {"id": 12, "is_bot": False},
                "data": "admin:stats",
            },
        }
    )

    run(dispatcher, update)

    assert telegram.answered == [("cb-x", en.TEXTS["NOT_AUTHORIZED"])]
    assert telegram.sent == []


def test_admin_command_during_broadcast_reopens_panel(dispatcher, ctx, db, telegram):
    seed_users(db, ADMIN_ID)

    run(
        dispatcher,
        admin_press(1, "admin:broadcast"),
        admin_press(2, "admin:broadcast_type:text"),
        admin_message(3, "/admin"),
    )

    assert ctx.admin_sessions.get(ADMIN_ID) is None
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.IDLE
    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_PANEL_TITLE"]
    assert "/admin" not in telegram.texts(ADMIN_ID)


def test_superscript_digit_reprompts_for_user_id(dispatcher, db, telegram):
    seed_users(db, ADMIN_ID)

    run(dispatcher, admin_press(1, "admin:user_status"), admin_message(2, "²"))

    assert telegram.texts(ADMIN_ID)[-1] == en.TEXTS["ADMIN_INVALID_USER_ID"]
    assert db.get_user(ADMIN_ID).conversation_state is ConversationState.ADMIN_AWAITING_USER_STATUS
