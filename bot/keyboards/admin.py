from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from bot.callbacks import AdminCommand, BroadcastType, admin_callback
from bot.texts.i18n import I18n


def _button(i18n: I18n, lang: str | None, key: str, callback_data: str) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=i18n.translate(lang, key), callback_data=callback_data)


def admin_menu_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                _button(i18n, lang, "ADMIN_BTN_STATS", admin_callback(AdminCommand.STATS)),
                _button(i18n, lang, "ADMIN_BTN_LANG_STATS", admin_callback(AdminCommand.LANG_STATS)),
            ],
            [_button(i18n, lang, "ADMIN_BTN_BROADCAST", admin_callback(AdminCommand.BROADCAST))],
            [
                _button(i18n, lang, "ADMIN_BTN_USER_STATUS", admin_callback(AdminCommand.USER_STATUS)),
                _button(
                    i18n, lang, "ADMIN_BTN_GRANT_PREMIUM", admin_callback(AdminCommand.GRANT_PREMIUM)
                ),
            ],
        ]
    )


def broadcast_type_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                _button(
                    i18n,
                    lang,
                    "ADMIN_BTN_TYPE_TEXT",
                    admin_callback(AdminCommand.BROADCAST_TYPE, BroadcastType.TEXT),
                ),
                _button(
                    i18n,
                    lang,
                    "ADMIN_BTN_TYPE_PHOTO",
                    admin_callback(AdminCommand.BROADCAST_TYPE, BroadcastType.PHOTO),
                ),
                _button(
                    i18n,
                    lang,
                    "ADMIN_BTN_TYPE_VIDEO",
                    admin_callback(AdminCommand.BROADCAST_TYPE, BroadcastType.VIDEO),
                ),
            ],
            [_button(i18n, lang, "ADMIN_BTN_CANCEL", admin_callback(AdminCommand.CANCEL))],
        ]
    )


def broadcast_confirm_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                _button(i18n, lang, "ADMIN_BTN_SEND", admin_callback(AdminCommand.BROADCAST_SEND)),
                _button(i18n, lang, "ADMIN_BTN_CANCEL", admin_callback(AdminCommand.CANCEL)),
            ]
        ]
    )


def cancel_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[_button(i18n, lang, "ADMIN_BTN_CANCEL", admin_callback(AdminCommand.CANCEL))]]
    )


__all__ = ["admin_menu_kb", "broadcast_confirm_kb", "broadcast_type_kb", "cancel_kb"]
