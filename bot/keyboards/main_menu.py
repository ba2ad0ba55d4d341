from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup

from bot.callbacks import language_callback, mode_callback
from bot.texts.i18n import I18n
from bot.texts.languages import PRIMARY_LOCALES, inline_label
from core.states import Mode


def main_menu_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [
                InlineKeyboardButton(
                    text=i18n.translate(lang, "MENU_BTN_RECIPES"),
                    callback_data=mode_callback(Mode.RECIPES),
                )
            ],
            [
                InlineKeyboardButton(
                    text=i18n.translate(lang, "MENU_BTN_CALORIE"),
                    callback_data=mode_callback(Mode.CALORIE),
                )
            ],
            [
                InlineKeyboardButton(
                    text=i18n.translate(lang, "MENU_BTN_INGREDIENT"),
                    callback_data=mode_callback(Mode.INGREDIENT),
                )
            ],
            [
                InlineKeyboardButton(
                    text=i18n.translate(lang, "MENU_BTN_HELP"),
                    callback_data=mode_callback(Mode.HELP),
                )
            ],
        ]
    )


def language_menu_kb(i18n: I18n, lang: str | None) -> InlineKeyboardMarkup:
    buttons = [
        InlineKeyboardButton(text=inline_label(code), callback_data=language_callback(code))
        for code in PRIMARY_LOCALES
    ]
    buttons.append(
        InlineKeyboardButton(
            text=i18n.translate(lang, "LANG_OTHER_BUTTON"),
            callback_data=language_callback(None),
        )
    )
    return InlineKeyboardMarkup(inline_keyboard=[buttons[:3], buttons[3:]])


__all__ = ["language_menu_kb", "main_menu_kb"]
