from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from bot.texts.i18n import I18n


def base_menu_kb(i18n: I18n, lang: str | None) -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[[KeyboardButton(text=i18n.translate(lang, "CHANGE_LANGUAGE_BUTTON"))]],
        is_persistent=True,
        resize_keyboard=True,
    )


__all__ = ["base_menu_kb"]
