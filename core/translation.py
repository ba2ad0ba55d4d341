from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError

from bot.texts.languages import native_name

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = (
    "You translate short chatbot interface messages into {language}. "
    "Keep emojis, line breaks, slash commands and anything inside curly braces exactly as they are. "
    "Reply with the translation only."
)


class OpenAITranslator:
    """Translates UI strings for locales that have no string table of their own."""

    def __init__(self, client: OpenAI, model: str) -> None:
        self.client = client
        self.model = model

    def translate(self, target_locale: str, text: str) -> str | None:
        if not text.strip() or target_locale == "en":
            return text
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "system",
                        "content": _SYSTEM_PROMPT.format(language=native_name(target_locale)),
                    },
                    {"role": "user", "content": text},
                ],
                temperature=0,
            )
        except OpenAIError as exc:
            logger.warning("Translation to %s failed: %s", target_locale, exc)
            return None
        if not completion.choices:
            return None
        content = completion.choices[0].message.content
        return content.strip() if content else None


__all__ = ["OpenAITranslator"]
