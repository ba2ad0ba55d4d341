from __future__ import annotations

import re
import unicodedata

from bot.texts.languages import SUPPORTED_LOCALES, name_variants

_NON_LETTER_RE = re.compile(r"[\W\d_]+", re.UNICODE)

_GREETINGS: dict[str, tuple[str, ...]] = {
    "en": ("hello", "hi", "hey"),
    "de": ("hallo", "servus", "moin"),
    "es": ("hola", "buenas"),
    "it": ("ciao", "salve"),
    "fr": ("bonjour", "salut"),
    "pt": ("olá", "oi"),
    "nl": ("hoi", "dag"),
    "pl": ("cześć", "dzień dobry"),
    "cs": ("ahoj", "dobrý den"),
    "sk": ("ahojte",),
    "sl": ("živjo", "zdravo"),
    "hu": ("szia", "sziasztok"),
    "ro": ("bună", "salutare"),
    "bg": ("здравей", "здравейте"),
    "el": ("γεια", "γειά σου"),
    "da": ("halløj", "hej"),
    "sv": ("hallå", "tjena"),
    "fi": ("moi", "terve"),
    "no": ("hei", "heisann"),
    "is": ("hæ", "halló"),
    "et": ("tere",),
    "lv": ("sveiki", "čau"),
    "lt": ("labas", "sveikas"),
    "hr": ("bok",),
    "sr": ("здраво",),
    "ru": ("привет", "здравствуйте"),
    "uk": ("привіт", "вітаю"),
}


def normalize_token(raw: str) -> str:
    """Lowercase, strip diacritics and drop everything that is not a letter."""
    if not raw:
        return ""
    decomposed = unicodedata.normalize("NFKD", raw.lower())
    without_marks = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LETTER_RE.sub("", without_marks)


def _build_greeting_map() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for code, greetings in _GREETINGS.items():
        for greeting in greetings:
            mapping.setdefault(normalize_token(greeting), code)
    return mapping


def _build_name_map() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for code, variants in name_variants().items():
        for variant in variants:
            normalized = normalize_token(variant)
            if normalized:
                mapping.setdefault(normalized, code)
    return mapping


GREETING_MAP = _build_greeting_map()
NAME_MAP = _build_name_map()


def _tokens(raw: str) -> list[str]:
    return [token for token in (normalize_token(part) for part in raw.split()) if token]


def detect_by_greeting(raw: str) -> str | None:
    tokens = _tokens(raw)
    if not tokens:
        return None
    if len(tokens) > 1:
        joined = tokens[0] + tokens[1]
        if joined in GREETING_MAP:
            return GREETING_MAP[joined]
    return GREETING_MAP.get(tokens[0])


def detect_by_name(raw: str) -> str | None:
    compact = normalize_token(raw)
    if not compact:
        return None
    if compact in NAME_MAP:
        return NAME_MAP[compact]
    for token in _tokens(raw):
        # Two-letter codes only count when they are the whole message.
        if len(token) <= 2:
            continue
        if token in NAME_MAP:
            return NAME_MAP[token]
    return None


def detect_language(raw: str, platform_language: str | None = None) -> str | None:
    """Detect a locale from free text: greeting, then language name, then platform tag."""
    detected = detect_by_greeting(raw) or detect_by_name(raw)
    if detected:
        return detected
    if platform_language:
        code = platform_language.strip().lower()[:2]
        if code in SUPPORTED_LOCALES:
            return code
    return None


__all__ = [
    "GREETING_MAP",
    "NAME_MAP",
    "detect_by_greeting",
    "detect_by_name",
    "detect_language",
    "normalize_token",
]
