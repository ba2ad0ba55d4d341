from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguageInfo:
    code: str
    native_name: str
    inline_label: str | None = None
    synonyms: tuple[str, ...] = field(default_factory=tuple)


LANGUAGES: tuple[LanguageInfo, ...] = (
    LanguageInfo("en", "English", "🇬🇧 EN", ("english", "eng")),
    LanguageInfo("de", "Deutsch", "🇩🇪 DE", ("deutsch", "german", "ger")),
    LanguageInfo("it", "Italiano", "🇮🇹 IT", ("italiano", "italian", "ita")),
    LanguageInfo("es", "Español", "🇪🇸 ES", ("español", "spanish", "castellano", "spa")),
    LanguageInfo("fr", "Français", "🇫🇷 FR", ("français", "french", "fra")),
    LanguageInfo("pt", "Português", None, ("portuguese", "português brasileiro")),
    LanguageInfo("nl", "Nederlands", None, ("dutch", "hollands", "vlaams")),
    LanguageInfo("pl", "Polski", None, ("polish", "polska")),
    LanguageInfo("cs", "Čeština", None, ("česky", "czech")),
    LanguageInfo("sk", "Slovenčina", None, ("slovenský", "slovak")),
    LanguageInfo("sl", "Slovenščina", None, ("slovenski", "slovene", "slovenian", "slo")),
    LanguageInfo("hu", "Magyar", None, ("hungarian",)),
    LanguageInfo("ro", "Română", None, ("românesc", "romanian")),
    LanguageInfo("bg", "Български", None, ("bulgarski", "bulgarian")),
    LanguageInfo("el", "Ελληνικά", None, ("ellinika", "greek", "hellenic")),
    LanguageInfo("da", "Dansk", None, ("danske", "danish")),
    LanguageInfo("sv", "Svenska", None, ("svensk", "swedish")),
    LanguageInfo("fi", "Suomi", None, ("suomea", "finnish", "finska")),
    LanguageInfo("no", "Norsk", None, ("norwegian", "nynorsk", "bokmål")),
    LanguageInfo("is", "Íslenska", None, ("islensku", "icelandic")),
    LanguageInfo("et", "Eesti", None, ("estonian", "eesti keel")),
    LanguageInfo("lv", "Latviešu", None, ("latviski", "latvian")),
    LanguageInfo("lt", "Lietuvių", None, ("lietuviskai", "lithuanian")),
    LanguageInfo("hr", "Hrvatski", None, ("hrvatski jezik", "croatian")),
    LanguageInfo("sr", "Српски", None, ("srpski", "srpski jezik", "serbian")),
    LanguageInfo("ru", "Русский", None, ("russkiy", "russian")),
    LanguageInfo("uk", "Українська", None, ("ukrainska", "ukrayinska", "ukrainian")),
)

LANGUAGES_BY_CODE: dict[str, LanguageInfo] = {info.code: info for info in LANGUAGES}
SUPPORTED_LOCALES: frozenset[str] = frozenset(LANGUAGES_BY_CODE)
# Locales offered as buttons on the language menu, in display order.
PRIMARY_LOCALES: tuple[str, ...] = tuple(info.code for info in LANGUAGES[:5])


def native_name(locale: str) -> str:
    info = LANGUAGES_BY_CODE.get(locale)
    return info.native_name if info else locale.upper()


def inline_label(locale: str) -> str:
    info = LANGUAGES_BY_CODE.get(locale)
    if info and info.inline_label:
        return info.inline_label
    return locale.upper()


def supported_language_list() -> str:
    return ", ".join(info.native_name for info in LANGUAGES)


def name_variants() -> dict[str, tuple[str, ...]]:
    variants: dict[str, tuple[str, ...]] = {}
    for info in LANGUAGES:
        values = [info.code, info.native_name, *info.synonyms]
        variants[info.code] = tuple(dict.fromkeys(values))
    return variants


__all__ = [
    "LANGUAGES",
    "LANGUAGES_BY_CODE",
    "LanguageInfo",
    "PRIMARY_LOCALES",
    "SUPPORTED_LOCALES",
    "inline_label",
    "name_variants",
    "native_name",
    "supported_language_list",
]
