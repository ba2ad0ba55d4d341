from __future__ import annotations

import asyncio
import logging
import threading
from collections import OrderedDict
from typing import Any, Mapping, Protocol

from bot.texts import de, en, es, fr, it
from bot.texts.languages import SUPPORTED_LOCALES

BASE_LOCALE = "en"
DEFAULT_CACHE_CAPACITY = 512

STRING_TABLES: dict[str, Mapping[str, str]] = {
    "en": en.TEXTS,
    "de": de.TEXTS,
    "it": it.TEXTS,
    "es": es.TEXTS,
    "fr": fr.TEXTS,
}

_ALIASES = {"nb": "no", "nn": "no", "ua": "uk"}

logger = logging.getLogger(__name__)


class AutoTranslator(Protocol):
    def translate(self, target_locale: str, text: str) -> str | None:
        ...


def resolve_default_locale(raw: str | None) -> str:
    candidate = (raw or "").strip().lower()
    return candidate if candidate in SUPPORTED_LOCALES else BASE_LOCALE


def resolve_locale(tag: str | None, default: str = BASE_LOCALE) -> str:
    """Map a user or platform language tag onto a supported locale.

    ``"de-AT"`` and ``"DE"`` both resolve to ``"de"``; anything unknown resolves
    to ``default``.
    """
    if not tag:
        return default
    code = tag.strip().lower()[:2]
    code = _ALIASES.get(code, code)
    return code if code in SUPPORTED_LOCALES else default


def format_placeholders(template: str, variables: Mapping[str, Any] | None) -> str:
    result = template
    for name, value in (variables or {}).items():
        result = result.replace("{" + name + "}", "" if value is None else str(value))
    return result


def _variables_hash(variables: Mapping[str, Any] | None) -> int:
    if not variables:
        return 0
    return hash(tuple(sorted((name, str(value)) for name, value in variables.items())))


class I18n:
    def __init__(
        self,
        tables: Mapping[str, Mapping[str, str]] | None = None,
        *,
        default_locale: str | None = None,
        translator: AutoTranslator | None = None,
        cache_capacity: int = DEFAULT_CACHE_CAPACITY,
    ) -> None:
        self.tables = dict(tables if tables is not None else STRING_TABLES)
        self.default_locale = resolve_default_locale(default_locale)
        self.translator = translator
        self.cache_capacity = cache_capacity
        self._cache: OrderedDict[tuple[str, str, int], str] = OrderedDict()
        self._lock = threading.Lock()
        self._pending: dict[tuple[str, str, int], asyncio.Future] = {}

    def resolve(self, tag: str | None) -> str:
        return resolve_locale(tag, self.default_locale)

    def translate(
        self, locale: str | None, key: str, variables: Mapping[str, Any] | None = None
    ) -> str:
        lang = self.resolve(locale)
        table = self.tables.get(lang, {})
        if key in table:
            return format_placeholders(table[key], variables)

        source_locale = self.default_locale
        template = self.tables.get(source_locale, {}).get(key)
        if template is None:
            source_locale = BASE_LOCALE
            template = self.tables.get(BASE_LOCALE, {}).get(key)
        if template is None:
            return format_placeholders(key, variables)

        if self.translator is not None and lang != source_locale:
            template = self._auto_localize(lang, key, template, variables)
        return format_placeholders(template, variables)

    def variants(self, key: str) -> set[str]:
        """Every localized rendering of ``key`` across the loaded tables."""
        return {table[key] for table in self.tables.values() if key in table}

    def _auto_localize(
        self, lang: str, key: str, template: str, variables: Mapping[str, Any] | None
    ) -> str:
        """Return the cached translation of ``template`` or schedule one.

        Inside a running event loop the translator runs in the default executor
        and the source text is served until the result lands in the cache.
        """
        cache_key = (lang, key, _variables_hash(variables))
        with self._lock:
            cached = self._cache.get(cache_key)
            if cached is not None:
                self._cache.move_to_end(cache_key)
                return cached

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            localized = self._call_translator(lang, key, template)
            self._remember(cache_key, localized)
            return localized if localized and localized.strip() else template

        pending = self._pending.get(cache_key)
        if pending is None or pending.get_loop() is not loop:
            future = loop.run_in_executor(None, self._call_translator, lang, key, template)
            self._pending[cache_key] = future
            future.add_done_callback(
                lambda done, cache_key=cache_key: self._on_translated(cache_key, done)
            )
        return template

    def _call_translator(self, lang: str, key: str, template: str) -> str | None:
        if self.translator is None:
            return None
        try:
            return self.translator.translate(lang, template)
        except Exception:
            logger.warning(
                "Auto-translation failed", extra={"locale": lang, "key": key}, exc_info=True
            )
            return None

    def _on_translated(self, cache_key: tuple[str, str, int], future: asyncio.Future) -> None:
        if self._pending.get(cache_key) is future:
            del self._pending[cache_key]
        if future.cancelled():
            return
        self._remember(cache_key, future.result())

    def _remember(self, cache_key: tuple[str, str, int], localized: str | None) -> None:
        if not localized or not localized.strip():
            return
        with self._lock:
            self._cache[cache_key] = localized
            self._cache.move_to_end(cache_key)
            while len(self._cache) > self.cache_capacity:
                self._cache.popitem(last=False)

    async def drain(self) -> None:
        """Wait for translations that are still running in the executor."""
        pending = list(self._pending.values())
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)


__all__ = [
    "AutoTranslator",
    "BASE_LOCALE",
    "I18n",
    "STRING_TABLES",
    "format_placeholders",
    "resolve_default_locale",
    "resolve_locale",
]
