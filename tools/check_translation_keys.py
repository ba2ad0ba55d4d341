from __future__ import annotations

"""
Utility script to validate translation key coverage across languages.

Usage:
    python tools/check_translation_keys.py

The script uses English (en) as the baseline and reports any missing or extra
keys in the German, Italian, Spanish and French tables. It exits with a
non-zero status code if mismatches are found.
"""

import sys

from bot.texts.i18n import BASE_LOCALE, STRING_TABLES


def collect_language_keys() -> dict[str, set[str]]:
    return {lang: set(table.keys()) for lang, table in STRING_TABLES.items()}


def main() -> int:
    keys = collect_language_keys()
    baseline = keys[BASE_LOCALE]
    status = 0

    for lang in sorted(keys):
        if lang == BASE_LOCALE:
            continue
        missing = sorted(baseline - keys[lang])
        extra = sorted(keys[lang] - baseline)

        print(f"[{lang}] missing: {missing or 'none'}")
        print(f"[{lang}] extra:   {extra or 'none'}")
        if missing or extra:
            status = 1

    return status


if __name__ == "__main__":
    sys.exit(main())
