from __future__ import annotations

import re

_SPECIAL_CHARS_RE = re.compile(r"([_*\[\]()~`>#+\-=|{}.!\\])")


def escape_markdown_v2(text: str) -> str:
    """Escape every character MarkdownV2 treats as markup."""
    return _SPECIAL_CHARS_RE.sub(r"\\\1", text)


__all__ = ["escape_markdown_v2"]
