from typing import Tuple

MAX_GRANT_DAYS = 3650


def parse_user_id(text: str | None) -> int | None:
    if text is None:
        return None
    cleaned = text.strip()
    if not (cleaned.isascii() and cleaned.isdigit()):
        return None
    value = int(cleaned)
    return value if value > 0 else None


def parse_grant_args(text: str | None) -> Tuple[int, int] | None:
    """Parse ``"<user id> <days>"``; days must be between 1 and ``MAX_GRANT_DAYS``."""
    if text is None:
        return None
    parts = text.split()
    if len(parts) != 2:
        return None
    user_id = parse_user_id(parts[0])
    if user_id is None or not (parts[1].isascii() and parts[1].isdigit()):
        return None
    days = int(parts[1])
    if days < 1 or days > MAX_GRANT_DAYS:
        return None
    return user_id, days


def command_name(text: str | None) -> str | None:
    """Return the lowercased command (``/start@ChefBot args`` -> ``/start``)."""
    if not text:
        return None
    stripped = text.strip()
    if not stripped.startswith("/"):
        return None
    head = stripped.split(maxsplit=1)[0]
    return head.split("@", 1)[0].lower()
