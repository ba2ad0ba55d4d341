from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Set

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

TRANSPORT_WEBHOOK = "WEBHOOK"
TRANSPORT_LONG_POLLING = "LONG_POLLING"

_PARSE_MODES = {"NONE", "MARKDOWN", "HTML"}


def _parse_admin_ids(raw: str) -> Set[int]:
    values: set[int] = set()
    for value in (raw or "").split(","):
        candidate = value.strip()
        if not candidate:
            continue
        try:
            values.add(int(candidate))
        except ValueError:
            continue
    return values


def _parse_int_list(raw: str) -> tuple[int, ...]:
    values: list[int] = []
    for value in (raw or "").split(","):
        candidate = value.strip()
        if not candidate:
            continue
        try:
            parsed = int(candidate)
        except ValueError:
            continue
        if parsed >= 0 and parsed not in values:
            values.append(parsed)
    return tuple(values)


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _get_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _sqlite_path(url: str) -> str:
    for prefix in ("sqlite:///", "sqlite://", "jdbc:sqlite:"):
        if url.startswith(prefix):
            return url[len(prefix):]
    return url


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str = ""
    telegram_webhook_url: str = ""
    telegram_secret_token: str = ""
    transport: str = TRANSPORT_WEBHOOK
    poll_interval_ms: int = 800
    poll_timeout_sec: int = 40
    offset_file: str = "./.run/update_offset.dat"
    parse_mode: str = "NONE"
    admin_ids: frozenset[int] = field(default_factory=frozenset)
    app_env: str = "PROD"
    port: int = 8080
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_org: str = ""
    openai_project: str = ""
    openai_timeout_sec: int = 30
    auto_translate: bool = False
    db_driver: str = "sqlite"
    db_path: str = "./data/chatbotchef.db"
    free_total_msg_limit: int = 10
    premium_price_eur: str = "6.99"
    premium_duration_days: int = 30
    reminder_days_before: tuple[int, ...] = (3,)
    default_locale: str = "en"
    processed_updates_retention_days: int = 7
    webhook_workers: int = 4
    log_level: str = "INFO"
    log_dir: str = "./logs"
    welcome_image_url: str = ""
    help_website_url: str = "https://chatbotchef.eu"
    help_privacy_url: str = "https://chatbotchef.eu/privacy"
    help_offer_url: str = "https://chatbotchef.eu/offer"
    support_email: str = "support@chatbotchef.eu"

    @property
    def is_dev(self) -> bool:
        return self.app_env.upper() == "DEV"

    @property
    def is_long_polling(self) -> bool:
        return self.transport == TRANSPORT_LONG_POLLING

    @property
    def telegram_parse_mode(self) -> str | None:
        """Value for the Bot API ``parse_mode`` field, or None for plain text."""
        if self.parse_mode == "MARKDOWN":
            return "MarkdownV2"
        if self.parse_mode == "HTML":
            return "HTML"
        return None

    def is_admin(self, user_id: int | None) -> bool:
        return user_id is not None and user_id in self.admin_ids


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    transport = (env.get("TELEGRAM_TRANSPORT") or TRANSPORT_WEBHOOK).strip().upper()
    if transport not in {TRANSPORT_WEBHOOK, TRANSPORT_LONG_POLLING}:
        transport = TRANSPORT_WEBHOOK

    parse_mode = (env.get("PARSE_MODE") or "NONE").strip().upper()
    if parse_mode not in _PARSE_MODES:
        parse_mode = "NONE"

    reminder_days = _parse_int_list(env.get("REMINDER_DAYS_BEFORE", "3")) or (3,)
    db_url = env.get("DB_URL") or env.get("SQLITE_DB_PATH") or Settings.db_path

    return Settings(
        telegram_bot_token=(env.get("TELEGRAM_BOT_TOKEN") or "").strip(),
        telegram_webhook_url=(env.get("TELEGRAM_WEBHOOK_URL") or "").strip(),
        telegram_secret_token=(env.get("TELEGRAM_SECRET_TOKEN") or "").strip(),
        transport=transport,
        poll_interval_ms=max(0, _get_int(env, "TELEGRAM_POLL_INTERVAL_MS", 800)),
        poll_timeout_sec=max(0, _get_int(env, "TELEGRAM_POLL_TIMEOUT_SEC", 40)),
        offset_file=env.get("TELEGRAM_OFFSET_FILE") or Settings.offset_file,
        parse_mode=parse_mode,
        admin_ids=frozenset(_parse_admin_ids(env.get("ADMIN_IDS", ""))),
        app_env=(env.get("APP_ENV") or "PROD").strip().upper(),
        port=_get_int(env, "PORT", 8080),
        openai_api_key=(env.get("OPENAI_API_KEY") or "").strip(),
        openai_model=(env.get("OPENAI_MODEL") or "gpt-4o-mini").strip(),
        openai_org=(env.get("OPENAI_ORG") or "").strip(),
        openai_project=(env.get("OPENAI_PROJECT") or "").strip(),
        openai_timeout_sec=max(1, _get_int(env, "OPENAI_TIMEOUT_SEC", 30)),
        auto_translate=_get_bool(env, "AUTO_TRANSLATE", False),
        db_driver=(env.get("DB_DRIVER") or "sqlite").strip().lower(),
        db_path=_sqlite_path(db_url.strip()),
        free_total_msg_limit=max(0, _get_int(env, "FREE_TOTAL_MSG_LIMIT", 10)),
        premium_price_eur=(env.get("PREMIUM_PRICE_EUR") or "6.99").strip(),
        premium_duration_days=max(1, _get_int(env, "PREMIUM_DURATION_DAYS", 30)),
        reminder_days_before=reminder_days,
        default_locale=(env.get("DEFAULT_LOCALE") or "en").strip().lower(),
        processed_updates_retention_days=max(
            1, _get_int(env, "PROCESSED_UPDATES_RETENTION_DAYS", 7)
        ),
        webhook_workers=max(1, _get_int(env, "WEBHOOK_WORKERS", 4)),
        log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
        log_dir=env.get("LOG_DIR") or Settings.log_dir,
        welcome_image_url=(env.get("WELCOME_IMAGE_URL") or "").strip(),
        help_website_url=env.get("HELP_WEBSITE_URL") or Settings.help_website_url,
        help_privacy_url=env.get("HELP_PRIVACY_URL") or Settings.help_privacy_url,
        help_offer_url=env.get("HELP_OFFER_URL") or Settings.help_offer_url,
        support_email=env.get("SUPPORT_EMAIL") or Settings.support_email,
    )


def ensure_bot_token(settings: Settings) -> None:
    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set in environment or .env")


def check_db_driver(settings: Settings) -> bool:
    """Return whether ``DB_DRIVER`` names SQLite, the only supported backend."""
    if settings.db_driver == "sqlite":
        return True
    logger.warning("DB_DRIVER=%r is not supported; falling back to sqlite", settings.db_driver)
    return False


__all__ = [
    "Settings",
    "TRANSPORT_LONG_POLLING",
    "TRANSPORT_WEBHOOK",
    "check_db_driver",
    "ensure_bot_token",
    "load_settings",
]
