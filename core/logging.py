from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.config import Settings

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


def mask_secret(value: str | None) -> str:
    if not value:
        return ""
    if len(value) <= 4:
        return "***"
    return f"{value[:2]}***{value[-2:]}"


class SafeLogFilter(logging.Filter):
    def __init__(self, secrets: list[str]) -> None:
        super().__init__()
        self.secrets = [value for value in secrets if value]

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("-")
        message = record.getMessage()
        for secret in self.secrets:
            message = message.replace(secret, "***")
        record.msg = message
        record.args = ()
        return True


def setup_logging(settings: Settings | None = None) -> None:
    """Configure console and rotating file logging for the bot and webhook server."""
    level_name = settings.log_level if settings else os.getenv("LOG_LEVEL", "INFO")
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    log_format = "%(asctime)s [%(levelname)s] %(name)s [rid=%(request_id)s]: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    logs_dir = settings.log_dir if settings else os.getenv("LOG_DIR", "./logs")
    os.makedirs(logs_dir, exist_ok=True)
    file_path = os.path.join(logs_dir, "bot.log")

    file_handler = RotatingFileHandler(
        file_path, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    handlers.append(file_handler)

    if settings is not None:
        secrets = [settings.telegram_bot_token, settings.openai_api_key]
    else:
        secrets = [os.getenv("TELEGRAM_BOT_TOKEN", ""), os.getenv("OPENAI_API_KEY", "")]
    filter_instance = SafeLogFilter(secrets)
    for handler in handlers:
        handler.addFilter(filter_instance)

    logging.basicConfig(level=log_level, format=log_format, handlers=handlers, force=True)


__all__ = ["SafeLogFilter", "mask_secret", "request_id_var", "setup_logging"]
