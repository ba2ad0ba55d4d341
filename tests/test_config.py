import logging

import pytest

from core.config import (
    TRANSPORT_LONG_POLLING,
    check_db_driver,
    ensure_bot_token,
    load_settings,
)
from core.logging import SafeLogFilter, mask_secret, request_id_var


def test_defaults_from_empty_environment():
    settings = load_settings({})

    assert settings.transport == "WEBHOOK"
    assert settings.poll_interval_ms == 800
    assert settings.poll_timeout_sec == 40
    assert settings.parse_mode == "NONE"
    assert settings.telegram_parse_mode is None
    assert settings.free_total_msg_limit == 10
    assert settings.reminder_days_before == (3,)
    assert settings.default_locale == "en"
    assert settings.admin_ids == frozenset()


def test_values_are_parsed():
    settings = load_settings(
        {
            "TELEGRAM_TRANSPORT": "long_polling",
            "PARSE_MODE": "markdown",
            "ADMIN_IDS": "1, 2,abc,3",
            "REMINDER_DAYS_BEFORE": "7,3,3,x",
            "DB_URL": "sqlite:///tmp/chef.db",
            "FREE_TOTAL_MSG_LIMIT": "oops",
            "AUTO_TRANSLATE": "true",
            "APP_ENV": "dev",
        }
    )

    assert settings.transport == TRANSPORT_LONG_POLLING
    assert settings.is_long_polling
    assert settings.telegram_parse_mode == "MarkdownV2"
    assert settings.admin_ids == frozenset({1, 2, 3})
    assert settings.is_admin(2) and not settings.is_admin(None)
    assert settings.reminder_days_before == (7, 3)
    assert settings.db_path == "tmp/chef.db"
    assert settings.free_total_msg_limit == 10
    assert settings.auto_translate is True
    assert settings.is_dev


def test_missing_bot_token_is_fatal():
    with pytest.raises(RuntimeError, match="TELEGRAM_BOT_TOKEN"):
        ensure_bot_token(load_settings({}))


def test_non_sqlite_driver_is_reported(caplog):
    assert check_db_driver(load_settings({"DB_DRIVER": "SQLite"})) is True

    with caplog.at_level(logging.WARNING, logger="core.config"):
        assert check_db_driver(load_settings({"DB_DRIVER": "postgres"})) is False
    assert "postgres" in caplog.text


@pytest.mark.parametrize(
    "value, expected", [(None, ""), ("", ""), ("abcd", "***"), ("abcdefgh", "ab***gh")]
)
def test_mask_secret(value, expected):
    assert mask_secret(value) == expected


def test_safe_log_filter_hides_secrets_and_sets_request_id():
    token = request_id_var.set("upd:7")
    try:
        record = logging.LogRecord(
            "bot", logging.INFO, __file__, 1, "token=%s", ("123456:SECRET",), None
        )
        assert SafeLogFilter(["123456:SECRET"]).filter(record)
    finally:
        request_id_var.reset(token)

    assert record.getMessage() == "token=***"
    assert record.request_id == "upd:7"
