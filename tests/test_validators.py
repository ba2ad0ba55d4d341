import pytest

from bot.utils.validators import command_name, parse_grant_args, parse_user_id


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", 123),
        (" 42 ", 42),
        ("0", None),
        ("-5", None),
        ("abc", None),
        ("²", None),
        ("١٢٣", None),
        (None, None),
    ],
)
def test_parse_user_id(text, expected):
    assert parse_user_id(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123 30", (123, 30)),
        ("  7   1 ", (7, 1)),
        ("123", None),
        ("123 0", None),
        ("123 3651", None),
        ("abc 30", None),
        ("123 ³", None),
        ("¹ 30", None),
        ("123 30 extra", None),
    ],
)
def test_parse_grant_args(text, expected):
    assert parse_grant_args(text) == expected


def test_command_name():
    assert command_name("/start") == "/start"
    assert command_name("/Start@ChefBot payload") == "/start"
    assert command_name("hello /start") is None
    assert command_name(None) is None
