from core.prompts import build_completion_messages, get_style_prefix, get_system_prompt
from core.states import Mode


def test_system_prompt_names_the_language():
    assert "Always answer in Deutsch." in get_system_prompt(Mode.RECIPES, "de")
    assert "Always answer in Français." in get_system_prompt(Mode.INGREDIENT, "fr")


def test_user_turns_carry_the_style_prefix():
    messages = build_completion_messages(
        Mode.CALORIE,
        "it",
        [("user", "sono alto 180"), ("assistant", "Quanti anni hai?"), ("user", "30")],
    )

    prefix = get_style_prefix(Mode.CALORIE, "it")
    assert prefix == "[Reply in Italiano. Calorie calculation data]"
    assert [message["role"] for message in messages] == ["system", "user", "assistant", "user"]
    assert messages[1]["content"] == f"{prefix}\nsono alto 180"
    assert messages[2]["content"] == "Quanti anni hai?"
    assert messages[3]["content"] == f"{prefix}\n30"
