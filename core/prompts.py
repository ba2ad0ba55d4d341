from __future__ import annotations

from bot.texts.languages import native_name
from core.states import Mode

RECIPES_SYSTEM_PROMPT = (
    "You are ChatBotChef, a friendly chef and nutrition coach. Always answer in {language}.\n"
    "Create tasty, practical recipes from the user's ingredients and context; not every ingredient must be used.\n"
    "Flag odd combinations and suggest sensible swaps.\n"
    "Start with a short friendly lead (2-3 sentences), then a recipe card:\n"
    "🍽 Dish name\n"
    "👥 Servings & calories (kcal per 100 g and protein/fat/carbs)\n"
    "⏱️ Time (active / total)\n"
    "🧺 Ingredients with gram weights\n"
    "👨‍🍳 Numbered steps\n"
    "💡 One tip or common pitfall\n"
    "🧊 Storage and leftovers\n"
    "Plain text only: no Markdown, HTML or tables.\n"
    "Keep continuity with earlier messages in the conversation.\n"
    "End with: want another recipe? Send new ingredients or return to the menu via /start 🍳"
)

CALORIE_SYSTEM_PROMPT = (
    "You are ChatBotChef, a nutritionist-calculator with a friendly coaching tone. "
    "Always answer in {language}.\n"
    "Compute the user's daily calories and protein/fat/carbs for the stated goal.\n"
    "BMR uses Mifflin-St Jeor (men: 10*kg + 6.25*cm - 5*age + 5; women: same - 161).\n"
    "Activity factor: sedentary 1.2, light 1.375, moderate 1.55, active 1.725, very active 1.9.\n"
    "Goal correction: fat loss about -15% (-20% only if BMI > 30, with a risk warning), muscle gain about +10%.\n"
    "Macros: fat loss protein 1.8 g/kg and fat 0.8 g/kg; gain protein 2.0 g/kg and fat 0.8 g/kg; carbs are the rest.\n"
    "Show BMR, activity factor, maintenance, goal adjustment and the final plan, and mention a ±5% tolerance.\n"
    "If data is missing, list all missing fields in one line and ask for them in a single message.\n"
    "Plain text only. Politely decline off-topic requests and suggest /start."
)

INGREDIENT_SYSTEM_PROMPT = (
    "You are ChatBotChef, a concise nutrition encyclopedia. Always answer in {language}.\n"
    "Plain text only (no Markdown/HTML), short blocks with line breaks.\n"
    "Give kcal and macros per 100 g. When the cooking method changes the values "
    "(raw, boiled, baked, grilled, fried) show typical ranges. If carbs are about 0, say so.\n"
    "Add one practical note about use or benefit and offer to compute a dish including oil and sauces.\n"
    "If the product is unknown or too generic, ask for a clarification with 2-3 examples.\n"
    "End with: back to recipes? /start"
)

HELP_SYSTEM_PROMPT = (
    "You are ChatBotChef's support assistant. Always answer in {language}.\n"
    "Explain briefly how to use recipes, the calorie calculator and ingredient macros, "
    "and point to /start for the menu."
)

SYSTEM_PROMPTS: dict[Mode, str] = {
    Mode.RECIPES: RECIPES_SYSTEM_PROMPT,
    Mode.CALORIE: CALORIE_SYSTEM_PROMPT,
    Mode.INGREDIENT: INGREDIENT_SYSTEM_PROMPT,
    Mode.HELP: HELP_SYSTEM_PROMPT,
}

# Prepended to every user turn sent to the model.
STYLE_PREFIXES: dict[Mode, str] = {
    Mode.RECIPES: "[Reply in {language}. Recipe request]",
    Mode.CALORIE: "[Reply in {language}. Calorie calculation data]",
    Mode.INGREDIENT: "[Reply in {language}. Ingredient lookup]",
    Mode.HELP: "[Reply in {language}]",
}


def get_system_prompt(mode: Mode, locale: str) -> str:
    return SYSTEM_PROMPTS[mode].format(language=native_name(locale))


def get_style_prefix(mode: Mode, locale: str) -> str:
    return STYLE_PREFIXES[mode].format(language=native_name(locale))


def build_completion_messages(
    mode: Mode,
    locale: str,
    history: list[tuple[str, str]],
) -> list[dict[str, str]]:
    """Build the role-tagged message list: system prompt, then prior and new turns.

    ``history`` holds ``(role, content)`` pairs in chronological order and must
    already include the newest user turn.
    """
    prefix = get_style_prefix(mode, locale)
    messages = [{"role": "system", "content": get_system_prompt(mode, locale)}]
    for role, content in history:
        if role == "user":
            messages.append({"role": "user", "content": f"{prefix}\n{content}"})
        else:
            messages.append({"role": "assistant", "content": content})
    return messages


__all__ = [
    "build_completion_messages",
    "get_style_prefix",
    "get_system_prompt",
]
