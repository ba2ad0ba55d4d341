TEXTS = {
    "START_GREETING": (
        "👋 Hi, I'm ChatBotChef, your kitchen companion!\n"
        "I turn the ingredients you have into recipes, work out your daily calories "
        "and tell you the macros of any product."
    ),
    "MENU_MAIN_TITLE": "What shall we cook up today? Pick a mode 👇",
    "MENU_BTN_RECIPES": "🍳 Recipes",
    "MENU_BTN_CALORIE": "🔥 Calorie calculator",
    "MENU_BTN_INGREDIENT": "🥑 Ingredient macros",
    "MENU_BTN_HELP": "❓ Help",
    "CHANGE_LANGUAGE_BUTTON": "🌐 Change language",
    "LANG_MENU_PROMPT": "🌍 Please choose your language:",
    "LANG_OTHER_BUTTON": "🌍 Other",
    "LANG_OTHER_PROMPT": (
        "Say hello in your language or type its name (for example “Hola” or “Polski”) "
        "and I'll switch to it."
    ),
    "LANG_OTHER_UNKNOWN": (
        "I couldn't recognise that language. Supported languages: {languages}.\n"
        "Try a greeting or the language name."
    ),
    "LANG_OTHER_UNSUPPORTED": "That language isn't supported yet, so I'll continue in {language}.",
    "LANG_CHANGED": "✅ Language set to {language}.",
    "LANG_ALREADY": "ℹ️ {language} is already your language.",
    "MODE_RECIPES_ACTIVATED": (
        "🍳 Recipe mode is on. Send me the ingredients you have, plus any goal or time limit."
    ),
    "MODE_CALORIE_ACTIVATED": (
        "🔥 Calorie calculator is on. Send your sex, age, height, weight, activity level and goal."
    ),
    "MODE_INGREDIENT_ACTIVATED": (
        "🥑 Ingredient macros are on. Name a product and I'll give you kcal and macros per 100 g."
    ),
    "HELP_BODY": (
        "❓ How ChatBotChef works\n"
        "\n"
        "🍳 Recipes: send ingredients and get a recipe card.\n"
        "🔥 Calorie calculator: get your daily kcal and macros for your goal.\n"
        "🥑 Ingredient macros: kcal and macros of any product per 100 g.\n"
        "\n"
        "/start opens the menu, /language changes the language, "
        "/premiumstatus shows your subscription.\n"
        "\n"
        "🌐 Website: {website}\n"
        "🔒 Privacy: {privacy}\n"
        "📄 Offer: {offer}\n"
        "✉️ Support: {support_email}"
    ),
    "CHEF_INTRO": "👨‍🍳 ChatBotChef:",
    "AI_ERROR": "⚠️ Sorry, I couldn't prepare an answer right now. Please try again in a moment.",
    "ONLY_TEXT": "✍️ I can only read text messages. Please type your request.",
    "LIMIT_REACHED": (
        "🔒 You've used all {limit} free messages.\n"
        "Premium gives you unlimited answers for {duration} days at €{price}."
    ),
    "PREMIUM_STATUS_ACTIVE": "⭐ Premium is active until {date}.",
    "PREMIUM_STATUS_INACTIVE": "You don't have an active Premium subscription.",
    "PREMIUM_REMINDER": "⏰ Your Premium ends on {date}. Renew it to keep unlimited answers.",
    "USER_PREMIUM_GRANTED": "🎁 You've been granted Premium until {date}. Enjoy!",
    "WHOAMI": "🆔 Your id: {id}\nUsername: {username}\nFirst name: {first_name}",
    "NOT_AUTHORIZED": "⛔ This command is only available to administrators.",
    "ADMIN_PANEL_TITLE": "🛠 Admin panel",
    "ADMIN_BTN_STATS": "📊 Stats",
    "ADMIN_BTN_BROADCAST": "📣 Broadcast",
    "ADMIN_BTN_USER_STATUS": "🔎 User status",
    "ADMIN_BTN_GRANT_PREMIUM": "🎁 Grant premium",
    "ADMIN_BTN_LANG_STATS": "🌍 Languages",
    "ADMIN_BTN_SEND": "✅ Send",
    "ADMIN_BTN_CANCEL": "✖️ Cancel",
    "ADMIN_BTN_TYPE_TEXT": "📝 Text",
    "ADMIN_BTN_TYPE_PHOTO": "🖼 Photo",
    "ADMIN_BTN_TYPE_VIDEO": "🎬 Video",
    "ADMIN_STATS": (
        "📊 Stats\n"
        "Total users: {total}\n"
        "Active 7 days: {active7}\n"
        "Active 30 days: {active30}\n"
        "Premium: {premium}\n"
        "Blocked: {blocked}"
    ),
    "ADMIN_BROADCAST_TYPE_TITLE": "📣 What kind of broadcast do you want to send?",
    "ADMIN_BROADCAST_PROMPT_TEXT": "Send the text for the broadcast.",
    "ADMIN_BROADCAST_PROMPT_PHOTO": "Send the photo for the broadcast (a caption is optional).",
    "ADMIN_BROADCAST_PROMPT_VIDEO": "Send the video for the broadcast (a caption is optional).",
    "ADMIN_BROADCAST_PREVIEW_TITLE": "👀 Preview. Send it to all users?",
    "ADMIN_BROADCAST_NOTHING_TO_SEND": "There is nothing to send. Start the broadcast again.",
    "ADMIN_BROADCAST_STARTED": "🚀 Broadcast started…",
    "ADMIN_BROADCAST_RESULT": "✅ Broadcast finished. Delivered: {delivered}, failed: {failed}, total: {total}.",
    "ADMIN_CANCELLED": "Cancelled.",
    "ADMIN_EXPIRED": "⌛ The admin session expired. Open /admin again.",
    "ADMIN_ACK": "OK",
    "ADMIN_USER_STATUS_PROMPT": "Send the user id to look up.",
    "ADMIN_USER_STATUS_RESULT": (
        "👤 User {id}\n"
        "Language: {locale}\n"
        "Premium until: {premium}\n"
        "Last activity: {last_activity}"
    ),
    "ADMIN_VALUE_NONE": "—",
    "ADMIN_INVALID_USER_ID": "Please send a numeric user id.",
    "ADMIN_USER_NOT_FOUND": "User {id} was not found. Send another id.",
    "ADMIN_INVALID_ARGS": "Use the format: <user id> <days>.",
    "ADMIN_GRANT_PROMPT": "Send the user id and the number of days, e.g. 123456789 30.",
    "ADMIN_GRANT_OK": "🎁 Premium for {id} extended by {days} days, until {date}.",
    "ADMIN_LANG_STATS_TITLE": "🌍 Users by language",
    "ADMIN_LANG_STATS_ROW": "{locale}: {count}",
    "ADMIN_LANG_STATS_EMPTY": "No users yet.",
}
