TEXTS = {
    "START_GREETING": (
        "👋 Hallo, ich bin ChatBotChef, dein Küchenbegleiter!\n"
        "Aus deinen Zutaten mache ich Rezepte, ich berechne deinen Tagesbedarf "
        "und nenne dir die Nährwerte jedes Lebensmittels."
    ),
    "MENU_MAIN_TITLE": "Was kochen wir heute? Wähle einen Modus 👇",
    "MENU_BTN_RECIPES": "🍳 Rezepte",
    "MENU_BTN_CALORIE": "🔥 Kalorienrechner",
    "MENU_BTN_INGREDIENT": "🥑 Nährwerte",
    "MENU_BTN_HELP": "❓ Hilfe",
    "CHANGE_LANGUAGE_BUTTON": "🌐 Sprache ändern",
    "LANG_MENU_PROMPT": "🌍 Bitte wähle deine Sprache:",
    "LANG_OTHER_BUTTON": "🌍 Andere",
    "LANG_OTHER_PROMPT": (
        "Begrüße mich in deiner Sprache oder schreib ihren Namen (zum Beispiel „Hola“ "
        "oder „Polski“), dann wechsle ich."
    ),
    "LANG_OTHER_UNKNOWN": (
        "Diese Sprache habe ich nicht erkannt. Unterstützte Sprachen: {languages}.\n"
        "Versuch es mit einem Gruß oder dem Namen der Sprache."
    ),
    "LANG_OTHER_UNSUPPORTED": "Diese Sprache wird noch nicht unterstützt, ich antworte weiter auf {language}.",
    "LANG_CHANGED": "✅ Sprache auf {language} umgestellt.",
    "LANG_ALREADY": "ℹ️ {language} ist bereits deine Sprache.",
    "MODE_RECIPES_ACTIVATED": (
        "🍳 Rezeptmodus ist aktiv. Schick mir deine Zutaten und gern dein Ziel oder Zeitlimit."
    ),
    "MODE_CALORIE_ACTIVATED": (
        "🔥 Kalorienrechner ist aktiv. Schick Geschlecht, Alter, Größe, Gewicht, Aktivität und Ziel."
    ),
    "MODE_INGREDIENT_ACTIVATED": (
        "🥑 Nährwertmodus ist aktiv. Nenne ein Lebensmittel und ich sage dir kcal und Makros pro 100 g."
    ),
    "HELP_BODY": (
        "❓ So funktioniert ChatBotChef\n"
        "\n"
        "🍳 Rezepte: Zutaten schicken und eine Rezeptkarte bekommen.\n"
        "🔥 Kalorienrechner: Tagesbedarf und Makros für dein Ziel.\n"
        "🥑 Nährwerte: kcal und Makros jedes Produkts pro 100 g.\n"
        "\n"
        "/start öffnet das Menü, /language ändert die Sprache, "
        "/premiumstatus zeigt dein Abo.\n"
        "\n"
        "🌐 Website: {website}\n"
        "🔒 Datenschutz: {privacy}\n"
        "📄 Angebot: {offer}\n"
        "✉️ Support: {support_email}"
    ),
    "CHEF_INTRO": "👨‍🍳 ChatBotChef:",
    "AI_ERROR": "⚠️ Entschuldige, ich konnte gerade keine Antwort vorbereiten. Bitte versuch es gleich noch einmal.",
    "ONLY_TEXT": "✍️ Ich kann nur Textnachrichten lesen. Bitte schreib deine Anfrage.",
    "LIMIT_REACHED": (
        "🔒 Du hast alle {limit} kostenlosen Nachrichten verbraucht.\n"
        "Mit Premium bekommst du {duration} Tage unbegrenzte Antworten für {price} €."
    ),
    "PREMIUM_STATUS_ACTIVE": "⭐ Premium ist aktiv bis {date}.",
    "PREMIUM_STATUS_INACTIVE": "Du hast kein aktives Premium-Abo.",
    "PREMIUM_REMINDER": "⏰ Dein Premium endet am {date}. Verlängere es, um weiter unbegrenzt Antworten zu erhalten.",
    "USER_PREMIUM_GRANTED": "🎁 Du hast Premium bis {date} erhalten. Viel Spaß!",
    "WHOAMI": "🆔 Deine ID: {id}\nBenutzername: {username}\nVorname: {first_name}",
    "NOT_AUTHORIZED": "⛔ Dieser Befehl ist nur für Administratoren verfügbar.",
    "ADMIN_PANEL_TITLE": "🛠 Admin-Bereich",
    "ADMIN_BTN_STATS": "📊 Statistik",
    "ADMIN_BTN_BROADCAST": "📣 Rundsendung",
    "ADMIN_BTN_USER_STATUS": "🔎 Nutzerstatus",
    "ADMIN_BTN_GRANT_PREMIUM": "🎁 Premium vergeben",
    "ADMIN_BTN_LANG_STATS": "🌍 Sprachen",
    "ADMIN_BTN_SEND": "✅ Senden",
    "ADMIN_BTN_CANCEL": "✖️ Abbrechen",
    "ADMIN_BTN_TYPE_TEXT": "📝 Text",
    "ADMIN_BTN_TYPE_PHOTO": "🖼 Foto",
    "ADMIN_BTN_TYPE_VIDEO": "🎬 Video",
    "ADMIN_STATS": (
        "📊 Statistik\n"
        "Nutzer gesamt: {total}\n"
        "Aktiv 7 Tage: {active7}\n"
        "Aktiv 30 Tage: {active30}\n"
        "Premium: {premium}\n"
        "Blockiert: {blocked}"
    ),
    "ADMIN_BROADCAST_TYPE_TITLE": "📣 Welche Art von Rundsendung möchtest du senden?",
    "ADMIN_BROADCAST_PROMPT_TEXT": "Schick den Text für die Rundsendung.",
    "ADMIN_BROADCAST_PROMPT_PHOTO": "Schick das Foto für die Rundsendung (Bildunterschrift optional).",
    "ADMIN_BROADCAST_PROMPT_VIDEO": "Schick das Video für die Rundsendung (Bildunterschrift optional).",
    "ADMIN_BROADCAST_PREVIEW_TITLE": "👀 Vorschau. An alle Nutzer senden?",
    "ADMIN_BROADCAST_NOTHING_TO_SEND": "Es gibt nichts zu senden. Starte die Rundsendung neu.",
    "ADMIN_BROADCAST_STARTED": "🚀 Rundsendung gestartet…",
    "ADMIN_BROADCAST_RESULT": "✅ Rundsendung beendet. Zugestellt: {delivered}, fehlgeschlagen: {failed}, gesamt: {total}.",
    "ADMIN_CANCELLED": "Abgebrochen.",
    "ADMIN_EXPIRED": "⌛ Die Admin-Sitzung ist abgelaufen. Öffne /admin erneut.",
    "ADMIN_ACK": "OK",
    "ADMIN_USER_STATUS_PROMPT": "Schick die Nutzer-ID, die du nachschlagen möchtest.",
    "ADMIN_USER_STATUS_RESULT": (
        "👤 Nutzer {id}\n"
        "Sprache: {locale}\n"
        "Premium bis: {premium}\n"
        "Letzte Aktivität: {last_activity}"
    ),
    "ADMIN_VALUE_NONE": "—",
    "ADMIN_INVALID_USER_ID": "Bitte schick eine numerische Nutzer-ID.",
    "ADMIN_USER_NOT_FOUND": "Nutzer {id} wurde nicht gefunden. Schick eine andere ID.",
    "ADMIN_INVALID_ARGS": "Format: <Nutzer-ID> <Tage>.",
    "ADMIN_GRANT_PROMPT": "Schick die Nutzer-ID und die Anzahl der Tage, z. B. 123456789 30.",
    "ADMIN_GRANT_OK": "🎁 Premium für {id} um {days} Tage verlängert, bis {date}.",
    "ADMIN_LANG_STATS_TITLE": "🌍 Nutzer nach Sprache",
    "ADMIN_LANG_STATS_ROW": "{locale}: {count}",
    "ADMIN_LANG_STATS_EMPTY": "Noch keine Nutzer.",
}
