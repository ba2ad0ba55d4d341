TEXTS = {
    "START_GREETING": (
        "👋 Ciao, sono ChatBotChef, il tuo compagno in cucina!\n"
        "Trasformo i tuoi ingredienti in ricette, calcolo il tuo fabbisogno calorico "
        "e ti dico i valori nutrizionali di ogni prodotto."
    ),
    "MENU_MAIN_TITLE": "Cosa cuciniamo oggi? Scegli una modalità 👇",
    "MENU_BTN_RECIPES": "🍳 Ricette",
    "MENU_BTN_CALORIE": "🔥 Calcolo calorie",
    "MENU_BTN_INGREDIENT": "🥑 Valori nutrizionali",
    "MENU_BTN_HELP": "❓ Aiuto",
    "CHANGE_LANGUAGE_BUTTON": "🌐 Cambia lingua",
    "LANG_MENU_PROMPT": "🌍 Scegli la tua lingua:",
    "LANG_OTHER_BUTTON": "🌍 Altra",
    "LANG_OTHER_PROMPT": (
        "Salutami nella tua lingua o scrivi il suo nome (per esempio «Hola» o «Polski») "
        "e passerò a quella."
    ),
    "LANG_OTHER_UNKNOWN": (
        "Non ho riconosciuto questa lingua. Lingue supportate: {languages}.\n"
        "Prova con un saluto o con il nome della lingua."
    ),
    "LANG_OTHER_UNSUPPORTED": "Questa lingua non è ancora supportata, continuo in {language}.",
    "LANG_CHANGED": "✅ Lingua impostata su {language}.",
    "LANG_ALREADY": "ℹ️ {language} è già la tua lingua.",
    "MODE_RECIPES_ACTIVATED": (
        "🍳 Modalità ricette attiva. Mandami gli ingredienti che hai, con obiettivo o tempo a disposizione."
    ),
    "MODE_CALORIE_ACTIVATED": (
        "🔥 Calcolo calorie attivo. Indica sesso, età, altezza, peso, livello di attività e obiettivo."
    ),
    "MODE_INGREDIENT_ACTIVATED": (
        "🥑 Valori nutrizionali attivi. Scrivi un alimento e ti darò kcal e macro per 100 g."
    ),
    "HELP_BODY": (
        "❓ Come funziona ChatBotChef\n"
        "\n"
        "🍳 Ricette: invia gli ingredienti e ricevi una scheda ricetta.\n"
        "🔥 Calcolo calorie: fabbisogno giornaliero e macro per il tuo obiettivo.\n"
        "🥑 Valori nutrizionali: kcal e macro di ogni prodotto per 100 g.\n"
        "\n"
        "/start apre il menu, /language cambia la lingua, "
        "/premiumstatus mostra il tuo abbonamento.\n"
        "\n"
        "🌐 Sito: {website}\n"
        "🔒 Privacy: {privacy}\n"
        "📄 Offerta: {offer}\n"
        "✉️ Supporto: {support_email}"
    ),
    "CHEF_INTRO": "👨‍🍳 ChatBotChef:",
    "AI_ERROR": "⚠️ Scusa, non sono riuscito a preparare una risposta. Riprova tra un momento.",
    "ONLY_TEXT": "✍️ Posso leggere solo messaggi di testo. Scrivi la tua richiesta.",
    "LIMIT_REACHED": (
        "🔒 Hai usato tutti i {limit} messaggi gratuiti.\n"
        "Con Premium hai risposte illimitate per {duration} giorni a {price} €."
    ),
    "PREMIUM_STATUS_ACTIVE": "⭐ Premium attivo fino al {date}.",
    "PREMIUM_STATUS_INACTIVE": "Non hai un abbonamento Premium attivo.",
    "PREMIUM_REMINDER": "⏰ Il tuo Premium scade il {date}. Rinnovalo per continuare ad avere risposte illimitate.",
    "USER_PREMIUM_GRANTED": "🎁 Hai ricevuto Premium fino al {date}. Buon divertimento!",
    "WHOAMI": "🆔 Il tuo id: {id}\nUsername: {username}\nNome: {first_name}",
    "NOT_AUTHORIZED": "⛔ Questo comando è riservato agli amministratori.",
    "ADMIN_PANEL_TITLE": "🛠 Pannello admin",
    "ADMIN_BTN_STATS": "📊 Statistiche",
    "ADMIN_BTN_BROADCAST": "📣 Messaggio a tutti",
    "ADMIN_BTN_USER_STATUS": "🔎 Stato utente",
    "ADMIN_BTN_GRANT_PREMIUM": "🎁 Assegna premium",
    "ADMIN_BTN_LANG_STATS": "🌍 Lingue",
    "ADMIN_BTN_SEND": "✅ Invia",
    "ADMIN_BTN_CANCEL": "✖️ Annulla",
    "ADMIN_BTN_TYPE_TEXT": "📝 Testo",
    "ADMIN_BTN_TYPE_PHOTO": "🖼 Foto",
    "ADMIN_BTN_TYPE_VIDEO": "🎬 Video",
    "ADMIN_STATS": (
        "📊 Statistiche\n"
        "Utenti totali: {total}\n"
        "Attivi 7 giorni: {active7}\n"
        "Attivi 30 giorni: {active30}\n"
        "Premium: {premium}\n"
        "Bloccati: {blocked}"
    ),
    "ADMIN_BROADCAST_TYPE_TITLE": "📣 Che tipo di messaggio vuoi inviare a tutti?",
    "ADMIN_BROADCAST_PROMPT_TEXT": "Invia il testo del messaggio.",
    "ADMIN_BROADCAST_PROMPT_PHOTO": "Invia la foto del messaggio (didascalia facoltativa).",
    "ADMIN_BROADCAST_PROMPT_VIDEO": "Invia il video del messaggio (didascalia facoltativa).",
    "ADMIN_BROADCAST_PREVIEW_TITLE": "👀 Anteprima. Inviare a tutti gli utenti?",
    "ADMIN_BROADCAST_NOTHING_TO_SEND": "Non c'è nulla da inviare. Ricomincia l'invio.",
    "ADMIN_BROADCAST_STARTED": "🚀 Invio avviato…",
    "ADMIN_BROADCAST_RESULT": "✅ Invio completato. Consegnati: {delivered}, falliti: {failed}, totale: {total}.",
    "ADMIN_CANCELLED": "Annullato.",
    "ADMIN_EXPIRED": "⌛ La sessione admin è scaduta. Apri di nuovo /admin.",
    "ADMIN_ACK": "OK",
    "ADMIN_USER_STATUS_PROMPT": "Invia l'id dell'utente da cercare.",
    "ADMIN_USER_STATUS_RESULT": (
        "👤 Utente {id}\n"
        "Lingua: {locale}\n"
        "Premium fino al: {premium}\n"
        "Ultima attività: {last_activity}"
    ),
    "ADMIN_VALUE_NONE": "—",
    "ADMIN_INVALID_USER_ID": "Invia un id utente numerico.",
    "ADMIN_USER_NOT_FOUND": "Utente {id} non trovato. Invia un altro id.",
    "ADMIN_INVALID_ARGS": "Usa il formato: <id utente> <giorni>.",
    "ADMIN_GRANT_PROMPT": "Invia l'id utente e il numero di giorni, ad es. 123456789 30.",
    "ADMIN_GRANT_OK": "🎁 Premium per {id} esteso di {days} giorni, fino al {date}.",
    "ADMIN_LANG_STATS_TITLE": "🌍 Utenti per lingua",
    "ADMIN_LANG_STATS_ROW": "{locale}: {count}",
    "ADMIN_LANG_STATS_EMPTY": "Ancora nessun utente.",
}
