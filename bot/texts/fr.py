TEXTS = {
    "START_GREETING": (
        "👋 Bonjour, je suis ChatBotChef, ton compagnon de cuisine !\n"
        "Je transforme tes ingrédients en recettes, je calcule tes besoins caloriques "
        "et je te donne les macros de n'importe quel produit."
    ),
    "MENU_MAIN_TITLE": "Qu'est-ce qu'on cuisine aujourd'hui ? Choisis un mode 👇",
    "MENU_BTN_RECIPES": "🍳 Recettes",
    "MENU_BTN_CALORIE": "🔥 Calculateur de calories",
    "MENU_BTN_INGREDIENT": "🥑 Macros des aliments",
    "MENU_BTN_HELP": "❓ Aide",
    "CHANGE_LANGUAGE_BUTTON": "🌐 Changer de langue",
    "LANG_MENU_PROMPT": "🌍 Choisis ta langue :",
    "LANG_OTHER_BUTTON": "🌍 Autre",
    "LANG_OTHER_PROMPT": (
        "Salue-moi dans ta langue ou écris son nom (par exemple « Hola » ou « Polski ») "
        "et je passerai à cette langue."
    ),
    "LANG_OTHER_UNKNOWN": (
        "Je n'ai pas reconnu cette langue. Langues disponibles : {languages}.\n"
        "Essaie avec une salutation ou le nom de la langue."
    ),
    "LANG_OTHER_UNSUPPORTED": "Cette langue n'est pas encore prise en charge, je continue en {language}.",
    "LANG_CHANGED": "✅ Langue réglée sur {language}.",
    "LANG_ALREADY": "ℹ️ {language} est déjà ta langue.",
    "MODE_RECIPES_ACTIVATED": (
        "🍳 Mode recettes activé. Envoie-moi tes ingrédients, avec ton objectif ou ton temps disponible."
    ),
    "MODE_CALORIE_ACTIVATED": (
        "🔥 Calculateur activé. Envoie ton sexe, âge, taille, poids, niveau d'activité et objectif."
    ),
    "MODE_INGREDIENT_ACTIVATED": (
        "🥑 Macros activées. Donne un aliment et je t'indique kcal et macros pour 100 g."
    ),
    "HELP_BODY": (
        "❓ Comment fonctionne ChatBotChef\n"
        "\n"
        "🍳 Recettes : envoie des ingrédients et reçois une fiche recette.\n"
        "🔥 Calculateur : tes kcal journalières et macros selon ton objectif.\n"
        "🥑 Macros : kcal et macros de tout produit pour 100 g.\n"
        "\n"
        "/start ouvre le menu, /language change la langue, "
        "/premiumstatus affiche ton abonnement.\n"
        "\n"
        "🌐 Site : {website}\n"
        "🔒 Confidentialité : {privacy}\n"
        "📄 Offre : {offer}\n"
        "✉️ Support : {support_email}"
    ),
    "CHEF_INTRO": "👨‍🍳 ChatBotChef :",
    "AI_ERROR": "⚠️ Désolé, je n'ai pas pu préparer de réponse. Réessaie dans un instant.",
    "ONLY_TEXT": "✍️ Je ne lis que les messages texte. Écris ta demande.",
    "LIMIT_REACHED": (
        "🔒 Tu as utilisé tes {limit} messages gratuits.\n"
        "Premium t'offre des réponses illimitées pendant {duration} jours pour {price} €."
    ),
    "PREMIUM_STATUS_ACTIVE": "⭐ Premium actif jusqu'au {date}.",
    "PREMIUM_STATUS_INACTIVE": "Tu n'as pas d'abonnement Premium actif.",
    "PREMIUM_REMINDER": "⏰ Ton Premium se termine le {date}. Renouvelle-le pour garder des réponses illimitées.",
    "USER_PREMIUM_GRANTED": "🎁 Tu as reçu Premium jusqu'au {date}. Profite !",
    "WHOAMI": "🆔 Ton id : {id}\nNom d'utilisateur : {username}\nPrénom : {first_name}",
    "NOT_AUTHORIZED": "⛔ Cette commande est réservée aux administrateurs.",
    "ADMIN_PANEL_TITLE": "🛠 Panneau d'administration",
    "ADMIN_BTN_STATS": "📊 Statistiques",
    "ADMIN_BTN_BROADCAST": "📣 Diffusion",
    "ADMIN_BTN_USER_STATUS": "🔎 Statut utilisateur",
    "ADMIN_BTN_GRANT_PREMIUM": "🎁 Offrir premium",
    "ADMIN_BTN_LANG_STATS": "🌍 Langues",
    "ADMIN_BTN_SEND": "✅ Envoyer",
    "ADMIN_BTN_CANCEL": "✖️ Annuler",
    "ADMIN_BTN_TYPE_TEXT": "📝 Texte",
    "ADMIN_BTN_TYPE_PHOTO": "🖼 Photo",
    "ADMIN_BTN_TYPE_VIDEO": "🎬 Vidéo",
    "ADMIN_STATS": (
        "📊 Statistiques\n"
        "Utilisateurs : {total}\n"
        "Actifs 7 jours : {active7}\n"
        "Actifs 30 jours : {active30}\n"
        "Premium : {premium}\n"
        "Bloqués : {blocked}"
    ),
    "ADMIN_BROADCAST_TYPE_TITLE": "📣 Quel type de diffusion veux-tu envoyer ?",
    "ADMIN_BROADCAST_PROMPT_TEXT": "Envoie le texte de la diffusion.",
    "ADMIN_BROADCAST_PROMPT_PHOTO": "Envoie la photo de la diffusion (légende facultative).",
    "ADMIN_BROADCAST_PROMPT_VIDEO": "Envoie la vidéo de la diffusion (légende facultative).",
    "ADMIN_BROADCAST_PREVIEW_TITLE": "👀 Aperçu. Envoyer à tous les utilisateurs ?",
    "ADMIN_BROADCAST_NOTHING_TO_SEND": "Rien à envoyer. Recommence la diffusion.",
    "ADMIN_BROADCAST_STARTED": "🚀 Diffusion lancée…",
    "ADMIN_BROADCAST_RESULT": "✅ Diffusion terminée. Livrés : {delivered}, échecs : {failed}, total : {total}.",
    "ADMIN_CANCELLED": "Annulé.",
    "ADMIN_EXPIRED": "⌛ La session d'administration a expiré. Ouvre /admin à nouveau.",
    "ADMIN_ACK": "OK",
    "ADMIN_USER_STATUS_PROMPT": "Envoie l'id de l'utilisateur à consulter.",
    "ADMIN_USER_STATUS_RESULT": (
        "👤 Utilisateur {id}\n"
        "Langue : {locale}\n"
        "Premium jusqu'au : {premium}\n"
        "Dernière activité : {last_activity}"
    ),
    "ADMIN_VALUE_NONE": "—",
    "ADMIN_INVALID_USER_ID": "Envoie un id utilisateur numérique.",
    "ADMIN_USER_NOT_FOUND": "Utilisateur {id} introuvable. Envoie un autre id.",
    "ADMIN_INVALID_ARGS": "Format : <id utilisateur> <jours>.",
    "ADMIN_GRANT_PROMPT": "Envoie l'id utilisateur et le nombre de jours, par ex. 123456789 30.",
    "ADMIN_GRANT_OK": "🎁 Premium de {id} prolongé de {days} jours, jusqu'au {date}.",
    "ADMIN_LANG_STATS_TITLE": "🌍 Utilisateurs par langue",
    "ADMIN_LANG_STATS_ROW": "{locale} : {count}",
    "ADMIN_LANG_STATS_EMPTY": "Aucun utilisateur pour l'instant.",
}
