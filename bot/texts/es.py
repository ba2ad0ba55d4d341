TEXTS = {
    "START_GREETING": (
        "👋 ¡Hola, soy ChatBotChef, tu compañero de cocina!\n"
        "Convierto tus ingredientes en recetas, calculo tus calorías diarias "
        "y te digo los macros de cualquier producto."
    ),
    "MENU_MAIN_TITLE": "¿Qué cocinamos hoy? Elige un modo 👇",
    "MENU_BTN_RECIPES": "🍳 Recetas",
    "MENU_BTN_CALORIE": "🔥 Calculadora de calorías",
    "MENU_BTN_INGREDIENT": "🥑 Macros de ingredientes",
    "MENU_BTN_HELP": "❓ Ayuda",
    "CHANGE_LANGUAGE_BUTTON": "🌐 Cambiar idioma",
    "LANG_MENU_PROMPT": "🌍 Elige tu idioma:",
    "LANG_OTHER_BUTTON": "🌍 Otro",
    "LANG_OTHER_PROMPT": (
        "Salúdame en tu idioma o escribe su nombre (por ejemplo «Ciao» o «Polski») "
        "y cambiaré a él."
    ),
    "LANG_OTHER_UNKNOWN": (
        "No he reconocido ese idioma. Idiomas disponibles: {languages}.\n"
        "Prueba con un saludo o el nombre del idioma."
    ),
    "LANG_OTHER_UNSUPPORTED": "Ese idioma aún no está disponible, seguiré en {language}.",
    "LANG_CHANGED": "✅ Idioma cambiado a {language}.",
    "LANG_ALREADY": "ℹ️ {language} ya es tu idioma.",
    "MODE_RECIPES_ACTIVATED": (
        "🍳 Modo recetas activado. Envíame los ingredientes que tienes y, si quieres, tu objetivo o tiempo."
    ),
    "MODE_CALORIE_ACTIVATED": (
        "🔥 Calculadora activada. Envía sexo, edad, altura, peso, nivel de actividad y objetivo."
    ),
    "MODE_INGREDIENT_ACTIVATED": (
        "🥑 Macros activados. Escribe un producto y te daré kcal y macros por 100 g."
    ),
    "HELP_BODY": (
        "❓ Cómo funciona ChatBotChef\n"
        "\n"
        "🍳 Recetas: envía ingredientes y recibe una ficha de receta.\n"
        "🔥 Calculadora: tus kcal diarias y macros según tu objetivo.\n"
        "🥑 Macros: kcal y macros de cualquier producto por 100 g.\n"
        "\n"
        "/start abre el menú, /language cambia el idioma, "
        "/premiumstatus muestra tu suscripción.\n"
        "\n"
        "🌐 Web: {website}\n"
        "🔒 Privacidad: {privacy}\n"
        "📄 Oferta: {offer}\n"
        "✉️ Soporte: {support_email}"
    ),
    "CHEF_INTRO": "👨‍🍳 ChatBotChef:",
    "AI_ERROR": "⚠️ Lo siento, ahora mismo no he podido preparar una respuesta. Inténtalo de nuevo en un momento.",
    "ONLY_TEXT": "✍️ Solo puedo leer mensajes de texto. Escribe tu petición.",
    "LIMIT_REACHED": (
        "🔒 Has usado los {limit} mensajes gratuitos.\n"
        "Con Premium tienes respuestas ilimitadas durante {duration} días por {price} €."
    ),
    "PREMIUM_STATUS_ACTIVE": "⭐ Premium activo hasta el {date}.",
    "PREMIUM_STATUS_INACTIVE": "No tienes una suscripción Premium activa.",
    "PREMIUM_REMINDER": "⏰ Tu Premium termina el {date}. Renuévalo para seguir con respuestas ilimitadas.",
    "USER_PREMIUM_GRANTED": "🎁 Has recibido Premium hasta el {date}. ¡Disfrútalo!",
    "WHOAMI": "🆔 Tu id: {id}\nUsuario: {username}\nNombre: {first_name}",
    "NOT_AUTHORIZED": "⛔ Este comando solo está disponible para administradores.",
    "ADMIN_PANEL_TITLE": "🛠 Panel de administración",
    "ADMIN_BTN_STATS": "📊 Estadísticas",
    "ADMIN_BTN_BROADCAST": "📣 Difusión",
    "ADMIN_BTN_USER_STATUS": "🔎 Estado de usuario",
    "ADMIN_BTN_GRANT_PREMIUM": "🎁 Dar premium",
    "ADMIN_BTN_LANG_STATS": "🌍 Idiomas",
    "ADMIN_BTN_SEND": "✅ Enviar",
    "ADMIN_BTN_CANCEL": "✖️ Cancelar",
    "ADMIN_BTN_TYPE_TEXT": "📝 Texto",
    "ADMIN_BTN_TYPE_PHOTO": "🖼 Foto",
    "ADMIN_BTN_TYPE_VIDEO": "🎬 Vídeo",
    "ADMIN_STATS": (
        "📊 Estadísticas\n"
        "Usuarios totales: {total}\n"
        "Activos 7 días: {active7}\n"
        "Activos 30 días: {active30}\n"
        "Premium: {premium}\n"
        "Bloqueados: {blocked}"
    ),
    "ADMIN_BROADCAST_TYPE_TITLE": "📣 ¿Qué tipo de difusión quieres enviar?",
    "ADMIN_BROADCAST_PROMPT_TEXT": "Envía el texto de la difusión.",
    "ADMIN_BROADCAST_PROMPT_PHOTO": "Envía la foto de la difusión (el pie de foto es opcional).",
    "ADMIN_BROADCAST_PROMPT_VIDEO": "Envía el vídeo de la difusión (el pie es opcional).",
    "ADMIN_BROADCAST_PREVIEW_TITLE": "👀 Vista previa. ¿Enviar a todos los usuarios?",
    "ADMIN_BROADCAST_NOTHING_TO_SEND": "No hay nada que enviar. Empieza la difusión de nuevo.",
    "ADMIN_BROADCAST_STARTED": "🚀 Difusión iniciada…",
    "ADMIN_BROADCAST_RESULT": "✅ Difusión terminada. Entregados: {delivered}, fallidos: {failed}, total: {total}.",
    "ADMIN_CANCELLED": "Cancelado.",
    "ADMIN_EXPIRED": "⌛ La sesión de administración ha caducado. Abre /admin de nuevo.",
    "ADMIN_ACK": "OK",
    "ADMIN_USER_STATUS_PROMPT": "Envía el id del usuario que quieres consultar.",
    "ADMIN_USER_STATUS_RESULT": (
        "👤 Usuario {id}\n"
        "Idioma: {locale}\n"
        "Premium hasta: {premium}\n"
        "Última actividad: {last_activity}"
    ),
    "ADMIN_VALUE_NONE": "—",
    "ADMIN_INVALID_USER_ID": "Envía un id de usuario numérico.",
    "ADMIN_USER_NOT_FOUND": "No se encontró el usuario {id}. Envía otro id.",
    "ADMIN_INVALID_ARGS": "Usa el formato: <id de usuario> <días>.",
    "ADMIN_GRANT_PROMPT": "Envía el id de usuario y el número de días, p. ej. 123456789 30.",
    "ADMIN_GRANT_OK": "🎁 Premium de {id} ampliado {days} días, hasta el {date}.",
    "ADMIN_LANG_STATS_TITLE": "🌍 Usuarios por idioma",
    "ADMIN_LANG_STATS_ROW": "{locale}: {count}",
    "ADMIN_LANG_STATS_EMPTY": "Todavía no hay usuarios.",
}
