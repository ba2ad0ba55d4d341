from __future__ import annotations

import asyncio
import logging

import uvicorn

from api.main import create_app
from bot.runtime import Runtime, build_runtime
from core.config import Settings, ensure_bot_token, load_settings
from core.logging import mask_secret, setup_logging

logger = logging.getLogger(__name__)


async def run_long_polling(runtime: Runtime) -> None:
    runner = runtime.polling_runner()
    try:
        await runner.run()
    finally:
        await runtime.close()


async def run_webhook_server(runtime: Runtime, settings: Settings) -> None:
    config = uvicorn.Config(
        create_app(runtime),
        host="0.0.0.0",
        port=settings.port,
        log_config=None,
    )
    server = uvicorn.Server(config)
    try:
        await server.serve()
    finally:
        await runtime.close()


async def main() -> None:
    settings = load_settings()
    setup_logging(settings)
    ensure_bot_token(settings)

    runtime = build_runtime(settings)
    db_ok, db_messages = runtime.ctx.db.check_health()
    for message in db_messages:
        logger.info("DB health check: %s", message, extra={"mode": "startup"})
    if not db_ok:
        logger.error("DB health check failed; exiting for safety.")
        raise SystemExit(1)

    logger.info(
        "Starting ChatBotChef",
        extra={
            "mode": "startup",
            "transport": settings.transport,
            "token": mask_secret(settings.telegram_bot_token),
            "admin_ids_count": len(settings.admin_ids),
            "parse_mode": settings.parse_mode,
        },
    )
    if settings.is_long_polling:
        await run_long_polling(runtime)
    else:
        await run_webhook_server(runtime, settings)


if __name__ == "__main__":
    asyncio.run(main())
