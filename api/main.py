from __future__ import annotations

import asyncio
import logging

from fastapi import FastAPI

from api.routers import diag, housekeeping, telegram_webhook
from api.services.update_queue import UpdateQueue
from bot.runtime import Runtime, build_runtime
from core.config import ensure_bot_token, load_settings

logger = logging.getLogger(__name__)


def create_app(runtime: Runtime | None = None) -> FastAPI:
    app = FastAPI(title="ChatBotChef")
    app.state.runtime = runtime
    app.state.owns_runtime = runtime is None
    app.state.update_queue = None
    app.state.background_tasks = set()

    @app.on_event("startup")
    async def start_runtime() -> None:
        if app.state.runtime is None:
            settings = load_settings()
            ensure_bot_token(settings)
            app.state.runtime = build_runtime(settings)
        current: Runtime = app.state.runtime
        queue = UpdateQueue(
            current.ctx.db,
            current.dispatcher.handle,
            workers=current.settings.webhook_workers,
        )
        queue.start()
        app.state.update_queue = queue

        webhook_url = current.settings.telegram_webhook_url
        if webhook_url and not current.settings.is_long_polling:
            registered = await current.ctx.telegram.set_webhook(
                webhook_url, current.settings.telegram_secret_token
            )
            logger.info("Webhook registration", extra={"ok": registered})

    @app.on_event("shutdown")
    async def stop_runtime() -> None:
        queue: UpdateQueue | None = app.state.update_queue
        if queue is not None:
            await queue.stop()
        pending = list(app.state.background_tasks)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        if app.state.owns_runtime and app.state.runtime is not None:
            await app.state.runtime.close()

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(telegram_webhook.router)
    app.include_router(housekeeping.router)
    app.include_router(diag.router)
    return app


app = create_app()
