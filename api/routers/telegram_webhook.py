from __future__ import annotations

import hmac
import logging

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from pydantic import ValidationError

from api.dependencies import get_runtime, get_update_queue
from api.services.update_queue import UpdateQueue
from bot.models import Update
from bot.runtime import Runtime

router = APIRouter()
logger = logging.getLogger(__name__)


def _secret_matches(expected: str, provided: str | None) -> bool:
    if not expected:
        return True
    if not provided:
        return False
    return hmac.compare_digest(expected.encode(), provided.encode())


@router.post("/telegram/webhook")
async def handle_telegram_webhook(
    request: Request,
    x_telegram_bot_api_secret_token: str | None = Header(
        default=None, alias="X-Telegram-Bot-Api-Secret-Token"
    ),
    runtime: Runtime = Depends(get_runtime),
    queue: UpdateQueue = Depends(get_update_queue),
) -> dict[str, str]:
    if not _secret_matches(runtime.settings.telegram_secret_token, x_telegram_bot_api_secret_token):
        logger.warning("Rejected webhook call with a bad secret token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid secret token",
        )

    body = await request.body()
    try:
        update = Update.model_validate_json(body)
    except ValidationError as exc:
        logger.warning("Ignoring unparseable update: %s", exc.errors()[:1])
        return {"status": "ignored"}

    queue.enqueue(update)
    return {"status": "ok"}
