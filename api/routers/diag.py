from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_runtime
from bot.runtime import Runtime
from core.logging import mask_secret

router = APIRouter(prefix="/diag")


@router.get("/echo")
async def diag_echo(runtime: Runtime = Depends(get_runtime)) -> dict[str, Any]:
    settings = runtime.settings
    return {
        "transport": settings.transport,
        "parse_mode": settings.parse_mode,
        "app_env": settings.app_env,
        "openai_model": settings.openai_model,
        "telegram_bot_token": mask_secret(settings.telegram_bot_token),
    }


@router.get("/vars")
async def diag_vars(runtime: Runtime = Depends(get_runtime)) -> dict[str, Any]:
    settings = runtime.settings
    if not settings.is_dev:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return {
        "TELEGRAM_BOT_TOKEN": mask_secret(settings.telegram_bot_token),
        "TELEGRAM_SECRET_TOKEN": mask_secret(settings.telegram_secret_token),
        "TELEGRAM_WEBHOOK_URL": settings.telegram_webhook_url,
        "TELEGRAM_TRANSPORT": settings.transport,
        "PARSE_MODE": settings.parse_mode,
        "ADMIN_IDS_COUNT": len(settings.admin_ids),
        "OPENAI_API_KEY": mask_secret(settings.openai_api_key),
        "OPENAI_MODEL": settings.openai_model,
        "DB_PATH": settings.db_path,
        "FREE_TOTAL_MSG_LIMIT": settings.free_total_msg_limit,
        "PREMIUM_PRICE_EUR": settings.premium_price_eur,
        "PREMIUM_DURATION_DAYS": settings.premium_duration_days,
        "REMINDER_DAYS_BEFORE": list(settings.reminder_days_before),
        "DEFAULT_LOCALE": settings.default_locale,
        "AUTO_TRANSLATE": settings.auto_translate,
    }
