from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_runtime
from bot.runtime import Runtime

router = APIRouter()
logger = logging.getLogger(__name__)


async def _run_sweep(runtime: Runtime) -> None:
    try:
        report = await runtime.ctx.reminders.run_housekeeping()
    except Exception:
        logger.exception("Housekeeping sweep failed")
        return
    logger.info(
        "Housekeeping sweep finished",
        extra={"reminders_sent": report.reminders_sent, "markers_purged": report.markers_purged},
    )


@router.post("/internal/housekeeping/reminders")
async def trigger_reminders(
    request: Request, runtime: Runtime = Depends(get_runtime)
) -> dict[str, str]:
    task = asyncio.create_task(_run_sweep(runtime))
    request.app.state.background_tasks.add(task)
    task.add_done_callback(request.app.state.background_tasks.discard)
    return {"status": "scheduled"}
