from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable

from bot.callbacks import BroadcastType
from bot.sessions import BroadcastDraft
from core.retry import BROADCAST_RETRY, RetryPolicy

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


@dataclass(frozen=True)
class BroadcastResult:
    delivered: int
    failed: int
    total: int


class BroadcastService:
    def __init__(
        self,
        telegram,
        *,
        retry_policy: RetryPolicy = BROADCAST_RETRY,
        message_delay: float = 0.04,
        batch_size: int = 30,
        batch_delay: float = 1.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.telegram = telegram
        self.retry_policy = retry_policy
        self.message_delay = message_delay
        self.batch_size = max(1, batch_size)
        self.batch_delay = batch_delay
        self._sleep = sleep

    async def send(self, targets: Iterable[int], draft: BroadcastDraft) -> BroadcastResult:
        recipients = list(dict.fromkeys(targets))
        delivered = 0
        failed = 0

        for index, chat_id in enumerate(recipients, start=1):
            if await self._deliver(chat_id, draft):
                delivered += 1
            else:
                failed += 1

            if index == len(recipients):
                break
            if index % self.batch_size == 0:
                await self._sleep(self.batch_delay)
            else:
                await self._sleep(self.message_delay)

        result = BroadcastResult(delivered=delivered, failed=failed, total=len(recipients))
        logger.info(
            "Broadcast finished",
            extra={
                "broadcast_type": draft.type.value,
                "delivered": result.delivered,
                "failed": result.failed,
                "total": result.total,
            },
        )
        return result

    async def _deliver(self, chat_id: int, draft: BroadcastDraft) -> bool:
        max_attempts = self.retry_policy.max_attempts
        for attempt in range(1, max_attempts + 1):
            try:
                message_id = await self._send_once(chat_id, draft)
            except Exception:
                logger.exception("Broadcast delivery to %s raised", chat_id)
                message_id = None
            if message_id is not None:
                return True
            if self.telegram.is_blocked(chat_id):
                logger.info("Broadcast skipped blocked chat %s", chat_id)
                return False
            if not self.retry_policy.should_retry(attempt):
                break
            await self._sleep(self.retry_policy.delay_for(attempt))
        logger.warning("Broadcast delivery to %s failed after %s attempts", chat_id, max_attempts)
        return False

    async def _send_once(self, chat_id: int, draft: BroadcastDraft) -> int | None:
        if draft.type is BroadcastType.PHOTO:
            return await self.telegram.send_photo(chat_id, draft.file_id, caption=draft.text)
        if draft.type is BroadcastType.VIDEO:
            return await self.telegram.send_video(chat_id, draft.file_id, caption=draft.text)
        return await self.telegram.send_message(chat_id, draft.text or "")


__all__ = ["BroadcastResult", "BroadcastService"]
