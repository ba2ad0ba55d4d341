from __future__ import annotations

import asyncio
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Awaitable, Callable

from bot.dispatcher import UpdateDispatcher
from bot.services.reminders import ReminderService
from bot.telegram import TelegramClient

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class OffsetStore:
    """Long-polling resume cursor kept as a single integer in a text file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> int | None:
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        except OSError:
            logger.warning("Could not read offset file %s", self.path, exc_info=True)
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring corrupt offset file %s: %r", self.path, raw[:32])
            return None

    def save(self, offset: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as handle:
            handle.write(str(offset))
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, self.path)


class LongPollingRunner:
    def __init__(
        self,
        telegram: TelegramClient,
        dispatcher: UpdateDispatcher,
        offsets: OffsetStore,
        *,
        poll_timeout_sec: int,
        poll_interval_ms: int,
        reminders: ReminderService | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.telegram = telegram
        self.dispatcher = dispatcher
        self.offsets = offsets
        self.poll_timeout_sec = poll_timeout_sec
        self.poll_interval = max(poll_interval_ms, 0) / 1000
        self.reminders = reminders
        self._sleep = sleep
        self._stopped = asyncio.Event()

    def stop(self) -> None:
        self._stopped.set()

    async def prepare(self) -> None:
        if await self.telegram.delete_webhook():
            logger.info("Webhook removed before long polling")
        if self.reminders is not None:
            self.reminders.purge_processed_updates(now=datetime.now(timezone.utc))

    async def poll_once(self, offset: int | None) -> int | None:
        """Fetch and dispatch one batch; returns the offset for the next fetch."""
        updates = await self.telegram.get_updates(offset, self.poll_timeout_sec)
        if not updates:
            return offset
        for update in updates:
            await self.dispatcher.handle(update)
        next_offset = max(update.update_id for update in updates) + 1
        self.offsets.save(next_offset)
        logger.debug("Processed batch", extra={"count": len(updates), "offset": next_offset})
        return next_offset

    async def run(self, *, max_iterations: int | None = None) -> None:
        await self.prepare()
        offset = self.offsets.load()
        logger.info(
            "Long polling started",
            extra={"offset": offset, "timeout": self.poll_timeout_sec},
        )
        iterations = 0
        while not self._stopped.is_set():
            if max_iterations is not None and iterations >= max_iterations:
                break
            iterations += 1
            try:
                offset = await self.poll_once(offset)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("getUpdates failed; retrying after %.2fs", self.poll_interval)
            await self._sleep(self.poll_interval)
        logger.info("Long polling stopped")


__all__ = ["LongPollingRunner", "OffsetStore"]
