from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from bot.models import Update
from core.db import ChefDB

logger = logging.getLogger(__name__)

Handler = Callable[[Update], Awaitable[None]]


class UpdateQueue:
    """Hands webhook updates to background workers that dedupe and dispatch them.

    ``enqueue`` returns immediately so the HTTP handler can acknowledge before
    processing finishes. ``stop`` drains pending updates before cancelling the
    workers.
    """

    def __init__(self, db: ChefDB, handler: Handler, *, workers: int = 4) -> None:
        self.db = db
        self.handler = handler
        self.workers = max(1, workers)
        self._queue: asyncio.Queue[Update] | None = None
        self._tasks: list[asyncio.Task] = []

    def start(self) -> None:
        if self._tasks:
            return
        self._queue = asyncio.Queue()
        self._tasks = [
            asyncio.create_task(self._worker(index), name=f"update-worker-{index}")
            for index in range(self.workers)
        ]
        logger.info("Update workers started", extra={"workers": self.workers})

    async def stop(self) -> None:
        if not self._tasks or self._queue is None:
            return
        await self._queue.join()
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []
        self._queue = None
        logger.info("Update workers stopped")

    def enqueue(self, update: Update) -> None:
        if self._queue is None:
            raise RuntimeError("UpdateQueue.start() must be called before enqueue()")
        self._queue.put_nowait(update)

    async def process(self, update: Update) -> bool:
        """Dispatch ``update`` unless it was already processed; returns whether it ran."""
        if not self.db.mark_processed(update.update_id):
            logger.info("Duplicate update %s skipped", update.update_id)
            return False
        await self.handler(update)
        return True

    async def _worker(self, index: int) -> None:
        assert self._queue is not None
        queue = self._queue
        while True:
            update = await queue.get()
            try:
                await self.process(update)
            except Exception:
                logger.exception("Worker %s failed on update %s", index, update.update_id)
            finally:
                queue.task_done()


__all__ = ["UpdateQueue"]
