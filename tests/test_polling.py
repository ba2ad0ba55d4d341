from __future__ import annotations

import asyncio

from bot.models import Update
from bot.polling import LongPollingRunner, OffsetStore


class RecordingDispatcher:
    def __init__(self) -> None:
        self.handled: list[int] = []

    async def handle(self, update: Update) -> None:
        self.handled.append(update.update_id)


class FlakyTelegram:
    def __init__(self, batches) -> None:
        self.batches = list(batches)
        self.offsets: list[int | None] = []
        self.webhook_deleted = 0

    async def delete_webhook(self) -> bool:
        self.webhook_deleted += 1
        return True

    async def get_updates(self, offset, timeout):
        self.offsets.append(offset)
        batch = self.batches.pop(0) if self.batches else []
        if isinstance(batch, Exception):
            raise batch
        return batch


async def no_sleep(_: float) -> None:
    return None


def make_update(update_id: int) -> Update:
    return Update.model_validate(
        {
            "update_id": update_id,
            "message": {"message_id": update_id, "chat": {"id": 1}, "text": "hi"},
        }
    )


def test_offset_store_round_trip(tmp_path):
    store = OffsetStore(tmp_path / "run" / "offset.dat")
    assert store.load() is None

    store.save(42)

    assert store.load() == 42
    assert (tmp_path / "run" / "offset.dat").read_text(encoding="utf-8") == "42"
    assert not (tmp_path / "run" / "offset.dat.tmp").exists()


def test_corrupt_offset_file_is_ignored(tmp_path):
    path = tmp_path / "offset.dat"
    path.write_text("not-a-number", encoding="utf-8")

    assert OffsetStore(path).load() is None


def test_runner_dispatches_sequentially_and_persists_offset(tmp_path):
    telegram = FlakyTelegram([[make_update(7), make_update(8)], [make_update(9)]])
    dispatcher = RecordingDispatcher()
    offsets = OffsetStore(tmp_path / "offset.dat")
    runner = LongPollingRunner(
        telegram, dispatcher, offsets, poll_timeout_sec=40, poll_interval_ms=800, sleep=no_sleep
    )

    asyncio.run(runner.run(max_iterations=3))

    assert telegram.webhook_deleted == 1
    assert dispatcher.handled == [7, 8, 9]
    assert telegram.offsets == [None, 9, 10]
    assert offsets.load() == 10


def test_runner_resumes_from_saved_offset(tmp_path):
    offsets = OffsetStore(tmp_path / "offset.dat")
    offsets.save(100)
    telegram = FlakyTelegram([[]])
    runner = LongPollingRunner(
        telegram,
        RecordingDispatcher(),
        offsets,
        poll_timeout_sec=40,
        poll_interval_ms=800,
        sleep=no_sleep,
    )

    asyncio.run(runner.run(max_iterations=1))

    assert telegram.offsets == [100]


def test_fetch_failure_is_logged_and_retried(tmp_path):
    delays: list[float] = []

    async def record_sleep(delay: float) -> None:
        delays.append(delay)

    telegram = FlakyTelegram([ConnectionError("network down"), [make_update(1)]])
    dispatcher = RecordingDispatcher()
    runner = LongPollingRunner(
        telegram,
        dispatcher,
        OffsetStore(tmp_path / "offset.dat"),
        poll_timeout_sec=40,
        poll_interval_ms=800,
        sleep=record_sleep,
    )

    asyncio.run(runner.run(max_iterations=2))

    assert dispatcher.handled == [1]
    assert telegram.offsets == [None, None]
    assert delays == [0.8, 0.8]


def test_startup_purges_old_markers(tmp_path):
    class StubReminders:
        def __init__(self) -> None:
            self.purged = 0

        def purge_processed_updates(self, *, now=None) -> int:
            self.purged += 1
            return 0

    reminders = StubReminders()
    runner = LongPollingRunner(
        FlakyTelegram([]),
        RecordingDispatcher(),
        OffsetStore(tmp_path / "offset.dat"),
        poll_timeout_sec=1,
        poll_interval_ms=0,
        reminders=reminders,
        sleep=no_sleep,
    )

    asyncio.run(runner.run(max_iterations=0))

    assert reminders.purged == 1
