from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from bot.texts.i18n import I18n
from core.config import Settings
from core.db import ChefDB

logger = logging.getLogger(__name__)


def format_date(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d")


@dataclass(frozen=True)
class HousekeepingReport:
    reminders_sent: int
    markers_purged: int


class ReminderService:
    def __init__(self, db: ChefDB, telegram, i18n: I18n, settings: Settings) -> None:
        self.db = db
        self.telegram = telegram
        self.i18n = i18n
        self.settings = settings

    async def dispatch_renewal_reminders(self, *, now: datetime | None = None) -> int:
        due = self.db.find_expiring_within(self.settings.reminder_days_before, now=now)
        if not due:
            logger.debug("No premium reminders due")
            return 0

        sent = 0
        for user_id, expiry in due:
            user = self.db.get_user(user_id)
            if user is None or user.is_blocked:
                continue
            text = self.i18n.translate(
                user.locale, "PREMIUM_REMINDER", {"date": format_date(expiry)}
            )
            if await self.telegram.send_message(user_id, text) is not None:
                sent += 1
            else:
                logger.warning("Failed to send premium reminder to %s", user_id)
        logger.info("Premium reminders sent", extra={"sent": sent, "due": len(due)})
        return sent

    def purge_processed_updates(self, *, now: datetime | None = None) -> int:
        now = now or datetime.now(timezone.utc)
        cutoff = now - timedelta(days=self.settings.processed_updates_retention_days)
        purged = self.db.purge_processed_updates(cutoff)
        if purged:
            logger.info("Purged processed update markers", extra={"purged": purged})
        return purged

    async def run_housekeeping(self, *, now: datetime | None = None) -> HousekeepingReport:
        reminders_sent = await self.dispatch_renewal_reminders(now=now)
        markers_purged = self.purge_processed_updates(now=now)
        return HousekeepingReport(reminders_sent=reminders_sent, markers_purged=markers_purged)


__all__ = ["HousekeepingReport", "ReminderService", "format_date"]
