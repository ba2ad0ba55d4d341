from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Iterable

from core.states import ConversationState, Mode

DEFAULT_DB_PATH = Path(os.getenv("DB_URL", "data/chatbotchef.db"))
HISTORY_WINDOW = 20
logger = logging.getLogger(__name__)


@dataclass
class UserRecord:
    user_id: int
    username: str | None
    first_name: str | None
    platform_language: str | None
    locale: str | None
    language_selected: bool
    conversation_state: ConversationState
    mode: Mode | None
    last_welcome_image_message_id: int | None
    last_greeting_message_id: int | None
    last_menu_message_id: int | None
    last_start_command_message_id: int | None
    is_blocked: bool
    created_at: datetime
    last_seen_at: datetime | None


@dataclass
class HistoryEntry:
    role: str
    content: str
    created_at: datetime


@dataclass
class AdminOverview:
    total_users: int
    active_7_days: int
    active_30_days: int
    active_premium: int
    blocked_users: int


@dataclass
class LanguageStat:
    locale: str
    count: int


@dataclass
class UserStatus:
    user_id: int
    locale: str | None
    premium_until: datetime | None
    last_activity: datetime | None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_db(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _from_db(raw: str | None) -> datetime | None:
    if not raw:
        return None
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _ensure_parent_dir(path: str | os.PathLike[str]) -> None:
    directory = Path(path).parent
    if directory and not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)


def _column_exists(conn: sqlite3.Connection, table: str, column: str) -> bool:
    rows = conn.execute(f"PRAGMA table_info({table})").fetchall()
    return any(row[1] == column for row in rows)


def _add_days_to_premium(
    current: datetime | None, days: int, *, now: datetime
) -> datetime:
    base = current if current and current > now else now
    return base + timedelta(days=days)


_USER_COLUMNS: dict[str, str] = {
    "username": "TEXT",
    "first_name": "TEXT",
    "platform_language": "TEXT",
    "language_selected": "INT DEFAULT 0",
    "mode": "TEXT",
    "last_welcome_image_message_id": "INT",
    "last_greeting_message_id": "INT",
    "last_menu_message_id": "INT",
    "last_start_command_message_id": "INT",
    "is_blocked": "INT DEFAULT 0",
    "blocked_at": "TEXT",
    "last_seen_at": "TEXT",
}

_MESSAGE_ID_COLUMNS = {
    "welcome_image": "last_welcome_image_message_id",
    "greeting": "last_greeting_message_id",
    "menu": "last_menu_message_id",
    "start_command": "last_start_command_message_id",
}


class ChefDB:
    """SQLite access layer for accounts, premium grants, usage, history and dedup markers."""

    def __init__(self, db_path: str | Path | None = None) -> None:
        self.db_path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
        _ensure_parent_dir(self.db_path)
        self.init_db()

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self.db_path, timeout=10.0)
        connection.row_factory = sqlite3.Row
        return connection

    def init_db(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    telegram_id INTEGER PRIMARY KEY,
                    locale TEXT,
                    conversation_state TEXT,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS premium (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    telegram_id INTEGER NOT NULL UNIQUE,
                    active_until TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS usage_counters (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    telegram_id INTEGER NOT NULL UNIQUE,
                    total_used INT NOT NULL DEFAULT 0
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS messages_history (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    telegram_id INTEGER NOT NULL,
                    role TEXT NOT NULL,
                    content TEXT NOT NULL,
                    created_at TEXT NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_messages_history_user
                ON messages_history(telegram_id, id)
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS processed_updates (
                    update_id INTEGER PRIMARY KEY,
                    processed_at TEXT NOT NULL
                )
                """
            )

            for column, ddl in _USER_COLUMNS.items():
                if not _column_exists(conn, "users", column):
                    conn.execute(f"ALTER TABLE users ADD COLUMN {column} {ddl}")

    # users

    def ensure_user(
        self,
        user_id: int,
        *,
        username: str | None = None,
        first_name: str | None = None,
        platform_language: str | None = None,
        now: datetime | None = None,
    ) -> UserRecord:
        now = now or _utcnow()
        with self._connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO users (
                    telegram_id, locale, conversation_state, created_at,
                    username, first_name, platform_language, language_selected,
                    mode, is_blocked, last_seen_at
                )
                VALUES (?, NULL, ?, ?, ?, ?, ?, 0, NULL, 0, ?)
                ON CONFLICT(telegram_id) DO NOTHING
                """,
                (
                    user_id,
                    ConversationState.AWAITING_LANGUAGE_SELECTION.value,
                    _to_db(now),
                    username,
                    first_name,
                    platform_language,
                    _to_db(now),
                ),
            )
            created = cursor.rowcount == 1
            if not created:
                conn.execute(
                    """
                    UPDATE users
                    SET last_seen_at = ?,
                        username = COALESCE(?, username),
                        first_name = COALESCE(?, first_name),
                        platform_language = COALESCE(?, platform_language)
                    WHERE telegram_id = ?
                    """,
                    (_to_db(now), username, first_name, platform_language, user_id),
                )
            row = conn.execute(
                "SELECT * FROM users WHERE telegram_id = ?", (user_id,)
            ).fetchone()
        if created:
            logger.info("Created account", extra={"user_id": user_id})
        return _row_to_user(row)

    def get_user(self, user_id: int) -> UserRecord | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE telegram_id = ?", (user_id,)
            ).fetchone()
        if not row:
            return None
        return _row_to_user(row)

    def set_locale(self, user_id: int, locale: str | None, *, selected: bool = True) -> None:
        with self._connect() as conn:
            conn.execute(
                "UPDATE users SET locale = ?, language_selected = ? WHERE telegram_id = ?",
                (locale, 1 if selected else 0, user_id),
            )

    def set_state(self, user_id: int, state: ConversationState | None) -> None:
        value = None if state in (None, ConversationState.IDLE) else state.value
        with self._connect() as conn:
            conn.execute(
                "UPDATE users SET conversation_state = ? WHERE telegram_id = ?",
                (value, user_id),
            )

    def set_mode(self, user_id: int, mode: Mode | None) -> None:
        with self._connect() as conn:
            conn.execute(
                "UPDATE users SET mode = ? WHERE telegram_id = ?",
                (mode.value if mode else None, user_id),
            )

    def set_message_ids(self, user_id: int, **message_ids: int | None) -> None:
        """Store bookkeeping message ids.

        Keyword names are ``welcome_image``, ``greeting``, ``menu`` and
        ``start_command``; a ``None`` value clears the column.
        """
        if not message_ids:
            return
        assignments: list[str] = []
        values: list[int | None] = []
        for name, value in message_ids.items():
            column = _MESSAGE_ID_COLUMNS.get(name)
            if column is None:
                raise ValueError(f"Unknown message id slot: {name}")
            assignments.append(f"{column} = ?")
            values.append(value)
        with self._connect() as conn:
            conn.execute(
                f"UPDATE users SET {', '.join(assignments)} WHERE telegram_id = ?",
                (*values, user_id),
            )

    def mark_blocked(self, user_id: int, *, now: datetime | None = None) -> None:
        now = now or _utcnow()
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE users SET is_blocked = 1, blocked_at = COALESCE(blocked_at, ?)
                WHERE telegram_id = ?
                """,
                (_to_db(now), user_id),
            )

    def list_user_ids(self, *, include_blocked: bool = False) -> list[int]:
        query = "SELECT telegram_id FROM users"
        if not include_blocked:
            query += " WHERE COALESCE(is_blocked, 0) = 0"
        with self._connect() as conn:
            rows = conn.execute(query + " ORDER BY telegram_id").fetchall()
        return [int(row["telegram_id"]) for row in rows]

    # premium

    def get_premium_until(self, user_id: int) -> datetime | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT active_until FROM premium WHERE telegram_id = ?", (user_id,)
            ).fetchone()
        return _from_db(row["active_until"]) if row else None

    def is_premium_active(self, user_id: int, *, now: datetime | None = None) -> bool:
        now = now or _utcnow()
        until = self.get_premium_until(user_id)
        return until is not None and until > now

    def grant_premium(
        self, user_id: int, days: int, *, now: datetime | None = None
    ) -> datetime:
        now = now or _utcnow()
        with self._connect() as conn:
            row = conn.execute(
                "SELECT active_until FROM premium WHERE telegram_id = ?", (user_id,)
            ).fetchone()
            current = _from_db(row["active_until"]) if row else None
            new_until = _add_days_to_premium(current, days, now=now)
            conn.execute(
                """
                INSERT INTO premium (telegram_id, active_until) VALUES (?, ?)
                ON CONFLICT(telegram_id) DO UPDATE SET active_until = excluded.active_until
                """,
                (user_id, _to_db(new_until)),
            )
        return new_until

    def find_expiring_within(
        self, days_before: Iterable[int], *, now: datetime | None = None
    ) -> list[tuple[int, datetime]]:
        """Return grants whose expiry falls on the calendar day ``now + n`` for any lead time."""
        windows = list(days_before)
        if not windows:
            return []
        now = now or _utcnow()
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT telegram_id, active_until FROM premium WHERE active_until > ?",
                (_to_db(now),),
            ).fetchall()

        due: list[tuple[int, datetime]] = []
        for row in rows:
            expiry = _from_db(row["active_until"])
            if expiry is None:
                continue
            for days in windows:
                target = now + timedelta(days=days)
                window_start = target.replace(hour=0, minute=0, second=0, microsecond=0)
                window_end = window_start + timedelta(days=1)
                if window_start <= expiry < window_end:
                    due.append((int(row["telegram_id"]), expiry))
                    break
        return due

    # usage

    def increment_usage(self, user_id: int) -> int:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO usage_counters (telegram_id, total_used) VALUES (?, 1)
                ON CONFLICT(telegram_id) DO UPDATE SET total_used = total_used + 1
                """,
                (user_id,),
            )
            row = conn.execute(
                "SELECT total_used FROM usage_counters WHERE telegram_id = ?", (user_id,)
            ).fetchone()
        return int(row["total_used"])

    def get_usage(self, user_id: int) -> int:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT total_used FROM usage_counters WHERE telegram_id = ?", (user_id,)
            ).fetchone()
        return int(row["total_used"]) if row else 0

    # history

    def append_history(
        self, user_id: int, role: str, content: str, *, now: datetime | None = None
    ) -> None:
        now = now or _utcnow()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO messages_history (telegram_id, role, content, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (user_id, role, content, _to_db(now)),
            )

    def load_recent_history(
        self, user_id: int, limit: int = HISTORY_WINDOW
    ) -> list[HistoryEntry]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT role, content, created_at FROM messages_history
                WHERE telegram_id = ?
                ORDER BY id DESC
                LIMIT ?
                """,
                (user_id, limit),
            ).fetchall()
        return [_row_to_history(row) for row in reversed(rows)]

    def clear_history(self, user_id: int) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM messages_history WHERE telegram_id = ?", (user_id,))

    # deduplication

    def mark_processed(self, update_id: int, *, now: datetime | None = None) -> bool:
        now = now or _utcnow()
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO processed_updates (update_id, processed_at) VALUES (?, ?)",
                    (update_id, _to_db(now)),
                )
        except sqlite3.IntegrityError:
            return False
        finally:
            conn.close()
        return True

    def purge_processed_updates(self, older_than: datetime) -> int:
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM processed_updates WHERE processed_at < ?",
                (_to_db(older_than),),
            )
        return cursor.rowcount

    # admin reporting

    def collect_overview(self, *, now: datetime | None = None) -> AdminOverview:
        now = now or _utcnow()
        with self._connect() as conn:
            total = conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
            premium = conn.execute(
                "SELECT COUNT(*) FROM premium WHERE active_until > ?", (_to_db(now),)
            ).fetchone()[0]
            blocked = conn.execute(
                "SELECT COUNT(*) FROM users WHERE COALESCE(is_blocked, 0) = 1"
            ).fetchone()[0]
            active = {}
            for days in (7, 30):
                since = _to_db(now - timedelta(days=days))
                active[days] = conn.execute(
                    """
                    SELECT COUNT(DISTINCT h.telegram_id)
                    FROM messages_history h
                    JOIN users u ON u.telegram_id = h.telegram_id
                    WHERE h.created_at >= ? AND COALESCE(u.is_blocked, 0) = 0
                    """,
                    (since,),
                ).fetchone()[0]
        return AdminOverview(
            total_users=int(total),
            active_7_days=int(active[7]),
            active_30_days=int(active[30]),
            active_premium=int(premium),
            blocked_users=int(blocked),
        )

    def collect_language_stats(self) -> list[LanguageStat]:
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT COALESCE(locale, 'unknown') AS locale, COUNT(*) AS total
                FROM users
                GROUP BY COALESCE(locale, 'unknown')
                ORDER BY total DESC, locale ASC
                """
            ).fetchall()
        return [LanguageStat(locale=row["locale"], count=int(row["total"])) for row in rows]

    def find_user_status(self, user_id: int) -> UserStatus | None:
        with self._connect() as conn:
            user_row = conn.execute(
                "SELECT locale FROM users WHERE telegram_id = ?", (user_id,)
            ).fetchone()
            if not user_row:
                return None
            premium_row = conn.execute(
                "SELECT active_until FROM premium WHERE telegram_id = ?", (user_id,)
            ).fetchone()
            activity_row = conn.execute(
                """
                SELECT created_at FROM messages_history
                WHERE telegram_id = ?
                ORDER BY id DESC LIMIT 1
                """,
                (user_id,),
            ).fetchone()
        return UserStatus(
            user_id=user_id,
            locale=user_row["locale"],
            premium_until=_from_db(premium_row["active_until"]) if premium_row else None,
            last_activity=_from_db(activity_row["created_at"]) if activity_row else None,
        )

    def check_health(self) -> tuple[bool, list[str]]:
        if not self.db_path.exists():
            message = f"DB file missing at {self.db_path}"
            logger.error(message)
            return False, [message]
        try:
            with self._connect() as conn:
                integrity = conn.execute("PRAGMA quick_check").fetchone()
        except sqlite3.Error as exc:
            logger.exception("DB health check failed")
            return False, [str(exc)]
        if not integrity or integrity[0] != "ok":
            message = f"PRAGMA quick_check failed: {integrity[0] if integrity else 'unknown'}"
            logger.error(message)
            return False, [message]
        return True, []


def _row_to_user(row: sqlite3.Row) -> UserRecord:
    return UserRecord(
        user_id=int(row["telegram_id"]),
        username=row["username"],
        first_name=row["first_name"],
        platform_language=row["platform_language"],
        locale=row["locale"],
        language_selected=bool(row["language_selected"]),
        conversation_state=ConversationState.parse(row["conversation_state"])
        or ConversationState.IDLE,
        mode=Mode.parse(row["mode"]),
        last_welcome_image_message_id=row["last_welcome_image_message_id"],
        last_greeting_message_id=row["last_greeting_message_id"],
        last_menu_message_id=row["last_menu_message_id"],
        last_start_command_message_id=row["last_start_command_message_id"],
        is_blocked=bool(row["is_blocked"]),
        created_at=_from_db(row["created_at"]) or _utcnow(),
        last_seen_at=_from_db(row["last_seen_at"]),
    )


def _row_to_history(row: sqlite3.Row) -> HistoryEntry:
    return HistoryEntry(
        role=row["role"],
        content=row["content"],
        created_at=_from_db(row["created_at"]) or _utcnow(),
    )


__all__ = [
    "AdminOverview",
    "ChefDB",
    "HistoryEntry",
    "LanguageStat",
    "UserRecord",
    "UserStatus",
]
