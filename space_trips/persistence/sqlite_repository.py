"""SQLite implementation of the user/booking store."""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from space_trips.domain.constants import DEFAULT_DEMO_EMAIL
from space_trips.domain.models import User
from space_trips.persistence.models import UserRecord
from space_trips.security.validation import is_email, normalize_email
from space_trips.shared.exceptions import StoreUnavailableError

_logger = logging.getLogger("space-trips.store")


def _now() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


class SQLiteUserBookingStore:
    backend = "sqlite"

    def __init__(
        self,
        db_path: str | Path,
        *,
        demo_email: str = DEFAULT_DEMO_EMAIL,
        timeout: float = 5.0,
    ) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._demo_email = normalize_email(demo_email)
        self._timeout = timeout
        self._lock = threading.Lock()
        self._init_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=self._timeout)
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA foreign_keys=ON;")
        return conn

    @contextmanager
    def _session(self) -> Iterator[sqlite3.Connection]:
        """One connection per call; commits on success, always closes."""
        try:
            with self._lock:
                conn = self._connect()
                try:
                    with conn:
                        yield conn
                finally:
                    conn.close()
        except sqlite3.Error as exc:
            _logger.error("booking store failure: %s", exc)
            raise StoreUnavailableError(f"booking store failure: {exc}") from exc

    def _init_schema(self) -> None:
        with self._session() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS users (
                    user_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    email TEXT NOT NULL UNIQUE,
                    created_at TEXT NOT NULL
                );

                CREATE TABLE IF NOT EXISTS trips (
                    trip_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    launch_id TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    UNIQUE(user_id, launch_id),
                    FOREIGN KEY(user_id) REFERENCES users(user_id)
                );

                CREATE INDEX IF NOT EXISTS idx_trips_user_id ON trips(user_id);
                """
            )

    def find_or_create_user(self, email: Optional[str] = None) -> Optional[User]:
        """
        Look up a user by email, creating the row on first reference.

        Without an email the well-known demo user is returned. An email that is
        not syntactically valid yields None.
        """
        key = normalize_email(email) if email is not None else self._demo_email
        if not is_email(key):
            return None
        with self._session() as conn:
            conn.execute(
                "INSERT INTO users (email, created_at) VALUES (?, ?) ON CONFLICT(email) DO NOTHING",
                (key, _now()),
            )
            row = conn.execute(
                "SELECT user_id, email, created_at FROM users WHERE email = ?",
                (key,),
            ).fetchone()
        if row is None:
            return None
        return UserRecord(user_id=row[0], email=row[1], created_at=row[2]).to_user()

    def get_booked_launch_ids(self, user: User) -> set[str]:
        with self._session() as conn:
            rows = conn.execute(
                "SELECT launch_id FROM trips WHERE user_id = ?",
                (int(user.id),),
            ).fetchall()
        return {row[0] for row in rows}

    def is_booked(self, user: User, launch_id: str) -> bool:
        with self._session() as conn:
            row = conn.execute(
                "SELECT 1 FROM trips WHERE user_id = ? AND launch_id = ? LIMIT 1",
                (int(user.id), str(launch_id)),
            ).fetchone()
        return row is not None

    def book_trips(
        self,
        user: User,
        launch_ids: Sequence[str],
        *,
        bookable: Optional[Callable[[str], bool]] = None,
    ) -> list[str]:
        """
        Book every launch id that passes ``bookable``; returns the ids that were booked.

        Already-booked ids count as booked. The result keeps request order so the
        caller can compare it one-to-one with what it asked for.
        """
        # bookable may hit the catalog; keep it outside the write transaction.
        accepted = [str(i) for i in launch_ids if str(i).strip() and (bookable is None or bookable(str(i)))]
        if not accepted:
            return []
        now = _now()
        with self._session() as conn:
            conn.executemany(
                """
                INSERT INTO trips (user_id, launch_id, created_at) VALUES (?, ?, ?)
                ON CONFLICT(user_id, launch_id) DO NOTHING
                """,
                [(int(user.id), launch_id, now) for launch_id in dict.fromkeys(accepted)],
            )
        return accepted

    def cancel_trip(self, user: User, launch_id: str) -> bool:
        with self._session() as conn:
            cur = conn.execute(
                "DELETE FROM trips WHERE user_id = ? AND launch_id = ?",
                (int(user.id), str(launch_id)),
            )
            removed = cur.rowcount
        return removed > 0


__all__ = ["SQLiteUserBookingStore"]
