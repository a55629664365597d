"""In-process booking store for demos and tests."""

from __future__ import annotations

import itertools
import threading
import time
from collections.abc import Callable, Sequence
from typing import Optional

from space_trips.domain.constants import DEFAULT_DEMO_EMAIL
from space_trips.domain.models import User
from space_trips.persistence.models import UserRecord
from space_trips.security.validation import is_email, normalize_email


def _now() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


class InMemoryUserBookingStore:
    backend = "memory"

    def __init__(self, *, demo_email: str = DEFAULT_DEMO_EMAIL) -> None:
        self._demo_email = normalize_email(demo_email)
        self._users: dict[str, UserRecord] = {}
        self._trips: dict[int, set[str]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_or_create_user(self, email: Optional[str] = None) -> Optional[User]:
        key = normalize_email(email) if email is not None else self._demo_email
        if not is_email(key):
            return None
        with self._lock:
            record = self._users.get(key)
            if record is None:
                record = UserRecord(user_id=next(self._ids), email=key, created_at=_now())
                self._users[key] = record
            return record.to_user()

    def get_booked_launch_ids(self, user: User) -> set[str]:
        with self._lock:
            return set(self._trips.get(int(user.id), set()))

    def is_booked(self, user: User, launch_id: str) -> bool:
        with self._lock:
            return str(launch_id) in self._trips.get(int(user.id), set())

    def book_trips(
        self,
        user: User,
        launch_ids: Sequence[str],
        *,
        bookable: Optional[Callable[[str], bool]] = None,
    ) -> list[str]:
        accepted = [str(i) for i in launch_ids if str(i).strip() and (bookable is None or bookable(str(i)))]
        with self._lock:
            self._trips.setdefault(int(user.id), set()).update(accepted)
        return accepted

    def cancel_trip(self, user: User, launch_id: str) -> bool:
        with self._lock:
            booked = self._trips.get(int(user.id), set())
            if str(launch_id) not in booked:
                return False
            booked.discard(str(launch_id))
            return True


__all__ = ["InMemoryUserBookingStore"]
