"""Persistence package exports."""

from space_trips.persistence.memory_repository import InMemoryUserBookingStore
from space_trips.persistence.models import UserRecord
from space_trips.persistence.repository import get_booking_store
from space_trips.persistence.sqlite_repository import SQLiteUserBookingStore

__all__ = [
    "InMemoryUserBookingStore",
    "SQLiteUserBookingStore",
    "UserRecord",
    "get_booking_store",
]
