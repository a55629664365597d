"""Booking store factory."""

from __future__ import annotations

import logging

from space_trips.adapters.interfaces import UserBookingStore
from space_trips.config.settings import ServiceSettings
from space_trips.persistence.memory_repository import InMemoryUserBookingStore
from space_trips.persistence.sqlite_repository import SQLiteUserBookingStore

_logger = logging.getLogger("space-trips.store")


def get_booking_store(settings: ServiceSettings) -> UserBookingStore:
    if settings.store_backend == "memory":
        _logger.info("Booking store initialized with in-memory backend")
        return InMemoryUserBookingStore(demo_email=settings.demo_user_email)
    _logger.info("Booking store initialized with SQLite backend at %s", settings.store_db_path)
    return SQLiteUserBookingStore(
        settings.store_db_path,
        demo_email=settings.demo_user_email,
        timeout=settings.store_timeout_seconds,
    )


__all__ = ["get_booking_store"]
