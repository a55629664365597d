"""Infrastructure services and cross-cutting utilities."""

from space_trips.infrastructure.cache import MemoryCache, catalog_cache, make_cache_key
from space_trips.infrastructure.logging import StructuredLogger, get_logger

__all__ = [
    "MemoryCache",
    "StructuredLogger",
    "catalog_cache",
    "get_logger",
    "make_cache_key",
]
