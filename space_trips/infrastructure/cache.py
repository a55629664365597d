"""Process-wide TTL cache for catalog snapshots."""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from typing import Any, Optional


class MemoryCache:
    """Least-recently-used map whose entries also expire after a TTL.

    A TTL of zero or less disables caching for that write.
    """

    def __init__(self, default_ttl: float = 60.0, max_size: int = 50):
        self._entries: OrderedDict[str, tuple[float, Any]] = OrderedDict()
        self._default_ttl = default_ttl
        self._max_size = max(1, max_size)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        now = time.monotonic()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry[0] <= now:
                self._entries.pop(key, None)
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return entry[1]

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        lifetime = self._default_ttl if ttl is None else ttl
        if lifetime <= 0:
            return
        with self._lock:
            self._entries[key] = (time.monotonic() + lifetime, value)
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = 0

    @property
    def stats(self) -> dict[str, Any]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / lookups, 3) if lookups else 0.0,
            }


def make_cache_key(*parts: Any) -> str:
    return ":".join(str(part) for part in parts)


catalog_cache = MemoryCache(default_ttl=60.0, max_size=16)
