"""MemoryCache behaviour."""

from __future__ import annotations

from space_trips.infrastructure import cache as cache_module
from space_trips.infrastructure.cache import MemoryCache, make_cache_key


def test_least_recently_used_entry_is_evicted():
    cache = MemoryCache(default_ttl=60, max_size=2)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1
    cache.set("c", 3)
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_entries_expire(monkeypatch):
    clock = {"now": 100.0}
    monkeypatch.setattr(cache_module.time, "monotonic", lambda: clock["now"])
    cache = MemoryCache(default_ttl=10)
    cache.set("k", "v")
    clock["now"] = 109.0
    assert cache.get("k") == "v"
    clock["now"] = 111.0
    assert cache.get("k") is None
    assert cache.stats["size"] == 0


def test_non_positive_ttl_skips_caching():
    cache = MemoryCache()
    cache.set("k", "v", ttl=0)
    assert cache.get("k") is None


def test_stats_track_hits_and_misses():
    cache = MemoryCache()
    cache.set("k", "v")
    cache.get("k")
    cache.get("missing")
    assert cache.stats == {"size": 1, "hits": 1, "misses": 1, "hit_rate": 0.5}


def test_cache_key_joins_parts():
    assert make_cache_key("launches_all", "https://api.test/v2/") == "launches_all:https://api.test/v2/"
