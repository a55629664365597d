"""Real catalog adapter backed by the SpaceX v2 REST API.

Environment: CATALOG_BASE_URL (default https://api.spacexdata.com/v2/)
Endpoints used: GET launches, GET launches?flight_number=<id>
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from space_trips.adapters.catalog.payload import launches_from_payload
from space_trips.infrastructure.cache import MemoryCache, make_cache_key
from space_trips.domain.models import Launch
from space_trips.security.http_client import SecureHttpClient
from space_trips.shared.exceptions import CatalogUnavailableError

_SOURCE = "spacex_catalog"


class SpaceXLaunchCatalog:
    source = _SOURCE

    def __init__(
        self,
        base_url: str,
        *,
        http: Optional[SecureHttpClient] = None,
        cache: Optional[MemoryCache] = None,
        cache_ttl: float = 60.0,
    ) -> None:
        self._base_url = base_url.rstrip("/") + "/"
        self._http = http or SecureHttpClient(source=_SOURCE)
        self._cache = cache
        self._cache_ttl = cache_ttl

    def _launches_url(self) -> str:
        return f"{self._base_url}launches"

    def get_all(self) -> list[Launch]:
        """All launches in catalog order (oldest first). Cached for ``cache_ttl`` seconds."""
        cache_key = make_cache_key("launches_all", self._base_url)
        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return list(cached)

        data = self._http.get(self._launches_url())
        if not isinstance(data, list):
            raise CatalogUnavailableError(_SOURCE, f"expected a launch list, got {type(data).__name__}")
        launches = launches_from_payload(data)

        if self._cache is not None:
            self._cache.set(cache_key, launches, ttl=self._cache_ttl)
        return list(launches)

    def get_by_id(self, launch_id: str) -> Optional[Launch]:
        data = self._http.get(
            self._launches_url(),
            params={"flight_number": str(launch_id)},
            allow_not_found=True,
        )
        if data is None:
            return None
        # The API answers a filtered list; a single object is tolerated too.
        rows = data if isinstance(data, list) else [data]
        for launch in launches_from_payload(rows):
            if launch.id == str(launch_id):
                return launch
        return None

    def get_by_ids(self, launch_ids: Iterable[str]) -> list[Launch]:
        launches: list[Launch] = []
        for launch_id in dict.fromkeys(str(i) for i in launch_ids):
            launch = self.get_by_id(launch_id)
            if launch is not None:
                launches.append(launch)
        return launches


__all__ = ["SpaceXLaunchCatalog"]
