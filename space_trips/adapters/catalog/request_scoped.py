"""Per-request memo in front of a catalog gateway."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Optional

from space_trips.adapters.interfaces import LaunchCatalogGateway
from space_trips.domain.models import Launch


class RequestScopedCatalog:
    """Remembers launches fetched during one request so each id is loaded at most once.

    Create one per request; never share across callers.
    """

    def __init__(self, inner: LaunchCatalogGateway) -> None:
        self._inner = inner
        self._by_id: dict[str, Optional[Launch]] = {}
        self._all: Optional[list[Launch]] = None
        self._lock = threading.Lock()

    @property
    def source(self) -> str:
        return self._inner.source

    def get_all(self) -> list[Launch]:
        with self._lock:
            if self._all is None:
                self._all = self._inner.get_all()
                for launch in self._all:
                    self._by_id.setdefault(launch.id, launch)
            return list(self._all)

    def get_by_id(self, launch_id: str) -> Optional[Launch]:
        key = str(launch_id)
        with self._lock:
            if key not in self._by_id:
                self._by_id[key] = self._inner.get_by_id(key)
            return self._by_id[key]

    def get_by_ids(self, launch_ids: Iterable[str]) -> list[Launch]:
        wanted = list(dict.fromkeys(str(i) for i in launch_ids))
        with self._lock:
            missing = [i for i in wanted if i not in self._by_id]
            if missing:
                fetched = {launch.id: launch for launch in self._inner.get_by_ids(missing)}
                for launch_id in missing:
                    self._by_id[launch_id] = fetched.get(launch_id)
            return [launch for launch in (self._by_id[i] for i in wanted) if launch is not None]

    def has_launch(self, launch_id: str) -> bool:
        return self.get_by_id(launch_id) is not None


__all__ = ["RequestScopedCatalog"]
