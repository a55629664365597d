"""Mock catalog adapter loading launches from a bundled JSON fixture."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from space_trips.adapters.catalog.payload import launches_from_payload
from space_trips.domain.models import Launch
from space_trips.shared.exceptions import CatalogUnavailableError

DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "launches_v1.json"


class FixtureLaunchCatalog:
    source = "mock_catalog"

    def __init__(self, rows: Optional[list[dict[str, Any]]] = None, data_file: Path = DATA_FILE) -> None:
        self._rows = rows
        self._data_file = data_file
        self._launches: Optional[list[Launch]] = None

    def _load(self) -> list[Launch]:
        if self._launches is not None:
            return self._launches
        rows = self._rows
        if rows is None:
            if not self._data_file.exists():
                raise CatalogUnavailableError(self.source, f"Data file not found: {self._data_file}")
            with open(self._data_file, encoding="utf-8") as f:
                rows = json.load(f)
        self._launches = launches_from_payload(rows)
        return self._launches

    def get_all(self) -> list[Launch]:
        return list(self._load())

    def get_by_id(self, launch_id: str) -> Optional[Launch]:
        for launch in self._load():
            if launch.id == str(launch_id):
                return launch
        return None

    def get_by_ids(self, launch_ids: Iterable[str]) -> list[Launch]:
        by_id = {launch.id: launch for launch in self._load()}
        return [by_id[i] for i in dict.fromkeys(str(i) for i in launch_ids) if i in by_id]


__all__ = ["DATA_FILE", "FixtureLaunchCatalog"]
