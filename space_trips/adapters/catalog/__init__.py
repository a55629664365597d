"""Launch catalog adapters."""

from space_trips.adapters.catalog.mock import FixtureLaunchCatalog
from space_trips.adapters.catalog.payload import launch_from_payload, launches_from_payload
from space_trips.adapters.catalog.real import SpaceXLaunchCatalog
from space_trips.adapters.catalog.request_scoped import RequestScopedCatalog

__all__ = [
    "FixtureLaunchCatalog",
    "RequestScopedCatalog",
    "SpaceXLaunchCatalog",
    "launch_from_payload",
    "launches_from_payload",
]
