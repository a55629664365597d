"""Concrete catalog selection."""

from __future__ import annotations

import logging

from space_trips.adapters.catalog.mock import FixtureLaunchCatalog
from space_trips.adapters.catalog.real import SpaceXLaunchCatalog
from space_trips.adapters.interfaces import LaunchCatalogGateway
from space_trips.config.settings import ServiceSettings
from space_trips.infrastructure.cache import catalog_cache
from space_trips.security.http_client import SecureHttpClient

_logger = logging.getLogger("space-trips.catalog")


def build_catalog(settings: ServiceSettings) -> LaunchCatalogGateway:
    if settings.catalog_provider == "real":
        _logger.info("Catalog initialized with SpaceX REST backend: %s", settings.catalog_base_url)
        http = SecureHttpClient(
            timeout=settings.catalog_timeout_seconds,
            max_retries=settings.catalog_max_retries,
            source=SpaceXLaunchCatalog.source,
        )
        return SpaceXLaunchCatalog(
            settings.catalog_base_url,
            http=http,
            cache=catalog_cache,
            cache_ttl=settings.catalog_cache_ttl_seconds,
        )
    _logger.info("Catalog initialized with bundled fixture data")
    return FixtureLaunchCatalog()


__all__ = ["build_catalog"]
