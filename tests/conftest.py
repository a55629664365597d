"""pytest global fixtures: environment isolation and in-process data sources."""

from __future__ import annotations

import pytest

from space_trips.adapters.catalog.mock import FixtureLaunchCatalog
from space_trips.application.context import AppContext, make_request_context
from space_trips.config.settings import ServiceSettings
from space_trips.infrastructure.cache import catalog_cache
from space_trips.persistence.sqlite_repository import SQLiteUserBookingStore
from space_trips.security.identity_token import encode_identity_token
from tests.factories import launch_row

_ENV_VARS = (
    "CATALOG_PROVIDER",
    "CATALOG_BASE_URL",
    "CATALOG_TIMEOUT_SECONDS",
    "CATALOG_MAX_RETRIES",
    "CATALOG_CACHE_TTL_SECONDS",
    "BOOKING_STORE_BACKEND",
    "BOOKING_STORE_DB",
    "STORE_TIMEOUT_SECONDS",
    "DEMO_USER_EMAIL",
    "LAUNCH_DEFAULT_PAGE_SIZE",
    "LAUNCH_MAX_PAGE_SIZE",
    "FANOUT_MAX_WORKERS",
    "ENABLE_DOCS",
    "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Tests never reach the real catalog and never reuse cached catalog data."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    catalog_cache.clear()
    yield
    catalog_cache.clear()


@pytest.fixture()
def catalog_rows() -> list[dict]:
    return [launch_row(i) for i in range(1, 8)]


@pytest.fixture()
def catalog(catalog_rows) -> FixtureLaunchCatalog:
    return FixtureLaunchCatalog(rows=catalog_rows)


@pytest.fixture()
def store(tmp_path) -> SQLiteUserBookingStore:
    return SQLiteUserBookingStore(tmp_path / "space_trips.sqlite3")


@pytest.fixture()
def settings() -> ServiceSettings:
    return ServiceSettings(default_page_size=3, max_page_size=5, fanout_max_workers=4)


@pytest.fixture()
def app_ctx(catalog, store, settings) -> AppContext:
    return AppContext(settings=settings, catalog=catalog, store=store)


@pytest.fixture()
def request_ctx(app_ctx):
    """Factory: request context acting as ``email`` (None means the demo user)."""

    def _make(email: str | None = None):
        authorization = f"Bearer {encode_identity_token(email)}" if email else None
        return make_request_context(app_ctx, authorization=authorization)

    return _make
