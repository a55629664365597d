"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from space_trips.domain.constants import DEFAULT_DEMO_EMAIL, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from space_trips.infrastructure.config import get_float_env, get_int_env

DEFAULT_CATALOG_URL = "https://api.spacexdata.com/v2/"
_DEFAULT_DB_PATH = Path("data") / "space_trips.sqlite3"


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def resolve_catalog_provider() -> str:
    raw = str(os.getenv("CATALOG_PROVIDER") or "").strip().lower()
    if raw in {"real", "mock"}:
        return raw
    # A configured endpoint implies the caller wants the live catalog.
    return "real" if _is_configured(os.getenv("CATALOG_BASE_URL")) else "mock"


def resolve_store_backend() -> str:
    raw = str(os.getenv("BOOKING_STORE_BACKEND") or "").strip().lower()
    return raw if raw in {"sqlite", "memory"} else "sqlite"


class ServiceSettings(BaseModel):
    catalog_provider: str = Field(default="mock")
    catalog_base_url: str = Field(default=DEFAULT_CATALOG_URL)
    catalog_timeout_seconds: float = Field(default=10.0, gt=0)
    catalog_max_retries: int = Field(default=0, ge=0)
    catalog_cache_ttl_seconds: float = Field(default=60.0, ge=0)
    store_backend: str = Field(default="sqlite")
    store_db_path: Path = Field(default=_DEFAULT_DB_PATH)
    store_timeout_seconds: float = Field(default=5.0, gt=0)
    demo_user_email: str = Field(default=DEFAULT_DEMO_EMAIL)
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, gt=0)
    fanout_max_workers: int = Field(default=8, ge=1)


def load_settings() -> ServiceSettings:
    db_raw = str(os.getenv("BOOKING_STORE_DB") or "").strip()
    return ServiceSettings(
        catalog_provider=resolve_catalog_provider(),
        catalog_base_url=str(os.getenv("CATALOG_BASE_URL") or "").strip() or DEFAULT_CATALOG_URL,
        catalog_timeout_seconds=max(0.1, get_float_env("CATALOG_TIMEOUT_SECONDS", 10.0)),
        catalog_max_retries=max(0, get_int_env("CATALOG_MAX_RETRIES", 0)),
        catalog_cache_ttl_seconds=max(0.0, get_float_env("CATALOG_CACHE_TTL_SECONDS", 60.0)),
        store_backend=resolve_store_backend(),
        store_db_path=Path(db_raw) if db_raw else _DEFAULT_DB_PATH,
        store_timeout_seconds=max(0.1, get_float_env("STORE_TIMEOUT_SECONDS", 5.0)),
        demo_user_email=str(os.getenv("DEMO_USER_EMAIL") or "").strip() or DEFAULT_DEMO_EMAIL,
        default_page_size=max(1, get_int_env("LAUNCH_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)),
        max_page_size=max(1, get_int_env("LAUNCH_MAX_PAGE_SIZE", MAX_PAGE_SIZE)),
        fanout_max_workers=max(1, get_int_env("FANOUT_MAX_WORKERS", 8)),
    )


__all__ = [
    "ServiceSettings",
    "load_settings",
    "resolve_catalog_provider",
    "resolve_store_backend",
]
