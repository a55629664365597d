"""Infrastructure configuration helpers."""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def get_env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def get_int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def is_enabled(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


__all__ = ["get_env", "get_float_env", "get_int_env", "is_enabled"]
