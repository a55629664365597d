"""Runtime configuration helpers."""

from space_trips.config.settings import ServiceSettings, load_settings

__all__ = ["ServiceSettings", "load_settings"]
