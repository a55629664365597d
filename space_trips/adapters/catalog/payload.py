"""Mapping from SpaceX v2 launch payloads to domain launches."""

from __future__ import annotations

import logging
from typing import Any, Optional

from space_trips.domain.models import Launch, Mission, Rocket

_logger = logging.getLogger("space-trips.catalog")


def _safe_str(val: object) -> Optional[str]:
    if val is None or (isinstance(val, (list, dict)) and len(val) == 0):
        return None
    text = str(val).strip()
    return text or None


def launch_cursor(launch_date_unix: object, launch_id: str) -> str:
    """Launch date plus flight number; launches sharing a timestamp still get distinct cursors."""
    date = _safe_str(launch_date_unix)
    return f"{date}:{launch_id}" if date is not None else launch_id


def launch_from_payload(raw: dict[str, Any]) -> Optional[Launch]:
    """Convert one catalog record; returns None for records without a flight number."""
    launch_id = _safe_str(raw.get("flight_number"))
    if launch_id is None:
        _logger.warning("skipping catalog record without flight_number: %s", raw.get("mission_name"))
        return None

    links = raw.get("links") if isinstance(raw.get("links"), dict) else {}
    rocket_raw = raw.get("rocket") if isinstance(raw.get("rocket"), dict) else {}
    site_raw = raw.get("launch_site") if isinstance(raw.get("launch_site"), dict) else {}

    rocket = None
    rocket_id = _safe_str(rocket_raw.get("rocket_id"))
    if rocket_id is not None:
        rocket = Rocket(
            id=rocket_id,
            name=_safe_str(rocket_raw.get("rocket_name")),
            type=_safe_str(rocket_raw.get("rocket_type")),
        )

    return Launch(
        id=launch_id,
        cursor=launch_cursor(raw.get("launch_date_unix"), launch_id),
        site=_safe_str(site_raw.get("site_name")),
        mission=Mission(
            name=_safe_str(raw.get("mission_name")),
            mission_patch_small=_safe_str(links.get("mission_patch_small")),
            mission_patch_large=_safe_str(links.get("mission_patch")),
        ),
        rocket=rocket,
    )


def launches_from_payload(rows: object) -> list[Launch]:
    if not isinstance(rows, list):
        return []
    launches: list[Launch] = []
    for raw in rows:
        if not isinstance(raw, dict):
            continue
        launch = launch_from_payload(raw)
        if launch is not None:
            launches.append(launch)
    return launches


__all__ = ["launch_cursor", "launch_from_payload", "launches_from_payload"]
