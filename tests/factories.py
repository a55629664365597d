"""Catalog payload builders shared by tests."""

from __future__ import annotations


def launch_row(flight_number: int, *, date_unix: int | None = None, name: str | None = None) -> dict:
    """One SpaceX v2 launch record; later flights get later launch dates by default."""
    return {
        "flight_number": flight_number,
        "mission_name": name or f"Mission {flight_number}",
        "launch_date_unix": date_unix if date_unix is not None else 1_500_000_000 + flight_number * 1000,
        "rocket": {"rocket_id": "falcon9", "rocket_name": "Falcon 9", "rocket_type": "FT"},
        "launch_site": {"site_name": "KSC LC 39A"},
        "links": {
            "mission_patch": f"https://img.example/{flight_number}-large.png",
            "mission_patch_small": f"https://img.example/{flight_number}-small.png",
        },
    }
