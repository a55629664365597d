"""Application request/response contracts."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from space_trips.domain.models import Launch


class TripUpdateResponse(BaseModel):
    """Outcome of a booking or cancellation; partial failure is reported, never raised."""

    success: bool
    message: Optional[str] = None
    launches: list[Launch] = Field(default_factory=list)
