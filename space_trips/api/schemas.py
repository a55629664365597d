"""REST response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"


class DiagnosticsResponse(BaseModel):
    catalog_source: str = Field(description="mock_catalog / spacex_catalog")
    store_backend: str = Field(description="sqlite / memory")
    catalog_cache: dict[str, Any] = Field(default_factory=dict)
