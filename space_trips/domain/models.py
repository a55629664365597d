"""Pydantic domain models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from space_trips.domain.enums import PatchSize


class Mission(BaseModel):
    name: Optional[str] = None
    mission_patch_small: Optional[str] = None
    mission_patch_large: Optional[str] = None

    def patch(self, size: PatchSize | str | None = None) -> Optional[str]:
        """Pick one of the two precomputed patch images; anything but SMALL means LARGE."""
        if size == PatchSize.SMALL:
            return self.mission_patch_small
        return self.mission_patch_large


class Rocket(BaseModel):
    id: str
    name: Optional[str] = None
    type: Optional[str] = None


class Launch(BaseModel):
    id: str
    cursor: str
    site: Optional[str] = None
    mission: Optional[Mission] = None
    rocket: Optional[Rocket] = None


class User(BaseModel):
    id: str
    email: str


class LaunchPage(BaseModel):
    launches: list[Launch] = Field(default_factory=list)
    cursor: Optional[str] = None
    has_more: bool = False
