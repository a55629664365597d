"""Persistence-layer record schemas."""

from __future__ import annotations

from pydantic import BaseModel

from space_trips.domain.models import User


class UserRecord(BaseModel):
    user_id: int
    email: str
    created_at: str

    def to_user(self) -> User:
        return User(id=str(self.user_id), email=self.email)


__all__ = ["UserRecord"]
