"""Input validation helpers."""

from __future__ import annotations

import re
from typing import Optional

_EMAIL_RE = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$")
_MAX_EMAIL_LENGTH = 254


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def is_email(email: Optional[str]) -> bool:
    value = normalize_email(email)
    if not value or len(value) > _MAX_EMAIL_LENGTH:
        return False
    return bool(_EMAIL_RE.match(value))


__all__ = ["is_email", "normalize_email"]
