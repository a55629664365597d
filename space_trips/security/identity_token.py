"""Identity tokens.

NOT a security mechanism. A token is the base64 encoding of the user's email,
so anyone can mint one for any address. It only tells the server which user
record a request should act on.
"""

from __future__ import annotations

import base64
import binascii
from typing import Optional

from space_trips.security.validation import is_email

_SCHEMES = ("bearer ", "token ")


def encode_identity_token(email: str) -> str:
    return base64.b64encode(email.encode("utf-8")).decode("ascii")


def decode_identity_token(token: str) -> Optional[str]:
    """Return the email carried by ``token``, or None when it does not decode to one."""
    raw = (token or "").strip()
    if not raw:
        return None
    try:
        email = base64.b64decode(raw.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        return None
    return email if is_email(email) else None


def token_from_authorization(header: Optional[str]) -> Optional[str]:
    """Accept both ``Authorization: <token>`` and ``Authorization: Bearer <token>``."""
    value = (header or "").strip()
    lowered = value.lower()
    for scheme in _SCHEMES:
        if lowered.startswith(scheme):
            return value[len(scheme):].strip() or None
    return value or None


__all__ = ["decode_identity_token", "encode_identity_token", "token_from_authorization"]
