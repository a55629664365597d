"""Masking of identity tokens and email addresses in log lines and error strings."""

from __future__ import annotations

import re

MASK = "***REDACTED***"

# Applied in order; header forms go first so the scheme word is kept and only the token is masked.
_SECRET_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?i)(\bauthorization\s*:\s*(?:(?:bearer|basic|token)\s+)?)[^\s,;\"']+"),
    re.compile(r"(?i)(\bbearer\s+)[A-Za-z0-9._~+/=-]+"),
    re.compile(r"(?i)(\b(?:token|secret|password|passwd)\s*=\s*)[^&\s\"']+"),
    re.compile(r"(?i)([\"']?\b(?:token|secret|password|passwd)[\"']?\s*:\s*[\"']?)[^\"',\s}]+"),
)
_EMAIL = re.compile(r"([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+\.[A-Za-z]{2,})")


def mask_email(text: str) -> str:
    """Keep the first character of the local part and the domain: a***@x.com."""
    return _EMAIL.sub(r"\1***@\2", text)


def redact_sensitive(text: str) -> str:
    if not text:
        return text
    out = str(text)
    for pattern in _SECRET_PATTERNS:
        out = pattern.sub(lambda m: m.group(1) + MASK, out)
    return mask_email(out)


__all__ = ["MASK", "mask_email", "redact_sensitive"]
