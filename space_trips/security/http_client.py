"""Outbound HTTP client used by the catalog adapter.

Responsibilities:
  1. bounded timeout on every request
  2. optional retries with linear backoff (off by default)
  3. redacted error messages
  4. keeps the httpx dependency in one place
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from space_trips.security.redact import redact_sensitive
from space_trips.shared.exceptions import CatalogUnavailableError

_logger = logging.getLogger("space-trips.http")


class SecureHttpClient:
    """Wraps httpx; every failure surfaces as CatalogUnavailableError."""

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        max_retries: int = 0,
        source: str = "http",
        client: Optional[httpx.Client] = None,
    ):
        self._timeout = max(0.1, float(timeout))
        self._max_retries = max(0, int(max_retries))
        self._source = source
        self._client = client or httpx.Client(timeout=self._timeout)

    @property
    def timeout(self) -> float:
        return self._timeout

    def get(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        allow_not_found: bool = False,
    ) -> Any:
        """
        GET ``url`` and return the decoded JSON body.

        With ``allow_not_found`` a 404 answer yields None instead of an error.
        """
        last_error: Optional[CatalogUnavailableError] = None

        for attempt in range(1, self._max_retries + 2):
            try:
                resp = self._client.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self._timeout,
                )
                if allow_not_found and resp.status_code == 404:
                    return None
                resp.raise_for_status()
                return resp.json()
            except httpx.HTTPStatusError as e:
                safe_msg = redact_sensitive(str(e))
                last_error = CatalogUnavailableError(self._source, f"HTTP {e.response.status_code}: {safe_msg}")
            except httpx.TimeoutException:
                last_error = CatalogUnavailableError(
                    self._source, f"request timed out after {self._timeout}s (attempt {attempt})"
                )
            except httpx.HTTPError as e:
                safe_msg = redact_sensitive(str(e))
                last_error = CatalogUnavailableError(self._source, f"network request failed: {safe_msg}")
            except ValueError as e:
                last_error = CatalogUnavailableError(self._source, f"invalid JSON body: {e}")

            _logger.warning("%s GET failed (attempt %d): %s", self._source, attempt, last_error)
            if attempt <= self._max_retries:
                time.sleep(0.5 * attempt)

        raise last_error  # type: ignore[misc]

    def close(self) -> None:
        self._client.close()


__all__ = ["SecureHttpClient"]
