"""Structured logging: JSON lines with tokens and emails redacted."""

from __future__ import annotations

import json
import sys
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional, TextIO

from space_trips.security.redact import redact_sensitive


class StructuredLogger:
    """Writes one JSON object per line, every line tagged with the request ``trace_id``."""

    def __init__(self, trace_id: Optional[str] = None, output: Optional[TextIO] = None):
        self.trace_id = trace_id or uuid.uuid4().hex[:12]
        self._output = output

    def _write(self, event: str, operation: str, fields: dict[str, Any]) -> None:
        record = {"event": event, "operation": operation, **fields, "trace_id": self.trace_id, "ts": time.time()}
        line = redact_sensitive(json.dumps(record, ensure_ascii=False, default=str))
        stream = self._output or sys.stderr
        try:
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; logging must never fail the operation.
            pass

    def operation_start(self, operation: str, **extra: Any) -> None:
        self._write("operation_start", operation, extra)

    def operation_end(self, operation: str, *, ok: bool = True, duration_ms: float = 0.0, **extra: Any) -> None:
        self._write("operation_end", operation, {"ok": ok, "duration_ms": round(duration_ms, 1), **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._write("error", operation, {"error": error, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._write("warning", operation, {"message": message, **extra})

    @contextmanager
    def timed(self, operation: str) -> Iterator[None]:
        """Bracket ``operation`` with start/end events; a raised exception is logged and re-raised."""
        # Start time stays local: sibling fields of one request share this logger.
        started = time.perf_counter()
        self.operation_start(operation)
        try:
            yield
        except Exception as exc:
            self.error(operation, f"{type(exc).__name__}: {exc}")
            self.operation_end(operation, ok=False, duration_ms=(time.perf_counter() - started) * 1000)
            raise
        self.operation_end(operation, ok=True, duration_ms=(time.perf_counter() - started) * 1000)


def get_logger(trace_id: Optional[str] = None, output: Optional[TextIO] = None) -> StructuredLogger:
    """One logger per request; trace ids must not leak between callers."""
    return StructuredLogger(trace_id=trace_id, output=output)


__all__ = ["StructuredLogger", "get_logger"]
