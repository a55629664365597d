"""StructuredLogger output tests."""

from __future__ import annotations

import io
import json

import pytest

from space_trips.infrastructure import logging as logging_module
from space_trips.infrastructure.logging import get_logger
from space_trips.security.identity_token import encode_identity_token


def _lines(buf: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def test_operation_events_carry_trace_id_and_duration():
    buf = io.StringIO()
    logger = get_logger("trace-1", output=buf)
    logger.operation_start("Query.launches")
    logger.operation_end("Query.launches", ok=True)

    start, end = _lines(buf)
    assert start["event"] == "operation_start"
    assert end["event"] == "operation_end"
    assert end["ok"] is True
    assert end["duration_ms"] >= 0
    assert {start["trace_id"], end["trace_id"]} == {"trace-1"}


def test_each_logger_gets_its_own_trace_id():
    assert get_logger().trace_id != get_logger().trace_id


def test_emails_and_tokens_never_reach_the_output():
    buf = io.StringIO()
    logger = get_logger("t", output=buf)
    token = encode_identity_token("alice@example.com")
    logger.error("Mutation.login", "login failed for alice@example.com", token=token)

    text = buf.getvalue()
    assert "alice@example.com" not in text
    assert token not in text
    assert _lines(buf)[0]["event"] == "error"


def test_warning_event_shape():
    buf = io.StringIO()
    get_logger("t", output=buf).warning("Mutation.bookTrips", "partial booking", requested=2, booked=1)
    line = _lines(buf)[0]
    assert line["message"] == "partial booking"
    assert line["requested"] == 2
    assert line["booked"] == 1


def test_overlapping_operations_with_the_same_name_keep_their_own_durations(monkeypatch):
    ticks = iter([1.0, 1.5, 1.7, 2.0])
    monkeypatch.setattr(logging_module.time, "perf_counter", lambda: next(ticks, 2.0))
    buf = io.StringIO()
    logger = get_logger("t", output=buf)

    with logger.timed("Query.launches"):
        with logger.timed("Query.launches"):
            pass

    ends = [line["duration_ms"] for line in _lines(buf) if line["event"] == "operation_end"]
    assert ends == [200.0, 1000.0]


def test_timed_logs_failure_and_reraises():
    buf = io.StringIO()
    logger = get_logger("t", output=buf)
    with pytest.raises(RuntimeError):
        with logger.timed("Mutation.bookTrips"):
            raise RuntimeError("boom")

    events = _lines(buf)
    assert [line["event"] for line in events] == ["operation_start", "error", "operation_end"]
    assert events[-1]["ok"] is False
