"""Tests for structured logging and the errors it reports."""

from __future__ import annotations

import io

import orjson
import pytest

from fpkit import Err, InvariantViolation, Just
from fpkit.foundation.config import LoggingSettings
from fpkit.foundation.errors import ErrorCode, ErrorInfo, FpkitError
from fpkit.runtime.observability import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
)


def _json_lines(out: io.StringIO) -> list[dict]:
    return [orjson.loads(line) for line in out.getvalue().splitlines()]


# ═════════════════════════════════════════════════════════════════════════════
# Logger
# ═════════════════════════════════════════════════════════════════════════════


def test_silent_by_default() -> None:
    configure_logging(format="none")
    get_logger("x").error("nothing rendered")


def test_json_renderer_and_bound_context() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)

    log = get_logger("svc", component="pipe").bind(step=1)
    log.info("hello", extra=True)
    log.debug("filtered out")

    [entry] = _json_lines(out)
    assert entry["event"] == "hello"
    assert entry["level"] == "info"
    assert entry["logger"] == "svc"
    assert entry["component"] == "pipe"
    assert entry["step"] == 1
    assert entry["extra"] is True


def test_unbind_and_new() -> None:
    log = get_logger("svc", a=1, b=2)
    assert log.unbind("a").context == {"b": 2, "logger": "svc"}
    assert log.new(c=3).context == {"c": 3}


def test_log_context_scope() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)
    log = get_logger()

    with log_context(request_id="r1"):
        log.info("inside")
    log.info("outside")

    inside, outside = _json_lines(out)
    assert inside["request_id"] == "r1"
    assert "request_id" not in outside


def test_nested_log_context_restores_outer() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="INFO", output=out)
    log = get_logger().bind(stage="parse")

    with log_context(request_id="r1"):
        with log_context(request_id="r2", attempt=2):
            log.info("retry")
        log.info("after retry")

    retry, after = _json_lines(out)
    assert (retry["request_id"], retry["attempt"], retry["stage"]) == ("r2", 2, "parse")
    assert after["request_id"] == "r1"
    assert "attempt" not in after


def test_console_renderer_plain() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="INFO", output=out, colors=False)
    get_logger().info("ready", count=2)
    line = out.getvalue().strip()
    assert "[info] ready" in line
    assert "count=2" in line


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_configure_from_settings() -> None:
    assert isinstance(configure_from_settings(LoggingSettings(format="json")), JsonRenderer)
    assert isinstance(configure_from_settings(LoggingSettings(format="console", colors=False)), ConsoleRenderer)
    assert isinstance(configure_from_settings(LoggingSettings()), NoOpRenderer)


# ═════════════════════════════════════════════════════════════════════════════
# Errors surfaced through logging
# ═════════════════════════════════════════════════════════════════════════════


def test_invariant_violation_is_logged() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="ERROR", output=out)

    with pytest.raises(InvariantViolation):
        Just(None)

    [entry] = _json_lines(out)
    assert entry["event"] == "invariant violated"
    assert entry["operation"] == "maybe.Just"


def test_unsafe_unwrap_is_logged() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="WARNING", output=out)

    with pytest.raises(TimeoutError):
        Err(TimeoutError("slow")).unsafe_unwrap()

    [entry] = _json_lines(out)
    assert entry["event"] == "unsafe unwrap on Err"
    assert entry["error_type"] == "TimeoutError"


def test_error_info_render() -> None:
    info = ErrorInfo(operation="maybe.Just", message=ValueError("bad"), code=ErrorCode.INVARIANT_VIOLATION)
    assert info.message == "bad"
    assert info.is_invariant is True
    assert str(info) == "[INVARIANT_VIOLATION] maybe.Just: bad"


def test_fpkit_error_create() -> None:
    exc = FpkitError.create("op", "went wrong")
    assert exc.code is ErrorCode.UNKNOWN
    assert str(exc) == "[UNKNOWN] op: went wrong"
    assert InvariantViolation.create("op", "x").code is ErrorCode.INVARIANT_VIOLATION
