# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bridge's logging setup and the TRACE level."""

from __future__ import annotations

import logging

import pytest

from luanext_bridge.config.logging import (
    TRACE_LEVEL,
    BridgeLogger,
    get_logger,
    resolve_env_log_level,
)
from luanext_bridge.constants import LOG_LEVEL_ENV_VAR


def test_trace_level_is_below_debug() -> None:
    """TRACE sits below DEBUG and has a registered name."""
    assert TRACE_LEVEL < logging.DEBUG
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_bridge_logger() -> None:
    """Module loggers support ``trace``."""
    assert isinstance(get_logger("luanext_bridge.tests.logger"), BridgeLogger)


def test_trace_is_emitted_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    """``trace`` records at TRACE level when the logger allows it."""
    log = get_logger("luanext_bridge.tests.trace")

    with caplog.at_level(TRACE_LEVEL, logger="luanext_bridge.tests.trace"):
        log.trace("compiler> %s", "Compiling 1 file")

    assert [r.levelno for r in caplog.records] == [TRACE_LEVEL]
    assert caplog.records[0].getMessage() == "compiler> Compiling 1 file"


def test_trace_is_dropped_above_trace(caplog: pytest.LogCaptureFixture) -> None:
    """``trace`` is silent when the logger is at DEBUG."""
    log = get_logger("luanext_bridge.tests.quiet")

    with caplog.at_level(logging.DEBUG, logger="luanext_bridge.tests.quiet"):
        log.trace("hidden")

    assert caplog.records == []


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("verbose", None),
    ],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None) -> None:
    """Level names (any case) and numbers are accepted; unknown names are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    """Without the variable there is no environment override."""
    assert resolve_env_log_level() is None
