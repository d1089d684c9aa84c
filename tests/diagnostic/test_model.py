# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for severities, diagnostics and diagnostic statistics."""

from __future__ import annotations

import pytest

from luanext_bridge.diagnostic import (
    Diagnostic,
    Severity,
    compute_diagnostic_stats,
    has_errors,
    map_severity,
)


@pytest.mark.parametrize("token", ["error", "Error", "ERROR"])
def test_map_severity_error(token: str) -> None:
    """All spellings of ``error`` map to ERROR."""
    assert map_severity(token) is Severity.ERROR


@pytest.mark.parametrize("token", ["warning", "Warning", "WARNING"])
def test_map_severity_warning(token: str) -> None:
    """All spellings of ``warning`` map to WARNING."""
    assert map_severity(token) is Severity.WARNING


@pytest.mark.parametrize("token", ["info", "INFO", "Info"])
def test_map_severity_info(token: str) -> None:
    """All spellings of ``info`` map to INFO."""
    assert map_severity(token) is Severity.INFO


@pytest.mark.parametrize("token", ["unknown", "", "note", "warn", "fatal"])
def test_map_severity_unknown_defaults_to_error(token: str) -> None:
    """Unknown tokens fall back to ERROR."""
    assert map_severity(token) is Severity.ERROR


def test_severity_colors_are_callables() -> None:
    """Every severity exposes a color function returning text."""
    for severity in Severity:
        assert "x" in severity.color("x")


def test_diagnostic_str() -> None:
    """The string form is ``<resource>:<line>: <severity>: <message>``."""
    d = Diagnostic(Severity.WARNING, "/a/b.luax", 3, "Unused variable x")

    assert str(d) == "/a/b.luax:3: warning: Unused variable x"


@pytest.mark.parametrize("resource_path", ["a.luax", "", "\\a.luax"])
def test_diagnostic_rejects_invalid_resource_path(resource_path: str) -> None:
    """Resource paths must be ``/``-rooted."""
    with pytest.raises(ValueError, match="resource path"):
        Diagnostic(Severity.ERROR, resource_path, 1, "m")


def test_diagnostic_accepts_backslash_in_file_name() -> None:
    """A backslash is a legal file name character on POSIX, not a separator."""
    d = Diagnostic(Severity.ERROR, "/we\\ird.luax", 2, "odd name")

    assert d.resource_path == "/we\\ird.luax"


@pytest.mark.parametrize("line", [0, -1])
def test_diagnostic_rejects_line_below_one(line: int) -> None:
    """Line numbers start at 1."""
    with pytest.raises(ValueError, match="Line number"):
        Diagnostic(Severity.ERROR, "/a.luax", line, "m")


def test_diagnostic_is_immutable() -> None:
    """Diagnostics are frozen."""
    d = Diagnostic(Severity.INFO, "/a.luax", 1, "m")

    with pytest.raises(AttributeError):
        d.line = 2  # type: ignore[misc]


def test_compute_stats() -> None:
    """Counts are aggregated per severity."""
    diagnostics = [
        Diagnostic(Severity.ERROR, "/a.luax", 1, "e"),
        Diagnostic(Severity.WARNING, "/a.luax", 2, "w1"),
        Diagnostic(Severity.WARNING, "/a.luax", 3, "w2"),
    ]

    stats = compute_diagnostic_stats(diagnostics)

    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (0, 2, 1, 3)
    assert stats.to_dict() == {"info": 0, "warning": 2, "error": 1}


def test_compute_stats_accepts_generators() -> None:
    """A one-shot iterable is counted correctly."""
    stats = compute_diagnostic_stats(
        Diagnostic(Severity.INFO, "/a.luax", n, "i") for n in range(1, 4)
    )

    assert stats.n_info == 3


def test_has_errors() -> None:
    """Only ERROR diagnostics count as errors."""
    warning = Diagnostic(Severity.WARNING, "/a.luax", 1, "w")
    error = Diagnostic(Severity.ERROR, "/a.luax", 1, "e")

    assert not has_errors([])
    assert not has_errors([warning])
    assert has_errors([warning, error])
