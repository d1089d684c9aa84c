# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : emitters.py
#   file_relpath : src/luanext_bridge/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render diagnostics to the console in the selected output format."""

from __future__ import annotations

from typing import TYPE_CHECKING

from luanext_bridge.cli.options import OutputFormat
from luanext_bridge.diagnostic.model import DiagnosticStats, compute_diagnostic_stats
from luanext_bridge.diagnostic.serializers import diagnostics_to_json, iter_diagnostics_ndjson

if TYPE_CHECKING:
    from collections.abc import Sequence

    from luanext_bridge.cli.console import ConsoleLike
    from luanext_bridge.diagnostic.model import Diagnostic


def format_diagnostic_line(diagnostic: Diagnostic, *, color: bool) -> str:
    """Return ``<resource>:<line>: <severity>: <message>``, severity colored if enabled."""
    severity: str = diagnostic.severity.value
    if color:
        severity = diagnostic.severity.color(severity)
    return f"{diagnostic.resource_path}:{diagnostic.line}: {severity}: {diagnostic.message}"


def format_summary(stats: DiagnosticStats) -> str:
    """Return a one-line per-severity summary."""
    return f"{stats.n_error} error(s), {stats.n_warning} warning(s), {stats.n_info} info"


def emit_diagnostics(
    console: ConsoleLike,
    diagnostics: Sequence[Diagnostic],
    *,
    fmt: OutputFormat,
    color: bool,
    show_summary: bool = True,
) -> None:
    """Write diagnostics to ``console`` in format ``fmt``.

    Args:
        console: Destination console.
        diagnostics: Diagnostics in report order.
        fmt: Output format.
        color: Whether text output may use ANSI color.
        show_summary: Whether text output ends with a summary line.
    """
    if fmt == OutputFormat.JSON:
        console.print(diagnostics_to_json(diagnostics))
        return
    if fmt == OutputFormat.NDJSON:
        for line in iter_diagnostics_ndjson(diagnostics):
            console.print(line)
        return

    for d in diagnostics:
        console.print(format_diagnostic_line(d, color=color))
    if show_summary:
        summary: str = format_summary(compute_diagnostic_stats(diagnostics))
        console.print(console.styled(summary, bold=True))
