# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : model.py
#   file_relpath : src/luanext_bridge/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for LuaNext Bridge.

This module defines the diagnostic records handed back to the host build
pipeline after a compiler run.

Sections:
    * Severity: severity levels with associated terminal colors.
    * map_severity: fail-safe mapping of compiler severity tokens.
    * Diagnostic: immutable record anchored to a resource path and line.
    * DiagnosticStats: aggregated per-severity counts.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from luanext_bridge.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from luanext_bridge.config.logging import BridgeLogger


logger: BridgeLogger = get_logger(__name__)


class Severity(Enum):
    """Severity levels of compiler diagnostics.

    Levels map to terminal colors and are ordered by importance: ERROR > WARNING > INFO.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                Severity.INFO: chalk.blue,
                Severity.WARNING: chalk.yellow,
                Severity.ERROR: chalk.red_bright,
            }[self],
        )


def map_severity(token: str) -> Severity:
    """Map a compiler severity token to a `Severity`.

    Matching is case-insensitive. Unknown tokens map to `Severity.ERROR` so a
    message the bridge does not understand is never silently downgraded.

    Args:
        token: The severity word as printed by the compiler.

    Returns:
        The matching severity, or `Severity.ERROR` for unknown tokens.
    """
    try:
        return Severity(token.strip().lower())
    except ValueError:
        logger.debug("Unknown severity token %r, treating as error", token)
        return Severity.ERROR


@dataclass(frozen=True)
class Diagnostic:
    """Structured compiler diagnostic tied to a project resource and line.

    Attributes:
        severity (Severity): The diagnostic severity.
        resource_path (str): Project-relative path, ``/``-separated and
            starting with ``/`` (e.g. ``/scripts/main.luax``).
        line (int): 1-based line number.
        message (str): The diagnostic message, without the trailing code.
    """

    severity: Severity
    resource_path: str
    line: int
    message: str

    def __post_init__(self) -> None:
        """Validate the resource path and line number.

        Raises:
            ValueError: If the resource path does not start with ``/`` or the line
                number is below 1.
        """
        if not self.resource_path.startswith("/"):
            raise ValueError(f"Invalid resource path: {self.resource_path!r}")
        if self.line < 1:
            raise ValueError(f"Line number must be >= 1, got {self.line}")

    def __str__(self) -> str:
        return f"{self.resource_path}:{self.line}: {self.severity.value}: {self.message}"


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return {
            "info": self.n_info,
            "warning": self.n_warning,
            "error": self.n_error,
        }


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-severity counts for a sequence of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-severity counts.
    """
    items: list[Diagnostic] = list(diagnostics)
    n_info: int = sum(1 for d in items if d.severity == Severity.INFO)
    n_warn: int = sum(1 for d in items if d.severity == Severity.WARNING)
    n_err: int = sum(1 for d in items if d.severity == Severity.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    """Return True if any diagnostic has `Severity.ERROR`."""
    return any(d.severity == Severity.ERROR for d in diagnostics)
