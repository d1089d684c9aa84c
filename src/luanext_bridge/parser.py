# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : parser.py
#   file_relpath : src/luanext_bridge/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse compiler output into diagnostics.

The compiler reports problems in one of two line formats:

- pretty: ``<severity> [<path>:<line>:<col>]: <message>[ [<code>]]``
- simple: ``<path>:<line>:<col>: <severity>: <message>[ [<code>]]``

Each trimmed, non-blank line is matched against the pretty format first and
the simple format second; the first match wins. Lines matching neither format
(progress messages, summaries) are ignored.

The column and the trailing code are parsed but not carried into
[`Diagnostic`][luanext_bridge.diagnostic.model.Diagnostic], which has no field
for them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from luanext_bridge.config.logging import get_logger
from luanext_bridge.diagnostic.model import Diagnostic, map_severity
from luanext_bridge.paths import to_resource_path

if TYPE_CHECKING:
    from pathlib import Path

    from luanext_bridge.config.logging import BridgeLogger

logger: BridgeLogger = get_logger(__name__)

_SEVERITY: Final[str] = r"(?P<severity>(?i:error|warning|info))"
_MESSAGE: Final[str] = r"\s*(?P<message>.*?)(?:\s*\[(?P<code>\w+)\])?"

PRETTY_PATTERN: Final[re.Pattern[str]] = re.compile(
    _SEVERITY + r" \[(?P<path>.+):(?P<line>[0-9]+):(?P<column>[0-9]+)\]:" + _MESSAGE,
    re.ASCII,
)

SIMPLE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<path>.+):(?P<line>[0-9]+):(?P<column>[0-9]+):\s*" + _SEVERITY + r":" + _MESSAGE,
    re.ASCII,
)

# Order matters: a contrived line may satisfy both formats.
LINE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (PRETTY_PATTERN, SIMPLE_PATTERN)


@dataclass(frozen=True)
class CompilerMessage:
    """One compiler output line, as matched.

    Attributes:
        severity_token (str): The severity word as printed.
        path (str): The file path as printed by the compiler.
        line (int): Line number.
        column (int): Column number.
        message (str): Message text, trimmed.
        code (str | None): Trailing diagnostic code (e.g. ``E1001``), if any.
    """

    severity_token: str
    path: str
    line: int
    column: int
    message: str
    code: str | None = None


def match_line(line: str) -> CompilerMessage | None:
    """Match one output line against the known formats.

    Args:
        line: A raw output line; surrounding whitespace is ignored.

    Returns:
        The matched message, or ``None`` if the line is blank or matches no format.
    """
    text: str = line.strip()
    if not text:
        return None
    for pattern in LINE_PATTERNS:
        m: re.Match[str] | None = pattern.fullmatch(text)
        if m is not None:
            return CompilerMessage(
                severity_token=m.group("severity"),
                path=m.group("path"),
                line=int(m.group("line")),
                column=int(m.group("column")),
                message=m.group("message").strip(),
                code=m.group("code"),
            )
    return None


def parse_output(raw_output: str, source_dir: str | Path) -> list[Diagnostic]:
    """Convert raw compiler output into diagnostics.

    Args:
        raw_output: The compiler's merged output.
        source_dir: The project's source directory; reported paths outside it
            are dropped.

    Returns:
        Diagnostics in output order.
    """
    diagnostics: list[Diagnostic] = []
    # Only "\n" ends a line; other line-break characters belong to the message.
    for raw_line in raw_output.split("\n"):
        msg: CompilerMessage | None = match_line(raw_line)
        if msg is None:
            if raw_line.strip():
                logger.trace("Ignoring unrecognized output line: %r", raw_line)
            continue
        if msg.line < 1:
            logger.trace("Ignoring output line with line number %d: %r", msg.line, raw_line)
            continue

        resource_path: str | None = to_resource_path(msg.path, source_dir)
        if resource_path is None:
            continue

        logger.trace(
            "Parsed %s at %s:%d:%d (code=%s)",
            msg.severity_token,
            resource_path,
            msg.line,
            msg.column,
            msg.code,
        )
        diagnostics.append(
            Diagnostic(
                severity=map_severity(msg.severity_token),
                resource_path=resource_path,
                line=msg.line,
                message=msg.message,
            )
        )
    return diagnostics
