# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : __init__.py
#   file_relpath : src/luanext_bridge/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are immutable `Diagnostic` instances anchored to a
      project-relative resource path and a 1-based line.
    - Compiler severity tokens are mapped with `map_severity`, which never fails.

Machine output:
    JSON/NDJSON representations live in
    [`luanext_bridge.diagnostic.serializers`][luanext_bridge.diagnostic.serializers].
"""

from __future__ import annotations

from luanext_bridge.diagnostic.model import (
    Diagnostic,
    DiagnosticStats,
    Severity,
    compute_diagnostic_stats,
    has_errors,
    map_severity,
)

__all__ = [
    "Diagnostic",
    "DiagnosticStats",
    "Severity",
    "compute_diagnostic_stats",
    "has_errors",
    "map_severity",
]
