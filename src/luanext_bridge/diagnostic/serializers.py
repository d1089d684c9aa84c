# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : serializers.py
#   file_relpath : src/luanext_bridge/diagnostic/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON / NDJSON) renderings of diagnostics.

Shapes:
    - JSON: a single document ``{"meta": ..., "diagnostics": [...], "summary": {...}}``.
    - NDJSON: one ``{"kind": "diagnostic", ...}`` record per diagnostic, followed by
      one ``{"kind": "summary", ...}`` record.

Machine formats never contain ANSI color.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from luanext_bridge.constants import BRIDGE_VERSION
from luanext_bridge.diagnostic.model import compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from luanext_bridge.diagnostic.model import Diagnostic


def build_meta() -> dict[str, str]:
    """Return the metadata attached to every machine document."""
    return {"tool": "luanext-bridge", "version": BRIDGE_VERSION}


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, object]:
    """Return a JSON-friendly mapping for a single diagnostic."""
    return {
        "severity": diagnostic.severity.value,
        "resource_path": diagnostic.resource_path,
        "line": diagnostic.line,
        "message": diagnostic.message,
    }


def diagnostics_to_json(diagnostics: Sequence[Diagnostic], *, indent: int | None = 2) -> str:
    """Serialize diagnostics and their summary as one JSON document.

    Args:
        diagnostics: Diagnostics in report order.
        indent: JSON indentation (``None`` for compact output).

    Returns:
        The JSON text.
    """
    doc: dict[str, object] = {
        "meta": build_meta(),
        "diagnostics": [diagnostic_to_dict(d) for d in diagnostics],
        "summary": compute_diagnostic_stats(diagnostics).to_dict(),
    }
    return json.dumps(doc, indent=indent)


def iter_diagnostics_ndjson(diagnostics: Sequence[Diagnostic]) -> Iterator[str]:
    """Yield one NDJSON line per diagnostic, then a summary line.

    Args:
        diagnostics: Diagnostics in report order.

    Yields:
        Compact JSON strings without trailing newlines.
    """
    meta: dict[str, str] = build_meta()
    for d in diagnostics:
        yield json.dumps({"kind": "diagnostic", "meta": meta, **diagnostic_to_dict(d)})
    yield json.dumps(
        {
            "kind": "summary",
            "meta": meta,
            **compute_diagnostic_stats(diagnostics).to_dict(),
        }
    )
