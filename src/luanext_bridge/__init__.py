# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : __init__.py
#   file_relpath : src/luanext_bridge/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge package.

LuaNext Bridge connects a host build pipeline to the platform-specific
``luanext-compiler`` executable. It resolves the right binary for the running
host, invokes it, and turns its output into structured diagnostics anchored to
project-relative resource paths.
"""

from __future__ import annotations

from luanext_bridge.diagnostic.model import Diagnostic, Severity
from luanext_bridge.transpiler import LuaNextTranspiler, LuaTranspiler

__all__ = [
    "Diagnostic",
    "LuaNextTranspiler",
    "LuaTranspiler",
    "Severity",
]
