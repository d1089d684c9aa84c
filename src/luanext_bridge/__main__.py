# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : __main__.py
#   file_relpath : src/luanext_bridge/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LuaNext Bridge via ``python -m luanext_bridge``.

It delegates directly to :func:`luanext_bridge.cli.main.cli`, the same entry
point as the ``luanext-bridge`` console script.

Examples:
    Transpile a project from the module interface::

        python -m luanext_bridge transpile ./luanext ./src ./build
"""

from __future__ import annotations

from luanext_bridge.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
