# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : __init__.py
#   file_relpath : src/luanext_bridge/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``luanext-bridge`` CLI."""
