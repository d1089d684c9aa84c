# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : __init__.py
#   file_relpath : src/luanext_bridge/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for LuaNext Bridge: logging setup and bridge settings."""

from __future__ import annotations

from luanext_bridge.config.settings import BridgeSettings, SettingsError, load_settings

__all__ = [
    "BridgeSettings",
    "SettingsError",
    "load_settings",
]
