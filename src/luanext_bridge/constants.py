# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : constants.py
#   file_relpath : src/luanext_bridge/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BRIDGE_VERSION: str = get_version("luanext-bridge")

# Project-relative resource path of the compiler configuration file:
BUILD_FILE_RESOURCE_PATH: str = "/.luanextrc"

# Extension (without the dot) of LuaNext source files:
SOURCE_EXT: str = "luax"

LUA_TARGET: str = "5.1"

COMPILER_BINARY_NAME: str = "luanext-compiler"

# Layout of the bundled binaries inside the plugin directory:
PLUGIN_BIN_DIR: str = "plugins/bin"

LOG_LEVEL_ENV_VAR: str = "LUANEXT_BRIDGE_LOG_LEVEL"

# Settings file names and the pyproject table holding bridge settings:
SETTINGS_FILE_NAME: str = "luanext-bridge.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "luanext-bridge"

CONFIG_MISSING_MESSAGE: str = "No configuration file found. Using compiler defaults."
COMPILER_FAILURE_PREFIX: str = "Failed to run LuaNext compiler: "
