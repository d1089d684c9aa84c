# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : settings.py
#   file_relpath : src/luanext_bridge/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bridge settings and their TOML loader.

Settings only affect how the bridge builds the compiler command line. They are
read from either:
- a dedicated ``luanext-bridge.toml`` file (top-level table), or
- the ``[tool.luanext-bridge]`` table of a ``pyproject.toml``.

Parsing is done with `tomlkit` and unwrapped into plain Python values. The
project's own ``.luanextrc`` is opaque to the bridge and never parsed here.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from luanext_bridge.config.logging import get_logger
from luanext_bridge.constants import (
    COMPILER_BINARY_NAME,
    LUA_TARGET,
    PYPROJECT_FILE_NAME,
    PYPROJECT_TOOL_TABLE,
)

if TYPE_CHECKING:
    from pathlib import Path

    from luanext_bridge.config.logging import BridgeLogger

logger: BridgeLogger = get_logger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or holds invalid values."""


@dataclass(frozen=True)
class BridgeSettings:
    """Immutable settings used to build the compiler command line.

    Attributes:
        target (str): Lua version passed as ``--target=<target>``.
        binary_name (str): File name of the compiler executable inside the
            platform's ``bin`` directory (without the ``.exe`` suffix).
    """

    target: str = LUA_TARGET
    binary_name: str = COMPILER_BINARY_NAME

    @classmethod
    def from_defaults(cls) -> BridgeSettings:
        """Return the settings matching the fixed compiler contract."""
        return cls()

    @classmethod
    def from_mapping(cls, data: dict[str, Any], *, source: str = "<mapping>") -> BridgeSettings:
        """Build settings from a plain mapping, validating value types.

        Keys use TOML spelling (``binary-name``); underscores are accepted too.
        Unknown keys are logged and ignored.

        Args:
            data (dict[str, Any]): The settings table.
            source (str): Human-readable origin, used in messages.

        Returns:
            BridgeSettings: The resulting settings (defaults for missing keys).

        Raises:
            SettingsError: If a known key holds a non-string or empty value.
        """
        known: set[str] = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                logger.warning("%s: ignoring unknown setting %r", source, raw_key)
                continue
            if not isinstance(value, str) or not value.strip():
                raise SettingsError(f"{source}: setting {raw_key!r} must be a non-empty string")
            values[key] = value.strip()
        return cls(**values)


def load_settings(path: Path) -> BridgeSettings:
    """Load bridge settings from a TOML file.

    A file named ``pyproject.toml`` is searched for a ``[tool.luanext-bridge]``
    table (absent table: defaults). Any other file is read as a whole.

    Args:
        path (Path): The TOML file to read.

    Returns:
        BridgeSettings: The loaded settings.

    Raises:
        SettingsError: If the file cannot be read, is not valid TOML, or holds
            invalid values.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    try:
        doc: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc

    if path.name == PYPROJECT_FILE_NAME:
        tool: Any = doc.get("tool", {})
        table: Any = tool.get(PYPROJECT_TOOL_TABLE, {}) if isinstance(tool, dict) else {}
        if not table:
            logger.debug("%s has no [tool.%s] table; using defaults", path, PYPROJECT_TOOL_TABLE)
    else:
        table = doc

    if not isinstance(table, dict):
        raise SettingsError(f"{path}: [tool.{PYPROJECT_TOOL_TABLE}] must be a table")

    settings = BridgeSettings.from_mapping(table, source=str(path))
    logger.debug("Loaded settings from %s: %r", path, settings)
    return settings
