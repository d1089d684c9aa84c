# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : paths.py
#   file_relpath : src/luanext_bridge/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map compiler-reported file paths to project resource paths.

A resource path is relative to the project's source directory, uses ``/`` as
separator on every OS and always starts with ``/`` (``/scripts/main.luax``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from luanext_bridge.config.logging import get_logger

if TYPE_CHECKING:
    from luanext_bridge.config.logging import BridgeLogger

logger: BridgeLogger = get_logger(__name__)


def to_resource_path(absolute_path: str | Path, source_dir: str | Path) -> str | None:
    """Return the resource path of ``absolute_path`` inside ``source_dir``.

    Both paths are canonicalized first (``.``/``..`` and symlinks resolved;
    the files need not exist).

    Args:
        absolute_path: Path of the file as reported by the compiler.
        source_dir: The project's source directory.

    Returns:
        The ``/``-rooted resource path, or ``None`` when the file lies outside
        ``source_dir`` or canonicalization fails.
    """
    try:
        source_abs: Path = Path(source_dir).resolve()
        file_abs: Path = Path(absolute_path).resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        logger.debug("Cannot canonicalize %r against %r: %s", absolute_path, source_dir, exc)
        return None

    if not file_abs.is_relative_to(source_abs):
        logger.debug("Dropping path outside source dir: %s (source dir: %s)", file_abs, source_abs)
        return None

    relative: Path = file_abs.relative_to(source_abs)
    if not relative.parts:
        return "/"
    return "/" + relative.as_posix()
