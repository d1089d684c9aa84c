# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : platform.py
#   file_relpath : src/luanext_bridge/platform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host platform resolution and compiler binary layout.

The plugin ships one compiler build per supported platform under
``<plugin_dir>/plugins/bin/<pair>/bin/``. This module maps the host operating
system and architecture to one of the supported platform pairs and derives the
executable path from it.

Resolution is a pure function of two strings (OS name and architecture). The
host values are wrapped in `HostInfo` so callers and tests can inject them
instead of relying on the real process environment.

Example:
    ```python
    from luanext_bridge.platform import HostInfo, Platform, resolve_host_platform

    assert resolve_host_platform(HostInfo("Windows 10", "amd64")) is Platform.X86_64_WIN32
    ```
"""

from __future__ import annotations

import platform as _platform
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from luanext_bridge.config.logging import get_logger
from luanext_bridge.constants import COMPILER_BINARY_NAME, PLUGIN_BIN_DIR

if TYPE_CHECKING:
    import os

    from luanext_bridge.config.logging import BridgeLogger

logger: BridgeLogger = get_logger(__name__)


class Platform(str, Enum):
    """Supported compiler platforms.

    `.value` is the platform pair used in the plugin's binary layout; the
    executable suffix is attached to each member.

    Attributes:
        pair (str): Platform pair string (same as `.value`).
        executable_suffix (str): Suffix appended to the compiler binary name.
    """

    executable_suffix: str

    def __new__(cls, pair: str, executable_suffix: str = "") -> Platform:
        """Create a platform member with its pair and executable suffix.

        Args:
            pair (str): The platform pair (stored as `.value`).
            executable_suffix (str): Suffix of executables on that platform.

        Returns:
            Platform: The newly created enum member.
        """
        obj: Platform = str.__new__(cls, pair)
        obj._value_ = pair
        obj.executable_suffix = executable_suffix
        return obj

    X86_64_LINUX = ("x86_64-linux",)
    X86_64_MACOS = ("x86_64-macos",)
    ARM64_MACOS = ("arm64-macos",)
    X86_64_WIN32 = ("x86_64-win32", ".exe")

    @property
    def pair(self) -> str:
        """Platform pair string (e.g. ``"arm64-macos"``)."""
        return str(self.value)


@dataclass(frozen=True)
class HostInfo:
    """Host identity used for platform resolution.

    Attributes:
        os_name (str): Operating system name (e.g. ``"Linux"``, ``"Darwin"``,
            ``"Windows 10"``).
        arch (str): Machine architecture (e.g. ``"x86_64"``, ``"aarch64"``).
    """

    os_name: str
    arch: str

    @classmethod
    def from_environment(cls) -> HostInfo:
        """Return the identity of the running host.

        Python reports Apple Silicon as ``arm64``; it is normalized to
        ``aarch64`` so `resolve_platform` sees a single ARM spelling.
        """
        os_name: str = _platform.system()
        arch: str = _platform.machine()
        if arch.lower() == "arm64":
            arch = "aarch64"
        return cls(os_name=os_name, arch=arch)


def resolve_platform(os_name: str, arch: str) -> Platform:
    """Map an OS name and architecture to a supported platform.

    Rules, evaluated in order (case-insensitive substring tests):

    1. OS contains ``windows``: `Platform.X86_64_WIN32` (no ARM Windows build).
    2. OS contains ``mac`` or ``darwin``: `Platform.ARM64_MACOS` when the
       architecture contains ``aarch64``, else `Platform.X86_64_MACOS`.
    3. Anything else: `Platform.X86_64_LINUX` (no ARM Linux build).

    Args:
        os_name: Host operating system name.
        arch: Host architecture.

    Returns:
        The resolved platform.
    """
    os_lower: str = os_name.lower()
    arch_lower: str = arch.lower()

    if "windows" in os_lower:
        return Platform.X86_64_WIN32
    if "mac" in os_lower or "darwin" in os_lower:
        return Platform.ARM64_MACOS if "aarch64" in arch_lower else Platform.X86_64_MACOS
    return Platform.X86_64_LINUX


def resolve_host_platform(host: HostInfo | None = None) -> Platform:
    """Resolve the platform for ``host`` (the running host when omitted)."""
    info: HostInfo = host or HostInfo.from_environment()
    resolved: Platform = resolve_platform(info.os_name, info.arch)
    logger.debug("Host %r resolved to platform %s", info, resolved.pair)
    return resolved


def binary_path(
    plugin_dir: str | os.PathLike[str],
    platform: Platform,
    *,
    binary_name: str = COMPILER_BINARY_NAME,
) -> str:
    """Return the path of the compiler executable for ``platform``.

    The path is ``<plugin_dir>/plugins/bin/<pair>/bin/<binary_name>`` with the
    platform's executable suffix. The file system is not consulted; a missing
    binary only surfaces when the process is spawned.

    Args:
        plugin_dir: The plugin installation directory.
        platform: The target platform.
        binary_name: Executable name without suffix.

    Returns:
        The executable path as a string.
    """
    return (
        f"{plugin_dir}/{PLUGIN_BIN_DIR}/{platform.pair}/bin/"
        f"{binary_name}{platform.executable_suffix}"
    )
