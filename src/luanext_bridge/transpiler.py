# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : transpiler.py
#   file_relpath : src/luanext_bridge/transpiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transpiler entry point used by the host build pipeline.

The host sees a `LuaTranspiler`: it asks for the configuration resource path
and the source extension, then calls `transpile()` once per build with the
plugin, source and output directories. `LuaNextTranspiler` is the only
implementation.

Failure boundary:
    `transpile()` never raises. The missing-configuration warning is recorded
    before the compiler command is built and run. If anything fails after
    that, the diagnostics gathered so far are discarded and replaced by a
    single error pinned at the configuration resource; the warning is kept.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from luanext_bridge.config.logging import get_logger
from luanext_bridge.config.settings import BridgeSettings
from luanext_bridge.constants import (
    BUILD_FILE_RESOURCE_PATH,
    COMPILER_FAILURE_PREFIX,
    CONFIG_MISSING_MESSAGE,
    SOURCE_EXT,
)
from luanext_bridge.diagnostic.model import Diagnostic, Severity
from luanext_bridge.parser import parse_output
from luanext_bridge.platform import HostInfo, Platform, binary_path, resolve_host_platform
from luanext_bridge.process import run_process

if TYPE_CHECKING:
    from luanext_bridge.config.logging import BridgeLogger
    from luanext_bridge.process import ProcessInvoker

logger: BridgeLogger = get_logger(__name__)


class LuaTranspiler(Protocol):
    """Transpiler capability expected by the host build pipeline."""

    @property
    def build_file_resource_path(self) -> str:
        """Resource path of the project's compiler configuration file."""
        ...

    @property
    def source_ext(self) -> str:
        """Extension (without dot) of the source files handled by this transpiler."""
        ...

    def transpile(
        self,
        plugin_dir: str | os.PathLike[str],
        source_dir: str | os.PathLike[str],
        output_dir: str | os.PathLike[str],
    ) -> list[Diagnostic]:
        """Transpile the sources in ``source_dir`` into ``output_dir``."""
        ...


class LuaNextTranspiler:
    """Drive the platform-specific ``luanext-compiler`` and collect its diagnostics.

    Args:
        settings (BridgeSettings | None): Command-line settings; defaults reproduce
            the fixed compiler contract.
        host (HostInfo | None): Host identity; the running host when omitted.
        invoker (ProcessInvoker | None): Process runner; `run_process` when omitted.
    """

    def __init__(
        self,
        *,
        settings: BridgeSettings | None = None,
        host: HostInfo | None = None,
        invoker: ProcessInvoker | None = None,
    ) -> None:
        self.settings: BridgeSettings = settings or BridgeSettings.from_defaults()
        self.host: HostInfo | None = host
        self.invoker: ProcessInvoker = invoker or run_process

    @property
    def build_file_resource_path(self) -> str:
        """Resource path of the project's ``.luanextrc``."""
        return BUILD_FILE_RESOURCE_PATH

    @property
    def source_ext(self) -> str:
        """Extension of LuaNext source files (``luax``)."""
        return SOURCE_EXT

    def config_path(self, source_dir: str | os.PathLike[str]) -> Path:
        """Return the on-disk location of the configuration file in ``source_dir``."""
        return Path(source_dir) / self.build_file_resource_path.lstrip("/")

    def list_source_files(self, source_dir: str | os.PathLike[str]) -> list[Path]:
        """Return the source files directly inside ``source_dir``.

        Subdirectories are not searched. Files are returned in directory
        listing order, which is platform dependent.
        """
        suffix: str = "." + self.source_ext
        with os.scandir(source_dir) as entries:
            return [
                Path(entry.path).absolute()
                for entry in entries
                if entry.name.endswith(suffix) and entry.is_file()
            ]

    def build_command(
        self,
        plugin_dir: str | os.PathLike[str],
        source_dir: str | os.PathLike[str],
        output_dir: str | os.PathLike[str],
        *,
        platform: Platform | None = None,
    ) -> list[str]:
        """Return the compiler command line for one build.

        Args:
            plugin_dir: The plugin installation directory.
            source_dir: The project's source directory.
            output_dir: Destination of the generated Lua files.
            platform: Target platform; resolved from the host when omitted.

        Returns:
            ``[binary, "compile", "--target=...", "--config=...",
            "--output-dir=...", *sources]`` with absolute paths.
        """
        resolved: Platform = platform or resolve_host_platform(self.host)
        # Absolute: the child runs in source_dir, so a relative binary would not be found.
        binary: str = binary_path(
            Path(plugin_dir).absolute(), resolved, binary_name=self.settings.binary_name
        )
        command: list[str] = [
            binary,
            "compile",
            f"--target={self.settings.target}",
            f"--config={self.config_path(source_dir).absolute()}",
            f"--output-dir={Path(output_dir).absolute()}",
        ]
        command.extend(str(p) for p in self.list_source_files(source_dir))
        return command

    def transpile(
        self,
        plugin_dir: str | os.PathLike[str],
        source_dir: str | os.PathLike[str],
        output_dir: str | os.PathLike[str],
    ) -> list[Diagnostic]:
        """Run the compiler over ``source_dir`` and return its diagnostics.

        Args:
            plugin_dir: The plugin installation directory.
            source_dir: The project's source directory.
            output_dir: Destination of the generated Lua files.

        Returns:
            The diagnostics of this build. On failure: the missing-configuration
            warning (if any) followed by one error describing the failure.
        """
        preamble: list[Diagnostic] = []
        try:
            platform: Platform = resolve_host_platform(self.host)

            if not self.config_path(source_dir).exists():
                logger.info("No %s in %s", self.build_file_resource_path, source_dir)
                preamble.append(
                    Diagnostic(
                        severity=Severity.WARNING,
                        resource_path=self.build_file_resource_path,
                        line=1,
                        message=CONFIG_MISSING_MESSAGE,
                    )
                )

            command: list[str] = self.build_command(
                plugin_dir, source_dir, output_dir, platform=platform
            )
            raw_output: str = self.invoker(command, Path(source_dir))
            parsed: list[Diagnostic] = parse_output(raw_output, source_dir)
        except Exception as exc:
            logger.debug("Compiler run failed", exc_info=True)
            logger.error("%s%s", COMPILER_FAILURE_PREFIX, exc)
            return [
                *preamble,
                Diagnostic(
                    severity=Severity.ERROR,
                    resource_path=self.build_file_resource_path,
                    line=1,
                    message=f"{COMPILER_FAILURE_PREFIX}{exc}",
                ),
            ]

        logger.info("Compiler reported %d diagnostic(s)", len(parsed))
        return [*preamble, *parsed]
