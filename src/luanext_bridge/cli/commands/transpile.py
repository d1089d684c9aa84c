# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : transpile.py
#   file_relpath : src/luanext_bridge/cli/commands/transpile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge `transpile` command.

Runs the platform's ``luanext-compiler`` over a source directory and reports
the resulting diagnostics. Exits with `ExitCode.FAILURE` when at least one
error diagnostic was reported.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from luanext_bridge.cli.emitters import emit_diagnostics
from luanext_bridge.cli.errors import BridgeConfigError, BridgeFileNotFoundError
from luanext_bridge.cli.exit_codes import ExitCode
from luanext_bridge.cli.options import OutputFormat, output_format_option
from luanext_bridge.config.logging import get_logger
from luanext_bridge.config.settings import BridgeSettings, SettingsError, load_settings
from luanext_bridge.constants import SETTINGS_FILE_NAME
from luanext_bridge.diagnostic.model import has_errors
from luanext_bridge.transpiler import LuaNextTranspiler

if TYPE_CHECKING:
    from luanext_bridge.cli.console import ConsoleLike
    from luanext_bridge.config.logging import BridgeLogger
    from luanext_bridge.diagnostic.model import Diagnostic

logger: BridgeLogger = get_logger(__name__)

_DIR = click.Path(file_okay=False, dir_okay=True, path_type=Path)


@click.command(
    name="transpile",
    help="Compile the .luax sources of SOURCE_DIR into OUTPUT_DIR and report diagnostics.",
)
@click.argument("plugin_dir", type=_DIR)
@click.argument("source_dir", type=_DIR)
@click.argument("output_dir", type=_DIR)
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Bridge settings: a luanext-bridge.toml or a pyproject.toml with [tool.luanext-bridge].",
)
@output_format_option
def transpile_command(
    *,
    plugin_dir: Path,
    source_dir: Path,
    output_dir: Path,
    settings_path: Path | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Run the compiler and print its diagnostics.

    Args:
        plugin_dir (Path): The plugin installation directory.
        source_dir (Path): The project's source directory.
        output_dir (Path): Destination of the generated Lua files.
        settings_path (Path | None): Bridge settings file; defaults to
            ``luanext-bridge.toml`` in ``source_dir`` when that file exists.
        output_format (OutputFormat | None): Output format (text by default).

    Raises:
        BridgeFileNotFoundError: If the source directory does not exist.
        BridgeConfigError: If the settings file cannot be loaded.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if not source_dir.is_dir():
        raise BridgeFileNotFoundError(f"Source directory does not exist: {source_dir}")

    if settings_path is None and (source_dir / SETTINGS_FILE_NAME).is_file():
        settings_path = source_dir / SETTINGS_FILE_NAME

    settings: BridgeSettings = BridgeSettings.from_defaults()
    if settings_path is not None:
        logger.debug("Using settings file %s", settings_path)
        try:
            settings = load_settings(settings_path)
        except SettingsError as exc:
            raise BridgeConfigError(str(exc)) from exc

    transpiler = LuaNextTranspiler(settings=settings)
    diagnostics: list[Diagnostic] = transpiler.transpile(plugin_dir, source_dir, output_dir)

    emit_diagnostics(
        console,
        diagnostics,
        fmt=fmt,
        color=bool(ctx.obj.get("color_enabled", False)) and fmt == OutputFormat.TEXT,
        show_summary=ctx.obj.get("verbosity_level", logging.WARNING) < logging.ERROR,
    )

    if has_errors(diagnostics):
        ctx.exit(ExitCode.FAILURE)
