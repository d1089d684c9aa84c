# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : main.py
#   file_relpath : src/luanext_bridge/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``luanext-bridge`` CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the program-output console; subcommands read them
from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from luanext_bridge.cli.commands.platform import platform_command
from luanext_bridge.cli.commands.transpile import transpile_command
from luanext_bridge.cli.commands.version import version_command
from luanext_bridge.cli.console import ClickConsole
from luanext_bridge.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from luanext_bridge.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from luanext_bridge.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Logging follows ``LUANEXT_BRIDGE_LOG_LEVEL`` when set, else the level
    selected with ``-v``/``-q``; without either, only critical records are shown.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env
    if log_level is None and (verbose or quiet):
        log_level = level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="LuaNext Bridge CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the LuaNext Bridge CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'luanext-bridge transpile PLUGIN_DIR SOURCE_DIR OUTPUT_DIR'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(platform_command)

cli.add_command(transpile_command)

if __name__ == "__main__":
    cli()
