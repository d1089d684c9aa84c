# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : version.py
#   file_relpath : src/luanext_bridge/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge `version` command.

Prints the LuaNext Bridge version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from luanext_bridge.cli.options import OutputFormat, is_machine_format, output_format_option
from luanext_bridge.constants import BRIDGE_VERSION

if TYPE_CHECKING:
    from luanext_bridge.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LuaNext Bridge.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of LuaNext Bridge."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if is_machine_format(fmt):
        console.print(json.dumps({"version": BRIDGE_VERSION}))
    else:
        console.print(console.styled(BRIDGE_VERSION, bold=True))
