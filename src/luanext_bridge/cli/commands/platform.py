# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : platform.py
#   file_relpath : src/luanext_bridge/cli/commands/platform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge `platform` command.

Shows the platform pair resolved for the running host and, when a plugin
directory is given, the compiler executable path the bridge would run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from luanext_bridge.cli.options import OutputFormat, is_machine_format, output_format_option
from luanext_bridge.platform import HostInfo, Platform, binary_path, resolve_host_platform

if TYPE_CHECKING:
    from luanext_bridge.cli.console import ConsoleLike


@click.command(
    name="platform",
    help="Show the resolved host platform and, with PLUGIN_DIR, the compiler path.",
)
@click.argument(
    "plugin_dir",
    required=False,
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@output_format_option
def platform_command(
    *,
    plugin_dir: Path | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Print the host identity, platform pair and optional binary path."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    host: HostInfo = HostInfo.from_environment()
    resolved: Platform = resolve_host_platform(host)
    binary: str | None = binary_path(plugin_dir, resolved) if plugin_dir is not None else None

    if is_machine_format(fmt):
        payload: dict[str, str | None] = {
            "os_name": host.os_name,
            "arch": host.arch,
            "platform": resolved.pair,
            "binary": binary,
        }
        console.print(json.dumps(payload, indent=2 if fmt == OutputFormat.JSON else None))
        return

    console.print(f"host:     {host.os_name} ({host.arch})")
    console.print(f"platform: {console.styled(resolved.pair, bold=True)}")
    if binary is not None:
        console.print(f"binary:   {binary}")
