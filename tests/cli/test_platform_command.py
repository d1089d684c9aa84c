# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : test_platform_command.py
#   file_relpath : tests/cli/test_platform_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `platform` command output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from luanext_bridge.platform import HostInfo
from tests.cli.conftest import assert_SUCCESS, run_cli

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_platform_text(linux_host: HostInfo) -> None:
    """Text output names the host and the platform pair."""
    result = run_cli(["--no-color", "platform"])

    assert_SUCCESS(result)
    assert "host:     Linux (x86_64)" in result.stdout
    assert "platform: x86_64-linux" in result.stdout
    assert "binary:" not in result.stdout


def test_platform_with_plugin_dir(linux_host: HostInfo, tmp_path: Path) -> None:
    """With a plugin dir the compiler path is shown."""
    result = run_cli(["--no-color", "platform", str(tmp_path)])

    assert_SUCCESS(result)
    assert (
        f"binary:   {tmp_path}/plugins/bin/x86_64-linux/bin/luanext-compiler" in result.stdout
    )


def test_platform_json(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """JSON output carries the raw host values and the Windows executable name."""
    monkeypatch.setattr(
        HostInfo, "from_environment", classmethod(lambda cls: HostInfo("Windows 11", "AMD64"))
    )

    result = run_cli(["platform", str(tmp_path), "--format", "json"])

    assert_SUCCESS(result)
    doc = json.loads(result.stdout)
    assert doc["os_name"] == "Windows 11"
    assert doc["arch"] == "AMD64"
    assert doc["platform"] == "x86_64-win32"
    assert doc["binary"].endswith("/bin/luanext-compiler.exe")


def test_platform_json_without_plugin_dir(linux_host: HostInfo) -> None:
    """Without a plugin dir the binary is null."""
    result = run_cli(["platform", "--format", "ndjson"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout)["binary"] is None
