# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

import pytest

from luanext_bridge.constants import BRIDGE_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_version_outputs_installed_version() -> None:
    """It should output the installed package version (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.stdout.strip() == BRIDGE_VERSION


@pytest.mark.parametrize("fmt", ["json", "ndjson", "JSON"])
def test_version_machine_format(fmt: str) -> None:
    """Machine formats return parseable JSON (the format name is case-insensitive)."""
    result = run_cli(["version", "--format", fmt])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": BRIDGE_VERSION}


def test_version_rejects_unknown_format() -> None:
    """An unknown format is a usage error reported by Click."""
    result = run_cli(["version", "--format", "yaml"])

    assert result.exit_code == 2
    assert "Must be one of: text, json, ndjson" in result.output
