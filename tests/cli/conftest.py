# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the LuaNext Bridge CLI.

`run_cli_in()` changes the process working directory to a temporary directory
before invoking the Click CLI, so relative directory arguments resolve against
the test's files. `linux_host` pins host detection to ``x86_64-linux`` so the
stand-in compiler installed by `install_compiler` is the one the CLI runs.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from luanext_bridge.cli.exit_codes import ExitCode
from luanext_bridge.cli.main import cli
from luanext_bridge.platform import HostInfo
from tests.conftest import LINUX_HOST

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["transpile", "plugin", "src", "out"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that do not touch the file system, or when
    every path argument is absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


@pytest.fixture
def linux_host(monkeypatch: pytest.MonkeyPatch) -> HostInfo:
    """Make host detection report ``Linux``/``x86_64``."""
    monkeypatch.setattr(HostInfo, "from_environment", classmethod(lambda cls: LINUX_HOST))
    return LINUX_HOST


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command reported error diagnostics (code 1)."""
    # FAILURE is a normal outcome of a broken build; do not assert on exception.
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
