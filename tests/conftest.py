# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LuaNext Bridge test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs.

Notes:
    Tests that spawn a real process use a tiny ``/bin/sh`` stand-in for
    ``luanext-compiler``, installed at the plugin layout of the
    ``x86_64-linux`` platform, and pin the host to ``LINUX_HOST`` so the
    bridge resolves that platform on every OS. They are skipped on Windows.
"""

from __future__ import annotations

import stat
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from luanext_bridge.config import logging
from luanext_bridge.constants import LOG_LEVEL_ENV_VAR
from luanext_bridge.platform import HostInfo, Platform, binary_path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

LINUX_HOST: HostInfo = HostInfo(os_name="Linux", arch="x86_64")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
skip_on_windows: DecoratorType[Any] = as_typed_mark(
    pytest.mark.skipif(sys.platform == "win32", reason="uses a /bin/sh stand-in compiler")
)


@pytest.fixture(autouse=True)
def silence_bridge_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the bridge's log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show the full compiler exchange.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Return an empty project source directory with a ``.luanextrc``."""
    src: Path = tmp_path / "project"
    src.mkdir()
    (src / ".luanextrc").write_text("{}\n", encoding="utf-8")
    return src


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    """Return an (initially empty) plugin installation directory."""
    plugin: Path = tmp_path / "plugin"
    plugin.mkdir()
    return plugin


@pytest.fixture
def install_compiler(plugin_dir: Path) -> Callable[[str], Path]:
    """Return a factory installing a shell-script compiler for ``x86_64-linux``.

    The factory takes the script body (without shebang) and returns the
    executable's path. ``$@`` holds the bridge's compiler arguments and the
    working directory is the project's source directory.
    """

    def _install(body: str) -> Path:
        exe = Path(binary_path(plugin_dir, Platform.X86_64_LINUX))
        exe.parent.mkdir(parents=True, exist_ok=True)
        exe.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return exe

    return _install
