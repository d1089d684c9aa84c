# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LuaNext Bridge project automation via Nox.

Sessions:
  - `lint`: Ruff lint and format check.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `unit`: Fast tests only (no real compiler process).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
  - `nox -s unit -- -k parser`
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import TYPE_CHECKING, Any, cast

import nox

if TYPE_CHECKING:
    from collections.abc import Callable

if sys.version_info >= (3, 11):
    import tomllib

    _toml_loads = cast("Callable[[str], dict[str, Any]]", tomllib.loads)  # type: ignore[assignment]
else:
    import toml

    _toml_loads = cast("Callable[[str], dict[str, Any]]", toml.loads)  # type: ignore[assignment]

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

CLASSIFIER_PREFIX = "Programming Language :: Python :: "


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Runs at noxfile import time, so it must not depend on project runtime
    dependencies.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    path: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
    try:
        doc: dict[str, Any] = _toml_loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        doc = {}

    classifiers_any = doc.get("project", {}).get("classifiers")
    versions: list[tuple[int, int]] = []
    if isinstance(classifiers_any, list):
        for c in cast("list[str]", classifiers_any):
            if not c.startswith(CLASSIFIER_PREFIX):
                continue
            parts: list[str] = c.removeprefix(CLASSIFIER_PREFIX).strip().split(".")
            # Accept only X.Y numeric versions.
            if len(parts) == 2 and all(p.isdigit() for p in parts):
                versions.append((int(parts[0]), int(parts[1])))

    if not versions:
        warnings.warn(
            "No Python versions found in pyproject.toml. "
            f"Falling back to {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return [f"{major}.{minor}" for major, minor in sorted(set(versions))]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "unit"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.log("Supported Python versions: " + ", ".join(PYTHONS))

    session.install("-e", ".[dev]")

    session.run("pytest", "-q", "tests", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session(python=CURRENT_PYTHON_VERSION)
def unit(session: nox.Session) -> None:
    """Run the tests that do not spawn a compiler process."""
    session.install("-e", ".[test]")

    session.run("pytest", "-q", "tests", "-m", "not integration", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis and formatting check."""
    session.install("-e", ".[dev]")

    session.run("ruff", "check", ".")
    session.run("ruff", "format", "--check", ".")
