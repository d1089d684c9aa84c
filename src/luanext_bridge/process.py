# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : process.py
#   file_relpath : src/luanext_bridge/process.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the external compiler and collect its merged output.

The compiler's standard error is redirected into its standard output so a
single pipe has to be drained. The pipe is read line by line while the process
runs; reading both streams only after exit could deadlock once the compiler
fills the buffer of the stream nobody reads.

There is no timeout: a hung compiler blocks the calling thread.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Protocol

from luanext_bridge.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from luanext_bridge.config.logging import BridgeLogger

logger: BridgeLogger = get_logger(__name__)


class ProcessFailure(RuntimeError):
    """Raised when the compiler cannot be spawned or its output cannot be collected."""


class ProcessInvoker(Protocol):
    """Callable signature of `run_process`, used to inject a stand-in invoker."""

    def __call__(self, command: Sequence[str], working_dir: Path) -> str:
        """Run ``command`` in ``working_dir`` and return its merged output."""
        ...


def run_process(command: Sequence[str], working_dir: Path) -> str:
    """Run ``command`` and return its combined stdout/stderr text.

    The exit code does not decide success: it is logged, and the caller derives
    the outcome from the returned text.

    Args:
        command: Executable followed by its arguments.
        working_dir: Current directory of the child process.

    Returns:
        The merged output, one ``\\n``-terminated entry per line.

    Raises:
        ProcessFailure: If the executable cannot be spawned, or reading its
            output or waiting for it fails.
    """
    logger.debug("Running %s (cwd=%s)", " ".join(command), working_dir)
    chunks: list[str] = []
    try:
        with subprocess.Popen(  # noqa: S603
            list(command),
            cwd=working_dir,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
        ) as proc:
            if proc.stdout is None:
                raise ProcessFailure("Compiler output stream is not available")
            for line in proc.stdout:
                line = line.rstrip("\r\n")
                logger.trace("compiler> %s", line)
                chunks.append(line + "\n")
            exit_code: int = proc.wait()
    except (OSError, subprocess.SubprocessError) as exc:
        raise ProcessFailure(str(exc) or exc.__class__.__name__) from exc

    logger.debug("Compiler exited with code %d (%d output line(s))", exit_code, len(chunks))
    return "".join(chunks)
