# topmark:header:start
#
#   project      : LuaNext Bridge
#   file         : exit_codes.py
#   file_relpath : src/luanext_bridge/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LuaNext Bridge CLI.

Values follow the BSD `sysexits` convention where practical, so that build
scripts can tell a failed compile (``FAILURE``) from a broken invocation.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LuaNext Bridge CLI.

    Attributes:
        SUCCESS: The command ran; no error diagnostics were reported.
        FAILURE: At least one error diagnostic was reported.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Invalid bridge settings file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
