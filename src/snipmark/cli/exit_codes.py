# topmark:header:start
#
#   project      : SnipMark
#   file         : exit_codes.py
#   file_relpath : src/snipmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Exit codes for the SnipMark CLI.

SnipMark aligns with the BSD `sysexits` convention where practical, so that
build scripts can tell a marker defect (``FAILURE``) from a broken invocation
or configuration.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the SnipMark CLI.

    Attributes:
        SUCCESS: Every file was processed without errors.
        FAILURE: At least one file had marker defects or could not be processed.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: No input file could be found. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: The target directory cannot be used. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid or malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
