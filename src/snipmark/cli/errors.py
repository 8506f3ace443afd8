# topmark:header:start
#
#   project      : SnipMark
#   file         : errors.py
#   file_relpath : src/snipmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Exceptions for the SnipMark CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They render through the project console when one is present in the
Click context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from snipmark.cli.exit_codes import ExitCode


class SnipmarkError(click.ClickException):
    """Base class for all SnipMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SnipmarkUsageError(SnipmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SnipmarkConfigError(SnipmarkError):
    """Error for configuration errors (invalid TOML, bad values, bad markers)."""

    exit_code = ExitCode.CONFIG_ERROR


class SnipmarkFileNotFoundError(SnipmarkError):
    """Error when no input file could be found."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SnipmarkIOError(SnipmarkError):
    """Error for I/O failures outside per-file processing (e.g. target directory)."""

    exit_code = ExitCode.IO_ERROR
