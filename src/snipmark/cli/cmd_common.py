# topmark:header:start
#
#   project      : SnipMark
#   file         : cmd_common.py
#   file_relpath : src/snipmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Helpers shared by the ``check`` and ``extract`` commands.

They only encapsulate plumbing (file resolution, result rendering, exit
codes); each command keeps its own policy.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

import click

from snipmark.cli.errors import SnipmarkFileNotFoundError
from snipmark.cli.exit_codes import ExitCode
from snipmark.config.logging import get_logger
from snipmark.diagnostic import DiagnosticLevel
from snipmark.file_resolver import resolve_file_list
from snipmark.pipeline.runner import FileStatus

if TYPE_CHECKING:
    from pathlib import Path

    from snipmark.cli.console import ClickConsole
    from snipmark.config.model import Config
    from snipmark.pipeline.runner import FileResult

logger = get_logger(__name__)

_STATUS_STYLES: dict[FileStatus, str] = {
    FileStatus.EXTRACTED: "green",
    FileStatus.VALID: "green",
    FileStatus.NO_MARKERS: "white",
    FileStatus.UNSUPPORTED: "white",
    FileStatus.INVALID: "bright_red",
    FileStatus.UNREADABLE: "bright_red",
    FileStatus.FAILED: "bright_red",
}


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the Click context by the group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` terse, ``1+`` verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_file_list(config: Config) -> list[Path]:
    """Resolve the files to process, failing when none is left.

    Raises:
        SnipmarkFileNotFoundError: If no supported input file matches.
    """
    files: list[Path] = resolve_file_list(config)
    if not files:
        raise SnipmarkFileNotFoundError("No supported input files found.")
    return files


def render_file_result(console: ClickConsole, result: FileResult, *, vlevel: int) -> None:
    """Print one file's status and, when relevant, its diagnostics."""
    quiet_status = result.status in (FileStatus.NO_MARKERS, FileStatus.UNSUPPORTED)
    if vlevel < 0 and not result.had_errors:
        return
    if vlevel == 0 and quiet_status and not result.diagnostics.has_warning():
        return

    status: str = console.styled(result.status.value, fg=_STATUS_STYLES[result.status])
    line: str = f"{result.path}: {status}"
    if result.snippets:
        line += f" ({len(result.snippets)} snippet(s))"
    console.print(line)

    for diag in result.diagnostics:
        if diag.level is DiagnosticLevel.INFO and vlevel < 1:
            continue
        label: str = diag.level.value
        if console.enable_color:
            label = diag.level.color(label)
        console.print(f"  {label}: {diag.message}")


def render_summary(console: ClickConsole, results: list[FileResult]) -> None:
    """Print outcome counts by status, then the number of snippets written."""
    counts: Counter[FileStatus] = Counter(r.status for r in results)
    for status in FileStatus:
        if counts[status]:
            label = console.styled(f"{status.value:<12}", fg=_STATUS_STYLES[status])
            console.print(f"{label} {counts[status]}")
    snippets: int = sum(len(r.snippets) for r in results)
    if snippets:
        console.print(f"{'snippets':<12} {snippets}")


def exit_code_for(results: list[FileResult]) -> ExitCode:
    """Return ``FAILURE`` when any file had errors, ``SUCCESS`` otherwise."""
    if any(r.had_errors for r in results):
        return ExitCode.FAILURE
    return ExitCode.SUCCESS
