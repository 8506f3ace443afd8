# topmark:header:start
#
#   project      : SnipMark
#   file         : check.py
#   file_relpath : src/snipmark/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark `check` command.

Runs the validation pass only and reports every marker defect with its line
number. Nothing is written.

Examples:
  Validate all supported files under ``src``:

    $ snipmark check src
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from snipmark.cli.cmd_common import (
    build_file_list,
    exit_code_for,
    get_console,
    get_effective_verbosity,
    render_file_result,
    render_summary,
)
from snipmark.cli.config_resolver import resolve_config_from_click
from snipmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_and_filtering_options,
    common_marker_options,
)
from snipmark.pipeline.runner import run

if TYPE_CHECKING:
    from pathlib import Path

    from snipmark.config.model import Config
    from snipmark.pipeline.runner import FileResult


@click.command(
    name="check",
    help="Validate snippet markers without writing anything.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option("--summary", "summary_mode", is_flag=True, help="Show outcome counts only.")
@common_marker_options
@common_file_and_filtering_options
@common_config_options
def check_command(
    *,
    paths: tuple[str, ...],
    summary_mode: bool,
    start_marker: str | None,
    end_marker: str | None,
    break_marker: str | None,
    resume_marker: str | None,
    no_window_markers: bool,
    extra_markers: tuple[str, ...],
    tab_size: int | None,
    encoding: str | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    file_types: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Validate the markers of PATHS; exit with ``FAILURE`` on any defect."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "files": paths,
            "start_marker": start_marker,
            "end_marker": end_marker,
            "break_marker": break_marker,
            "resume_marker": resume_marker,
            "no_window_markers": no_window_markers,
            "extra_markers": extra_markers,
            "tab_size": tab_size,
            "encoding": encoding,
            "include_patterns": include_patterns,
            "exclude_patterns": exclude_patterns,
            "file_types": file_types,
        },
    )
    files: list[Path] = build_file_list(config)
    results: list[FileResult] = run(files, config)

    if not summary_mode:
        for result in results:
            render_file_result(console, result, vlevel=vlevel)
    if summary_mode or vlevel > 0:
        render_summary(console, results)

    ctx.exit(exit_code_for(results))
