# topmark:header:start
#
#   project      : SnipMark
#   file         : extract.py
#   file_relpath : src/snipmark/cli/commands/extract.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark `extract` command.

Validates every input file, then extracts the tagged regions of the valid ones
into ``<target>/<id>.snip``. Invalid files are reported and skipped; existing
snippets are never overwritten.

Examples:
  Extract every snippet under ``src`` into ``build/snippets``:

    $ snipmark extract -t build/snippets src

  Use custom markers, four workers, and only Java files:

    $ snipmark extract -t out --start-marker '@start:' --end-marker '@end:' \
        --jobs 4 --file-type java src
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
from snipmark.cli.errors import SnipmarkIOError, SnipmarkUsageError
from snipmark.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_and_filtering_options,
    common_marker_options,
    underscored_trap_option,
)
from snipmark.config.logging import get_logger
from snipmark.pipeline.runner import run
from snipmark.pipeline.target import SnippetTarget

if TYPE_CHECKING:
    from pathlib import Path

    from snipmark.config.model import Config
    from snipmark.pipeline.runner import FileResult

logger = get_logger(__name__)


@click.command(
    name="extract",
    help="Extract tagged regions of source files into snippet files.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--target-dir",
    "-t",
    "target_dir",
    type=click.Path(file_okay=False, dir_okay=True),
    default=None,
    help="Directory receiving the snippet files (or 'target_dir' in config).",
)
@underscored_trap_option("--target_dir")
@click.option(
    "--suffix",
    "snippet_suffix",
    default=None,
    help="Extension of snippet files (default: .snip).",
)
@click.option(
    "--jobs",
    "-j",
    "jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Number of files processed in parallel.",
)
@click.option("--summary", "summary_mode", is_flag=True, help="Show outcome counts only.")
@common_marker_options
@common_file_and_filtering_options
@common_config_options
def extract_command(
    *,
    paths: tuple[str, ...],
    target_dir: str | None,
    snippet_suffix: str | None,
    jobs: int | None,
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
    """Run the two-pass extraction over PATHS.

    Exits with ``FAILURE`` when any file had marker defects or I/O errors.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            "files": paths,
            "target_dir": target_dir,
            "snippet_suffix": snippet_suffix,
            "jobs": jobs,
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
    if config.target_dir is None:
        raise SnipmarkUsageError("No target directory: pass --target-dir or set 'target_dir'.")
    if config.target_dir.exists() and not config.target_dir.is_dir():
        raise SnipmarkIOError(f"Target is not a directory: {config.target_dir}")

    files: list[Path] = build_file_list(config)
    target = SnippetTarget(
        config.target_dir, suffix=config.snippet_suffix, encoding=config.encoding
    )
    logger.info("Extracting snippets from %d file(s) into %s", len(files), target.directory)

    results: list[FileResult] = run(files, config, target)

    if not summary_mode:
        for result in results:
            render_file_result(console, result, vlevel=vlevel)
    if summary_mode or vlevel > 0:
        render_summary(console, results)

    ctx.exit(exit_code_for(results))
