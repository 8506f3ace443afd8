# topmark:header:start
#
#   project      : SnipMark
#   file         : main.py
#   file_relpath : src/snipmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark CLI entry point.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from snipmark.cli.commands.check import check_command
from snipmark.cli.commands.extract import extract_command
from snipmark.cli.commands.filetypes import filetypes_command
from snipmark.cli.commands.init_config import init_config_command
from snipmark.cli.commands.version import version_command
from snipmark.cli.console import ClickConsole
from snipmark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from snipmark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    ``SNIPMARK_LOG_LEVEL`` overrides the level derived from ``-v``/``-q``.
    """
    ctx.ensure_object(dict)

    level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = -1 if quiet else verbose
    log_level: int = resolve_env_log_level() or level
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    mode: ColorMode | None = ColorMode(color_mode) if color_mode else None
    if no_color:
        mode = ColorMode.NEVER
    enable_color: bool = resolve_color_mode(cli_mode=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SnipMark: extract tagged source regions into snippet files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the SnipMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'snipmark extract -t DIR [PATHS...]' to extract snippets.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(init_config_command)

cli.add_command(check_command)

cli.add_command(extract_command)

cli.add_command(filetypes_command)

if __name__ == "__main__":
    cli()
