# topmark:header:start
#
#   project      : SnipMark
#   file         : version.py
#   file_relpath : src/snipmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark `version` command."""

from __future__ import annotations

import click

from snipmark.cli.cmd_common import get_console, get_effective_verbosity
from snipmark.constants import SNIPMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of SnipMark.",
)
def version_command() -> None:
    """Print the SnipMark version as installed in the current environment."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("SnipMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(SNIPMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(SNIPMARK_VERSION, bold=True))
