# topmark:header:start
#
#   project      : SnipMark
#   file         : init_config.py
#   file_relpath : src/snipmark/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark `init-config` command.

Prints a starter configuration with the default markers and settings, either
as a standalone ``snipmark.toml`` or as a ``[tool.snipmark]`` table.
"""

from __future__ import annotations

import click

from snipmark.cli.cmd_common import get_console, get_effective_verbosity
from snipmark.config.loaders import config_to_toml
from snipmark.config.model import MutableConfig


@click.command(
    name="init-config",
    help="Display an initial SnipMark configuration file.",
)
@click.option(
    "--pyproject",
    "for_pyproject",
    is_flag=True,
    help="Render the configuration as a [tool.snipmark] table for pyproject.toml.",
)
def init_config_command(*, for_pyproject: bool = False) -> None:
    """Print a starter config file to stdout."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    text: str = config_to_toml(MutableConfig.from_defaults().freeze(), for_pyproject=for_pyproject)

    if vlevel > 0:
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
    console.print(text, nl=not text.endswith("\n"))
    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
