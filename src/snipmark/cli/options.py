# topmark:header:start
#
#   project      : SnipMark
#   file         : options.py
#   file_relpath : src/snipmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Reusable Click options and option-resolution helpers for SnipMark commands."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from snipmark.cli.errors import SnipmarkUsageError
from snipmark.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Three or more ``-v`` select TRACE, two DEBUG, one INFO; any ``-q`` selects
    ERROR. The default is WARNING, so snippet collisions stay visible.

    Raises:
        SnipmarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SnipmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat for more detail (up to -vvv).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color``, then the ``FORCE_COLOR`` and ``NO_COLOR``
    environment variables, and finally whether stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def trap_underscored_option(ctx: click.Context, param: click.Parameter, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., ``--tab_size``)."""
    name = param.name
    if name is None or ctx.get_parameter_source(name) is not ParameterSource.COMMANDLINE:
        return
    bad = param.opts[0] if param.opts else "--?"
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {bad.replace('_', '-')}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings of an option that raise a helpful error.

    The hidden option gets its own destination so its parameter source never
    overlaps with the real option's.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")
    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and snipmark.toml in the working directory.",
    )(f)
    f = underscored_trap_option("--no_config")(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_file_and_filtering_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--include``, ``--exclude`` and ``--file-type`` filters."""
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these gitignore-style patterns.",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these gitignore-style patterns.",
    )(f)
    f = click.option(
        "--file-type",
        "file_types",
        multiple=True,
        help="Filter: restrict to given file types (see 'snipmark filetypes').",
    )(f)
    f = underscored_trap_option("--file_type")(f)
    return f


def common_marker_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the marker strings and line handling."""
    f = click.option("--start-marker", "start_marker", default=None, help="Region start marker.")(f)
    f = click.option("--end-marker", "end_marker", default=None, help="Region end marker.")(f)
    f = click.option(
        "--break-marker", "break_marker", default=None, help="Exclusion window start marker."
    )(f)
    f = click.option(
        "--resume-marker", "resume_marker", default=None, help="Exclusion window end marker."
    )(f)
    f = click.option(
        "--no-window-markers",
        "no_window_markers",
        is_flag=True,
        help="Disable break/resume exclusion windows.",
    )(f)
    f = click.option(
        "--extra-marker",
        "extra_markers",
        multiple=True,
        help="Foreign marker; lines containing it are never copied (repeatable).",
    )(f)
    f = click.option(
        "--tab-size",
        "tab_size",
        type=click.IntRange(min=0),
        default=None,
        help="Number of spaces replacing each tab (default: 4).",
    )(f)
    f = click.option(
        "--encoding", "encoding", default=None, help="Encoding of source files (default: utf-8)."
    )(f)
    f = underscored_trap_option("--tab_size", "--start_marker", "--end_marker")(f)
    return f
