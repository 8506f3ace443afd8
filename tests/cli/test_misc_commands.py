# topmark:header:start
#
#   project      : SnipMark
#   file         : test_misc_commands.py
#   file_relpath : tests/cli/test_misc_commands.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for `filetypes`, `init-config`, `version` and the bare group."""

from __future__ import annotations

from typing import Any

import tomlkit
from click.testing import Result

from snipmark.cli.exit_codes import ExitCode
from snipmark.constants import SNIPMARK_VERSION
from tests.cli.conftest import run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version() -> None:
    """The version is printed on its own line."""
    result: Result = run_cli("version")
    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip() == SNIPMARK_VERSION


@mark_cli
def test_filetypes_lists_decoders() -> None:
    """Each file type is listed with its decoder class."""
    result: Result = run_cli("filetypes")
    assert result.exit_code == ExitCode.SUCCESS
    assert "java" in result.output
    assert "SlashMarkerDecoder" in result.output
    assert "variant" not in result.output


@mark_cli
def test_filetypes_long_shows_variants() -> None:
    """``--long`` adds matching rules and start-marker variants."""
    result: Result = run_cli("filetypes", "--long")
    assert result.exit_code == ExitCode.SUCCESS
    assert "extensions : .java" in result.output
    assert "variant    : code-with-copyright" in result.output
    assert "variant    : markup-with-header" in result.output


@mark_cli
def test_init_config_is_valid_toml() -> None:
    """The starter config parses and holds the default markers."""
    result: Result = run_cli("init-config")
    assert result.exit_code == ExitCode.SUCCESS
    data: dict[str, Any] = tomlkit.parse(result.output).unwrap()
    assert data["markers"]["start"] == "@snippet-start"
    assert data["snippet_suffix"] == ".snip"


@mark_cli
def test_init_config_pyproject() -> None:
    """``--pyproject`` nests the config under ``[tool.snipmark]``."""
    result: Result = run_cli("init-config", "--pyproject")
    data: dict[str, Any] = tomlkit.parse(result.output).unwrap()
    assert data["tool"]["snipmark"]["markers"]["end"] == "@snippet-end"


@mark_cli
def test_bare_group_prints_help() -> None:
    """Running without a subcommand prints a hint and the help."""
    result: Result = run_cli()
    assert result.exit_code == ExitCode.SUCCESS
    assert "snipmark extract -t DIR" in result.output
    assert "Commands:" in result.output
