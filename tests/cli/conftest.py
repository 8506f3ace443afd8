# topmark:header:start
#
#   project      : SnipMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Fixtures for CLI tests.

The group command reconfigures the root logger on every invocation, binding its
handler to the runner's temporary stderr; the session logging is restored after
each test.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import cast

import click
import pytest
from click.testing import CliRunner, Result

from snipmark.cli.main import cli as _cli
from snipmark.config import logging

cli = cast("click.Command", _cli)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Re-install the session logging configuration after the test."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(*args: str) -> Result:
    """Invoke the CLI with ``args`` and colors disabled."""
    return CliRunner().invoke(cli, ["--no-color", *args])
