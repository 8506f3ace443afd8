# topmark:header:start
#
#   project      : SnipMark
#   file         : normalizer.py
#   file_relpath : src/snipmark/pipeline/normalizer.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Indent normalizer: turn a raw region file into its final snippet.

Every line loses the same number of leading whitespace characters, the minimum
indentation observed for the region during extraction. Lines indented less
than that (e.g. a captured header) lose only the whitespace they have.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Final

from snipmark.config.logging import get_logger
from snipmark.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.diagnostic import DiagnosticLog

logger: SnipmarkLogger = get_logger(__name__)

# Minimum indentation of a region that has not received any line yet.
UNBOUNDED_INDENT: Final[int] = sys.maxsize


def leading_whitespace_width(line: str) -> int:
    """Return the number of leading whitespace characters of ``line``."""
    return len(line) - len(line.lstrip())


def dedent_line(line: str, width: int) -> str:
    """Remove up to ``width`` leading whitespace characters and all trailing whitespace."""
    strip: int = min(width, leading_whitespace_width(line))
    return line[strip:].rstrip()


def dedent_lines(lines: Iterable[str], width: int) -> list[str]:
    """Dedent every line of ``lines`` by ``width`` (see [`dedent_line`][])."""
    if width == UNBOUNDED_INDENT:
        width = 0
    return [dedent_line(line.rstrip("\r\n"), width) for line in lines]


def normalize_snippet(
    raw_path: Path,
    snippet_path: Path,
    min_indent: int,
    *,
    encoding: str = DEFAULT_ENCODING,
    diagnostics: DiagnosticLog | None = None,
) -> Path:
    """Write the dedented snippet and delete the raw intermediate.

    Args:
        raw_path (Path): Raw region file written by the extraction engine.
        snippet_path (Path): Destination of the normalized snippet.
        min_indent (int): Number of leading whitespace characters to strip.
        encoding (str): Encoding of both files.
        diagnostics (DiagnosticLog | None): Receives a failure to delete ``raw_path``.

    Returns:
        Path: ``snippet_path``.

    Raises:
        OSError: If the raw file cannot be read or the snippet cannot be written.
    """
    logger.debug(
        "Input file: %s output file: %s to remove: %s",
        raw_path,
        snippet_path,
        "all" if min_indent == UNBOUNDED_INDENT else min_indent,
    )
    with raw_path.open(encoding=encoding) as src:
        lines: list[str] = dedent_lines(src, min_indent)
    with snippet_path.open("w", encoding=encoding, newline="\n") as dst:
        for line in lines:
            dst.write(line + "\n")

    try:
        raw_path.unlink()
    except OSError as exc:
        logger.error("Temporary file %s could not be deleted: %s", raw_path, exc)
        if diagnostics is not None:
            diagnostics.add_error(f"Temporary file {raw_path} could not be deleted: {exc}")
    return snippet_path
