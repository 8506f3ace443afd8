# topmark:header:start
#
#   project      : SnipMark
#   file         : base.py
#   file_relpath : src/snipmark/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""File type definitions for SnipMark.

Defines the `FileType` class, which describes how SnipMark recognizes a source
file on disk and which marker decoding capabilities apply to it. The comment
syntax itself lives in the marker decoder registered for the file type (see
[`snipmark.filetypes.registry`][]).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from snipmark.config.logging import SnipmarkLogger, get_logger

if TYPE_CHECKING:
    from pathlib import Path

logger: SnipmarkLogger = get_logger(__name__)


class DecoderVariant(Enum):
    """Start-marker variants a file type honors.

    Attributes:
        PLAIN: Only the bare start marker is recognized; no side capture.
        MARKUP_WITH_HEADER: ``<start>-with-header`` copies the markup declaration
            (e.g. ``<?xml version="1.0"?>``) seen before the first region into the snippet.
        CODE_WITH_COPYRIGHT: ``<start>-with-copyright`` copies the preamble (the
            lines before the first structural declaration) into the snippet.
    """

    PLAIN = "plain"
    MARKUP_WITH_HEADER = "markup-with-header"
    CODE_WITH_COPYRIGHT = "code-with-copyright"


@dataclass
class FileType:
    r"""Represents a file type recognized by SnipMark.

    Attributes:
        name (str): Internal identifier of the file type (e.g. ``"java"``).
        extensions (list[str]): Filename extensions including the leading dot.
        filenames (list[str]): Exact basenames, or tail subpaths when the value
            contains a path separator (e.g. ``".github/CODEOWNERS"``).
        patterns (list[str]): Regular expressions matched against the basename
            with `re.fullmatch`.
        description (str): Human-readable description of the file type.
        variant (DecoderVariant): Start-marker variants honored for this type.
        preamble_end_regex (str | None): For `DecoderVariant.CODE_WITH_COPYRIGHT`,
            the first line matching this regex ends the preamble block
            (e.g. ``r"^\s*package\b"`` for Java).
    """

    name: str
    extensions: list[str]
    filenames: list[str]
    patterns: list[str]
    description: str
    variant: DecoderVariant = DecoderVariant.PLAIN
    preamble_end_regex: str | None = None

    _compiled_patterns: list[re.Pattern[str]] | None = field(default=None, repr=False)
    _compiled_preamble_end: re.Pattern[str] | None = field(default=None, repr=False)
    _preamble_end_invalid: bool = field(default=False, repr=False)

    def matches(self, path: Path) -> bool:
        """Determine if the file type matches the given file path.

        Args:
            path (Path): The path to the file to check.

        Returns:
            bool: True if the file matches this file type, False otherwise.
        """
        if self.extensions and path.suffix in self.extensions:
            return True

        if self.filenames:
            basename: str = path.name
            posix: str = path.as_posix()
            for fname in self.filenames:
                if "/" in fname or "\\" in fname:
                    if posix.endswith(fname):
                        return True
                elif basename == fname:
                    return True

        if self.patterns:
            if self._compiled_patterns is None:
                try:
                    self._compiled_patterns = [re.compile(p) for p in self.patterns]
                except re.error:
                    logger.warning("Invalid filename pattern for file type '%s'", self.name)
                    self._compiled_patterns = []
            return any(regex.fullmatch(path.name) for regex in self._compiled_patterns)

        return False

    def ends_preamble(self, line: str) -> bool:
        """Return True if ``line`` is the structural declaration closing the preamble.

        An invalid ``preamble_end_regex`` is reported once; the preamble then
        never ends.
        """
        if self.preamble_end_regex is None or self._preamble_end_invalid:
            return False
        if self._compiled_preamble_end is None:
            try:
                self._compiled_preamble_end = re.compile(self.preamble_end_regex)
            except re.error as exc:
                logger.warning(
                    "Invalid preamble end pattern for file type '%s': %s", self.name, exc
                )
                self._preamble_end_invalid = True
                return False
        return bool(self._compiled_preamble_end.search(line))
