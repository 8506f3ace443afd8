# topmark:header:start
#
#   project      : SnipMark
#   file         : markers.py
#   file_relpath : src/snipmark/markers.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker vocabulary shared by the validator, the extraction engine and the decoders.

A *marker* is a literal substring embedded in a source line that names a region:
``@snippet-start foo`` opens region ``foo``, ``@snippet-end foo`` closes it, and
``@snippet-break foo`` / ``@snippet-resume foo`` delimit an exclusion window inside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from snipmark.constants import (
    COPYRIGHT_VARIANT_SUFFIX,
    DEFAULT_BREAK_MARKER,
    DEFAULT_END_MARKER,
    DEFAULT_RESUME_MARKER,
    DEFAULT_START_MARKER,
    HEADER_VARIANT_SUFFIX,
)

if TYPE_CHECKING:
    from collections.abc import Iterator


class MarkerKind(Enum):
    """The four structural marker kinds."""

    START = "start"
    END = "end"
    BREAK = "break"
    RESUME = "resume"


@dataclass(frozen=True)
class MarkerSet:
    """The marker strings recognized in one run.

    Attributes:
        start_marker (str): Opens a region.
        end_marker (str): Closes a region.
        break_marker (str | None): Starts an exclusion window; ``None`` disables windows.
        resume_marker (str | None): Ends an exclusion window; ``None`` disables windows.
    """

    start_marker: str = DEFAULT_START_MARKER
    end_marker: str = DEFAULT_END_MARKER
    break_marker: str | None = DEFAULT_BREAK_MARKER
    resume_marker: str | None = DEFAULT_RESUME_MARKER

    def __post_init__(self) -> None:
        if not self.start_marker or not self.end_marker:
            raise ValueError("start and end markers must be non-empty strings")
        if (self.break_marker is None) != (self.resume_marker is None):
            raise ValueError("break and resume markers must be set (or unset) together")
        if self.break_marker == "" or self.resume_marker == "":
            raise ValueError("break and resume markers must not be empty strings")

    @property
    def header_start_marker(self) -> str:
        """Start marker variant requesting the captured markup declaration."""
        return self.start_marker + HEADER_VARIANT_SUFFIX

    @property
    def copyright_start_marker(self) -> str:
        """Start marker variant requesting the captured preamble block."""
        return self.start_marker + COPYRIGHT_VARIANT_SUFFIX

    def for_kind(self, kind: MarkerKind) -> str | None:
        """Return the marker string configured for ``kind``."""
        return {
            MarkerKind.START: self.start_marker,
            MarkerKind.END: self.end_marker,
            MarkerKind.BREAK: self.break_marker,
            MarkerKind.RESUME: self.resume_marker,
        }[kind]

    def iter_markers(self) -> Iterator[tuple[MarkerKind, str]]:
        """Yield ``(kind, marker)`` for every configured marker."""
        for kind in MarkerKind:
            marker = self.for_kind(kind)
            if marker is not None:
                yield kind, marker


@dataclass(frozen=True)
class StartMarker:
    """A decoded Start marker with its variant flags."""

    region_id: str
    has_header: bool = False
    has_copyright: bool = False


@dataclass(frozen=True)
class MarkerOccurrence:
    """One marker found on one line (1-based ``line_number``)."""

    kind: MarkerKind
    region_id: str
    line_number: int
    has_header: bool = False
    has_copyright: bool = False
