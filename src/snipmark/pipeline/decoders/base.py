# topmark:header:start
#
#   project      : SnipMark
#   file         : base.py
#   file_relpath : src/snipmark/pipeline/decoders/base.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder base module.

A *marker decoder* knows how to read a region identifier out of a source line
for one concrete [`FileType`][snipmark.filetypes.base.FileType]. The registry
binds a decoder instance to a file type at registration time
(``decoder.file_type = ft``); the file type's
[`DecoderVariant`][snipmark.filetypes.base.DecoderVariant] decides which
start-marker variants the decoder honors and which context it captures.

Identifier syntax:
    The identifier is the first whitespace-delimited token following the
    marker. A comment closer of the decoder's syntax (``-->``, ``*/``) is
    dropped first, so ``<!-- @snippet-start foo-->`` and
    ``/* @snippet-end foo */`` both yield ``foo``.

What this class does **not** do:
    Marker pairing and nesting rules belong to the validator; routing lines to
    regions belongs to the extraction engine. Decoders are stateless; per-file
    capture state lives in a [`CapturedContext`][snipmark.pipeline.decoders.base.CapturedContext].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.filetypes.base import DecoderVariant
from snipmark.markers import MarkerKind, MarkerOccurrence, StartMarker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.filetypes.base import FileType
    from snipmark.markers import MarkerSet

logger: SnipmarkLogger = get_logger(__name__)

XML_DECLARATION_OPENER: str = "<?xml"


@dataclass
class CapturedContext:
    """Per-file side capture fed by [`MarkerDecoder.capture_context`][].

    Attributes:
        header_line (str | None): Markup declaration seen before the first region.
        preamble (list[str]): Lines preceding the first structural declaration.
        started (bool): Whether a Start marker has been seen in this file.
        preamble_closed (bool): Whether the structural declaration has been seen.
    """

    header_line: str | None = None
    preamble: list[str] = field(default_factory=lambda: [])
    started: bool = False
    preamble_closed: bool = False


class MarkerDecoder:
    """Base class for marker decoders that handle specific comment syntaxes.

    Subclasses set the comment delimiters of their family; the delimiters are
    only used to recognize comment closers trailing an identifier.
    """

    file_type: FileType | None = None

    block_prefix: str = ""
    block_suffix: str = ""
    line_prefix: str = ""
    line_suffix: str = ""

    def __init__(self) -> None:
        self.file_type = None

    @property
    def variant(self) -> DecoderVariant:
        """Start-marker variant honored for the bound file type."""
        if self.file_type is None:
            return DecoderVariant.PLAIN
        return self.file_type.variant

    @property
    def comment_closers(self) -> tuple[str, ...]:
        """Comment closers that may trail an identifier on a marker line."""
        return tuple(s for s in (self.block_suffix, self.line_suffix) if s)

    # ---- Identifier decoding -------------------------------------------------

    def decode(self, line: str, marker: str) -> str | None:
        """Return the identifier following ``marker`` in ``line``.

        Args:
            line (str): A source line.
            marker (str): The literal marker string to look for.

        Returns:
            str | None: ``None`` when the marker is absent, otherwise the identifier,
                which is ``""`` when the marker carries no identifier.
        """
        idx: int = line.find(marker)
        if idx < 0:
            return None
        return self.extract_identifier(line[idx + len(marker) :])

    def extract_identifier(self, remainder: str) -> str:
        """Return the identifier at the start of the text following a marker."""
        text: str = remainder.strip()
        for closer in self.comment_closers:
            pos: int = text.find(closer)
            if pos >= 0:
                text = text[:pos]
        tokens: list[str] = text.split()
        return tokens[0] if tokens else ""

    def decode_start(self, line: str, markers: MarkerSet) -> StartMarker | None:
        """Decode a Start marker, detecting the variants this decoder honors.

        Variant suffixes are only recognized for the matching
        [`DecoderVariant`][snipmark.filetypes.base.DecoderVariant]; elsewhere a
        ``-with-header`` suffix is read as part of the identifier.
        """
        if markers.start_marker not in line:
            return None
        if (
            self.variant is DecoderVariant.MARKUP_WITH_HEADER
            and markers.header_start_marker in line
        ):
            region_id = self.decode(line, markers.header_start_marker) or ""
            return StartMarker(region_id, has_header=True)
        if (
            self.variant is DecoderVariant.CODE_WITH_COPYRIGHT
            and markers.copyright_start_marker in line
        ):
            region_id = self.decode(line, markers.copyright_start_marker) or ""
            return StartMarker(region_id, has_copyright=True)
        return StartMarker(self.decode(line, markers.start_marker) or "")

    def scan_line(self, line: str, line_number: int, markers: MarkerSet) -> list[MarkerOccurrence]:
        """Return the markers found on ``line`` in processing order.

        At most one occurrence per kind is reported, ordered End, Start, Break,
        Resume: a line closing one region and opening another is handled as a
        close followed by an open.
        """
        found: list[MarkerOccurrence] = []

        end_id = self.decode(line, markers.end_marker)
        if end_id is not None:
            found.append(MarkerOccurrence(MarkerKind.END, end_id, line_number))

        start = self.decode_start(line, markers)
        if start is not None:
            found.append(
                MarkerOccurrence(
                    MarkerKind.START,
                    start.region_id,
                    line_number,
                    has_header=start.has_header,
                    has_copyright=start.has_copyright,
                )
            )

        window_markers: tuple[tuple[MarkerKind, str | None], ...] = (
            (MarkerKind.BREAK, markers.break_marker),
            (MarkerKind.RESUME, markers.resume_marker),
        )
        for kind, marker in window_markers:
            if marker is None:
                continue
            region_id = self.decode(line, marker)
            if region_id is not None:
                found.append(MarkerOccurrence(kind, region_id, line_number))

        if found:
            logger.trace("Line %d markers: %s", line_number, found)
        return found

    # ---- Line classification -------------------------------------------------

    def is_marker_line(
        self, line: str, markers: MarkerSet, extra_markers: Sequence[str] = ()
    ) -> bool:
        """Return True if ``line`` carries any marker, including foreign ``extra_markers``."""
        if any(marker in line for _, marker in markers.iter_markers()):
            return True
        return any(marker in line for marker in extra_markers)

    # ---- Side capture --------------------------------------------------------

    def capture_context(
        self,
        line: str,
        capture: CapturedContext,
        markers: MarkerSet,
        extra_markers: Sequence[str] = (),
    ) -> None:
        """Feed ``line`` to the variant-specific side capture.

        * Markup: remember the XML declaration seen before the first region.
        * Code: accumulate non-marker lines until the structural declaration
          (see [`FileType.ends_preamble`][snipmark.filetypes.base.FileType.ends_preamble]).
        """
        variant = self.variant
        if variant is DecoderVariant.MARKUP_WITH_HEADER:
            if not capture.started and XML_DECLARATION_OPENER in line:
                capture.header_line = line
        elif variant is DecoderVariant.CODE_WITH_COPYRIGHT:
            if self.file_type is not None and self.file_type.ends_preamble(line):
                capture.preamble_closed = True
            if not capture.preamble_closed and not self.is_marker_line(
                line, markers, extra_markers
            ):
                capture.preamble.append(line)
