# topmark:header:start
#
#   project      : SnipMark
#   file         : extractor.py
#   file_relpath : src/snipmark/pipeline/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Extraction engine: the second pass of snippet extraction.

The engine streams a file that already passed validation and multiplexes each
line into every region open at that point. Per line, in order:

1. the decoder captures side context (markup declaration, preamble);
2. an End marker closes its region; the line goes nowhere else;
3. otherwise, a line carrying no marker at all is appended (tabs expanded) to
   every open region outside an exclusion window, and lowers that region's
   minimum indentation;
4. a Start marker claims the region's raw file in the target directory, unless
   an earlier writer already produced it;
5. a Break marker opens the region's exclusion window;
6. a Resume marker closes it.

The engine only writes raw files;
[`normalize_snippet`][snipmark.pipeline.normalizer.normalize_snippet] turns them
into snippets once the whole pass succeeded.
"""

from __future__ import annotations

from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.constants import DEFAULT_TAB_SIZE
from snipmark.markers import MarkerKind
from snipmark.pipeline.decoders.base import CapturedContext
from snipmark.pipeline.normalizer import UNBOUNDED_INDENT, leading_whitespace_width
from snipmark.pipeline.target import InvalidRegionIdError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from pathlib import Path
    from typing import TextIO

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.diagnostic import DiagnosticLog
    from snipmark.markers import MarkerOccurrence, MarkerSet
    from snipmark.pipeline.decoders.base import MarkerDecoder
    from snipmark.pipeline.target import SnippetTarget

logger: SnipmarkLogger = get_logger(__name__)


@dataclass
class OpenRegion:
    """A region between its Start and End markers."""

    region_id: str
    raw_path: Path
    writer: TextIO
    min_indent: int = UNBOUNDED_INDENT
    excluded: bool = False
    line_count: int = 0


@dataclass(frozen=True)
class ClosedRegion:
    """A region whose raw file is complete and awaits normalization."""

    region_id: str
    raw_path: Path
    min_indent: int
    line_count: int


@dataclass
class ExtractionState:
    """Routing state for one extraction pass.

    Attributes:
        open_regions (dict[str, OpenRegion]): Regions currently receiving lines.
        skipped (set[str]): Open regions whose output already existed (or could
            not be created); their markers are ignored until their End.
        skipped_ids (list[str]): Every region id skipped in this pass, in Start order.
        closed (list[ClosedRegion]): Completed regions, in End order.
        capture (CapturedContext): Decoder side capture.
    """

    open_regions: dict[str, OpenRegion] = field(default_factory=lambda: {})
    skipped: set[str] = field(default_factory=lambda: set())
    skipped_ids: list[str] = field(default_factory=lambda: [])
    closed: list[ClosedRegion] = field(default_factory=lambda: [])
    capture: CapturedContext = field(default_factory=CapturedContext)


@dataclass(frozen=True)
class ExtractionResult:
    """Raw regions produced by one pass, plus the region ids that were skipped."""

    closed: tuple[ClosedRegion, ...]
    skipped: tuple[str, ...]


class ExtractionEngine:
    """Multiplex the lines of one validated file into per-region raw files.

    Args:
        decoder (MarkerDecoder): Decoder bound to the file's type.
        markers (MarkerSet): Marker strings of the run.
        target (SnippetTarget): Directory receiving the raw files.
        path (Path | None): Source path, for diagnostics.
        tab_size (int): Number of spaces replacing each tab character.
        extra_markers (Sequence[str]): Foreign markers; lines carrying them are not copied.
        diagnostics (DiagnosticLog | None): Receives collisions and region I/O failures.
    """

    def __init__(
        self,
        decoder: MarkerDecoder,
        markers: MarkerSet,
        target: SnippetTarget,
        *,
        path: Path | None = None,
        tab_size: int = DEFAULT_TAB_SIZE,
        extra_markers: Sequence[str] = (),
        diagnostics: DiagnosticLog | None = None,
    ) -> None:
        self.decoder = decoder
        self.markers = markers
        self.target = target
        self.path = path
        self.tab_substitute = " " * tab_size
        self.extra_markers = tuple(extra_markers)
        self.diagnostics = diagnostics

    def extract(self, lines: Iterable[str]) -> ExtractionResult:
        """Run the extraction pass over ``lines``.

        Must only be called for a file whose validation succeeded. On any
        exception every raw file created by this pass is removed before the
        exception propagates, so a failed file leaves no partial output.

        Args:
            lines (Iterable[str]): The file's lines, in order.

        Returns:
            ExtractionResult: Closed regions awaiting normalization and skipped ids.
        """
        state = ExtractionState()
        try:
            with ExitStack() as stack:
                for line_number, raw in enumerate(lines, start=1):
                    self._process_line(raw.rstrip("\r\n"), line_number, state, stack)
                for region_id in list(state.open_regions):
                    logger.warning(
                        "%s: region [%s] still open at end of file", self.path, region_id
                    )
                    self._close_region(region_id, state)
        except Exception:
            self._discard(state)
            raise
        return ExtractionResult(closed=tuple(state.closed), skipped=tuple(state.skipped_ids))

    # ---- Per-line processing -------------------------------------------------

    def _process_line(
        self, line: str, line_number: int, state: ExtractionState, stack: ExitStack
    ) -> None:
        self.decoder.capture_context(line, state.capture, self.markers, self.extra_markers)

        found: dict[MarkerKind, MarkerOccurrence] = {
            occ.kind: occ for occ in self.decoder.scan_line(line, line_number, self.markers)
        }

        end = found.get(MarkerKind.END)
        if end is not None:
            if end.region_id in state.open_regions:
                self._close_region(end.region_id, state)
            state.skipped.discard(end.region_id)
        elif state.open_regions and not self.decoder.is_marker_line(
            line, self.markers, self.extra_markers
        ):
            self._route(line, state)

        start = found.get(MarkerKind.START)
        if start is not None:
            state.capture.started = True
            self._open_region(start, state, stack)

        brk = found.get(MarkerKind.BREAK)
        if brk is not None:
            self._set_excluded(brk.region_id, True, state)

        resume = found.get(MarkerKind.RESUME)
        if resume is not None:
            self._set_excluded(resume.region_id, False, state)

    def _route(self, line: str, state: ExtractionState) -> None:
        width: int = leading_whitespace_width(line)
        text: str = line.replace("\t", self.tab_substitute)
        for region in list(state.open_regions.values()):
            if region.excluded:
                continue
            region.writer.write(text + "\n")
            region.line_count += 1
            region.min_indent = min(region.min_indent, width)

    # ---- Region lifecycle ----------------------------------------------------

    def _open_region(
        self, start: MarkerOccurrence, state: ExtractionState, stack: ExitStack
    ) -> None:
        region_id: str = start.region_id
        try:
            writer: TextIO | None = self.target.claim(region_id)
        except (OSError, InvalidRegionIdError) as exc:
            logger.error(
                "%s:%d: file [%s] could not be created: %s",
                self.path,
                start.line_number,
                region_id,
                exc,
            )
            if self.diagnostics is not None:
                self.diagnostics.add_error(
                    f"line {start.line_number}: snippet [{region_id}] could not be created: {exc}"
                )
            state.skipped.add(region_id)
            state.skipped_ids.append(region_id)
            return

        if writer is None:
            logger.warning(
                "File %s already exists and it will NOT be overwritten. Either the directory "
                "has not been emptied or there are global duplicate tags. The tag [%s] has "
                "been read from file %s",
                self.target.snippet_path(region_id),
                region_id,
                self.path,
            )
            if self.diagnostics is not None:
                self.diagnostics.add_warning(
                    f"line {start.line_number}: snippet [{region_id}] already exists; skipped"
                )
            state.skipped.add(region_id)
            state.skipped_ids.append(region_id)
            return

        stack.enter_context(writer)
        region = OpenRegion(
            region_id=region_id, raw_path=self.target.raw_path(region_id), writer=writer
        )
        state.open_regions[region_id] = region

        if start.has_header and state.capture.header_line is not None:
            writer.write(state.capture.header_line + "\n")
        if start.has_copyright:
            for preamble_line in state.capture.preamble:
                writer.write(preamble_line + "\n")
        logger.info("File [%s] created.", region_id)

    def _close_region(self, region_id: str, state: ExtractionState) -> None:
        region: OpenRegion = state.open_regions.pop(region_id)
        region.writer.flush()
        region.writer.close()
        state.closed.append(
            ClosedRegion(
                region_id=region_id,
                raw_path=region.raw_path,
                min_indent=region.min_indent,
                line_count=region.line_count,
            )
        )
        logger.debug("Closed region [%s]; regions left: %s", region_id, list(state.open_regions))

    def _set_excluded(self, region_id: str, excluded: bool, state: ExtractionState) -> None:
        region: OpenRegion | None = state.open_regions.get(region_id)
        if region is not None:
            region.excluded = excluded
        elif region_id not in state.skipped:
            logger.warning("%s: exclusion marker for unknown region [%s]", self.path, region_id)

    def _discard(self, state: ExtractionState) -> None:
        raw_paths: list[Path] = [r.raw_path for r in state.open_regions.values()]
        raw_paths.extend(r.raw_path for r in state.closed)
        for raw_path in raw_paths:
            try:
                raw_path.unlink(missing_ok=True)
            except OSError as exc:
                logger.error("Temporary file %s could not be deleted: %s", raw_path, exc)
        state.open_regions.clear()
        state.closed.clear()
