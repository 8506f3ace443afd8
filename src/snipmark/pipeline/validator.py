# topmark:header:start
#
#   project      : SnipMark
#   file         : validator.py
#   file_relpath : src/snipmark/pipeline/validator.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tag validator: the first pass of snippet extraction.

The validator makes a single forward pass over a file's lines and checks that
its markers are structurally sound before anything is written:

Start and end markers:
    1. no empty identifiers;
    2. no duplicate start or end identifiers;
    3. every start has exactly one end, on a strictly later line;
    4. every end has a start.

Break and resume markers:
    1. a break follows the start of its region and precedes its end;
    2. breaks of the same region do not nest;
    3. every break is resumed before the end of the file;
    4. a resume follows an open break of its region and precedes its end.

The pass never stops at the first defect: all defects of a file are reported in
one run. A file is valid when it has at least one start marker and no defect.
Validation never touches the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.markers import MarkerKind

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.markers import MarkerOccurrence, MarkerSet
    from snipmark.pipeline.decoders.base import MarkerDecoder

logger: SnipmarkLogger = get_logger(__name__)


class DefectKind(Enum):
    """Structural marker defects detected by the validator."""

    EMPTY_ID = "empty-id"
    DUPLICATE_START = "duplicate-start"
    DUPLICATE_END = "duplicate-end"
    ORPHAN_START = "orphan-start"
    ORPHAN_END = "orphan-end"
    END_BEFORE_START = "end-before-start"
    NESTED_BREAK = "nested-break"
    BREAK_WITHOUT_START = "break-without-start"
    BREAK_AFTER_END = "break-after-end"
    RESUME_WITHOUT_BREAK = "resume-without-break"
    RESUME_AFTER_END = "resume-after-end"
    MISSING_RESUME = "missing-resume"


@dataclass(frozen=True)
class Defect:
    """One structural defect.

    Attributes:
        kind (DefectKind): Defect category.
        marker (MarkerKind): Kind of the offending marker.
        region_id (str): Identifier carried by the offending marker (may be empty).
        line_number (int): 1-based line of the offending marker.
        related_line (int | None): 1-based line of the marker it conflicts with, if any.
    """

    kind: DefectKind
    marker: MarkerKind
    region_id: str
    line_number: int
    related_line: int | None = None

    def describe(self) -> str:
        """Return a human-readable description of the defect."""
        rid: str = self.region_id
        other: int | None = self.related_line
        messages: dict[DefectKind, str] = {
            DefectKind.EMPTY_ID: f"empty {self.marker.value} tag",
            DefectKind.DUPLICATE_START: f"duplicate start tag [{rid}], first seen at line {other}",
            DefectKind.DUPLICATE_END: f"duplicate end tag [{rid}], first seen at line {other}",
            DefectKind.ORPHAN_START: f"orphaned start tag [{rid}] has no end tag",
            DefectKind.ORPHAN_END: f"orphaned end tag [{rid}] has no start tag",
            DefectKind.END_BEFORE_START: (
                f"end tag [{rid}] found before its start tag at line {other}"
            ),
            DefectKind.NESTED_BREAK: (
                f"nested break tag [{rid}], break already open since line {other}"
            ),
            DefectKind.BREAK_WITHOUT_START: f"break tag [{rid}] has no start tag before it",
            DefectKind.BREAK_AFTER_END: f"break tag [{rid}] follows its end tag at line {other}",
            DefectKind.RESUME_WITHOUT_BREAK: f"resume tag [{rid}] has no open break tag",
            DefectKind.RESUME_AFTER_END: (
                f"resume tag [{rid}] follows its end tag at line {other}"
            ),
            DefectKind.MISSING_RESUME: f"break tag [{rid}] is never resumed",
        }
        return messages[self.kind]


@dataclass
class ValidationState:
    """Marker bookkeeping for one validation pass.

    Attributes:
        starts (dict[str, int]): Region id to line of its (first) start marker.
        ends (dict[str, int]): Region id to line of its (first) end marker.
        open_breaks (dict[str, int]): Regions interrupted by a break not yet resumed.
        tag_count (int): Number of start markers seen.
        defects (list[Defect]): Defects in detection order.
    """

    starts: dict[str, int] = field(default_factory=lambda: {})
    ends: dict[str, int] = field(default_factory=lambda: {})
    open_breaks: dict[str, int] = field(default_factory=lambda: {})
    tag_count: int = 0
    defects: list[Defect] = field(default_factory=lambda: [])


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one file."""

    path: Path | None
    defects: tuple[Defect, ...]
    tag_count: int

    @property
    def has_markers(self) -> bool:
        """Whether the file contains at least one start marker."""
        return self.tag_count > 0

    @property
    def valid(self) -> bool:
        """Whether the file may be extracted."""
        return self.has_markers and not self.defects


class TagValidator:
    """Single-pass structural validator for one file.

    Instances are cheap and disposable; each call to [`validate`][] starts from a
    fresh [`ValidationState`][snipmark.pipeline.validator.ValidationState].
    """

    def __init__(
        self,
        decoder: MarkerDecoder,
        markers: MarkerSet,
        *,
        path: Path | None = None,
    ) -> None:
        self.decoder = decoder
        self.markers = markers
        self.path = path

    def validate(self, lines: Iterable[str]) -> ValidationResult:
        """Validate the markers of a whole file.

        Args:
            lines (Iterable[str]): The file's lines, in order (line endings are ignored).

        Returns:
            ValidationResult: All defects found plus the start-marker count.
        """
        state = ValidationState()
        for line_number, raw in enumerate(lines, start=1):
            line: str = raw.rstrip("\r\n")
            for occurrence in self.decoder.scan_line(line, line_number, self.markers):
                self._check(occurrence, state)

        self._check_unresumed_breaks(state)
        self._check_pairs(state)

        if state.starts:
            logger.debug("Start tags in %s: %s", self.path, list(state.starts))
        if state.ends:
            logger.debug("End tags in %s: %s", self.path, list(state.ends))
        if state.tag_count == 0:
            logger.debug("No start tags in %s", self.path)

        return ValidationResult(
            path=self.path,
            defects=tuple(state.defects),
            tag_count=state.tag_count,
        )

    # ---- Per-marker checks ---------------------------------------------------

    def _check(self, occ: MarkerOccurrence, state: ValidationState) -> None:
        logger.trace("Found %s tag [%s] at line %d", occ.kind.value, occ.region_id, occ.line_number)
        if occ.kind is MarkerKind.START:
            state.tag_count += 1
        if not occ.region_id:
            self._report(state, Defect(DefectKind.EMPTY_ID, occ.kind, "", occ.line_number))

        if occ.kind is MarkerKind.END:
            self._on_end(occ, state)
        elif occ.kind is MarkerKind.START:
            self._on_start(occ, state)
        elif occ.kind is MarkerKind.BREAK:
            self._on_break(occ, state)
        else:
            self._on_resume(occ, state)

    def _on_end(self, occ: MarkerOccurrence, state: ValidationState) -> None:
        rid: str = occ.region_id
        if rid in state.ends:
            self._report(
                state,
                Defect(DefectKind.DUPLICATE_END, occ.kind, rid, occ.line_number, state.ends[rid]),
            )
            return
        state.ends[rid] = occ.line_number

    def _on_start(self, occ: MarkerOccurrence, state: ValidationState) -> None:
        rid: str = occ.region_id
        if rid in state.starts:
            self._report(
                state,
                Defect(
                    DefectKind.DUPLICATE_START, occ.kind, rid, occ.line_number, state.starts[rid]
                ),
            )
            return
        state.starts[rid] = occ.line_number

    def _on_break(self, occ: MarkerOccurrence, state: ValidationState) -> None:
        rid: str = occ.region_id
        if rid in state.open_breaks:
            self._report(
                state,
                Defect(
                    DefectKind.NESTED_BREAK, occ.kind, rid, occ.line_number, state.open_breaks[rid]
                ),
            )
        if rid not in state.starts:
            self._report(
                state, Defect(DefectKind.BREAK_WITHOUT_START, occ.kind, rid, occ.line_number)
            )
        if rid in state.ends:
            self._report(
                state,
                Defect(DefectKind.BREAK_AFTER_END, occ.kind, rid, occ.line_number, state.ends[rid]),
            )
        state.open_breaks.setdefault(rid, occ.line_number)

    def _on_resume(self, occ: MarkerOccurrence, state: ValidationState) -> None:
        rid: str = occ.region_id
        if rid not in state.open_breaks:
            self._report(
                state, Defect(DefectKind.RESUME_WITHOUT_BREAK, occ.kind, rid, occ.line_number)
            )
        if rid in state.ends:
            self._report(
                state,
                Defect(
                    DefectKind.RESUME_AFTER_END, occ.kind, rid, occ.line_number, state.ends[rid]
                ),
            )
        state.open_breaks.pop(rid, None)

    # ---- End-of-file checks --------------------------------------------------

    def _check_unresumed_breaks(self, state: ValidationState) -> None:
        for rid, line_number in sorted(state.open_breaks.items(), key=lambda item: item[1]):
            self._report(
                state, Defect(DefectKind.MISSING_RESUME, MarkerKind.BREAK, rid, line_number)
            )

    def _check_pairs(self, state: ValidationState) -> None:
        unmatched_ends: dict[str, int] = dict(state.ends)
        for rid, start_line in state.starts.items():
            end_line: int | None = unmatched_ends.pop(rid, None)
            if end_line is None:
                self._report(
                    state, Defect(DefectKind.ORPHAN_START, MarkerKind.START, rid, start_line)
                )
            elif end_line <= start_line:
                self._report(
                    state,
                    Defect(DefectKind.END_BEFORE_START, MarkerKind.END, rid, end_line, start_line),
                )
        for rid, end_line in sorted(unmatched_ends.items(), key=lambda item: item[1]):
            self._report(state, Defect(DefectKind.ORPHAN_END, MarkerKind.END, rid, end_line))

    def _report(self, state: ValidationState, defect: Defect) -> None:
        state.defects.append(defect)
        logger.error(
            "%s:%d: [%s] %s. File will not be parsed and some code parts may not appear "
            "in the final document.",
            self.path,
            defect.line_number,
            defect.kind.value,
            defect.describe(),
        )
