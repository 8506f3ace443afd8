# topmark:header:start
#
#   project      : SnipMark
#   file         : runner.py
#   file_relpath : src/snipmark/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Per-file orchestration of the validate-then-extract contract.

[`process_file`][snipmark.pipeline.runner.process_file] is the per-file
boundary: structural defects, snippet collisions and I/O failures are all
turned into a [`FileResult`][snipmark.pipeline.runner.FileResult] with a status
and a diagnostic log. Nothing raised while processing one file reaches the
other files of the run.

[`run`][snipmark.pipeline.runner.run] drives many files, sequentially or on a
thread pool; workers share one [`SnippetTarget`][snipmark.pipeline.target.SnippetTarget]
so each region id still has exactly one writer.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.diagnostic import DiagnosticLog
from snipmark.pipeline.decoders import get_decoder_for_file, register_all_decoders
from snipmark.pipeline.extractor import ExtractionEngine
from snipmark.pipeline.normalizer import normalize_snippet
from snipmark.pipeline.validator import TagValidator

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.config.model import Config
    from snipmark.pipeline.decoders.base import MarkerDecoder
    from snipmark.pipeline.extractor import ExtractionResult
    from snipmark.pipeline.target import SnippetTarget
    from snipmark.pipeline.validator import Defect, ValidationResult

logger: SnipmarkLogger = get_logger(__name__)


class FileStatus(Enum):
    """Outcome of processing one source file."""

    EXTRACTED = "extracted"
    VALID = "valid"
    NO_MARKERS = "no markers"
    INVALID = "invalid"
    UNSUPPORTED = "unsupported"
    UNREADABLE = "unreadable"
    FAILED = "failed"

    @property
    def is_error(self) -> bool:
        """Whether this status should fail the run."""
        return self in (FileStatus.INVALID, FileStatus.UNREADABLE, FileStatus.FAILED)


@dataclass
class FileResult:
    """Result of processing one source file.

    Attributes:
        path (Path): The source file.
        status (FileStatus): Outcome of the file.
        file_type (str | None): Name of the resolved file type.
        defects (tuple[Defect, ...]): Structural defects found by the validator.
        snippets (list[Path]): Normalized snippet files written for this file.
        skipped (list[str]): Region ids not written because they already existed.
        diagnostics (DiagnosticLog): Everything worth reporting about this file.
    """

    path: Path
    status: FileStatus = FileStatus.VALID
    file_type: str | None = None
    defects: tuple[Defect, ...] = ()
    snippets: list[Path] = field(default_factory=lambda: [])
    skipped: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @property
    def had_errors(self) -> bool:
        """Whether the file failed or any of its regions could not be produced."""
        return self.status.is_error or self.diagnostics.has_error()


def validate_file(path: Path, decoder: MarkerDecoder, config: Config) -> ValidationResult:
    """Run the validation pass over ``path``.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid text in ``config.encoding``.
    """
    validator = TagValidator(decoder, config.markers, path=path)
    with path.open(encoding=config.encoding) as fh:
        return validator.validate(fh)


def extract_file(
    path: Path,
    decoder: MarkerDecoder,
    config: Config,
    target: SnippetTarget,
    diagnostics: DiagnosticLog,
) -> ExtractionResult:
    """Run the extraction pass over ``path`` (which must be valid).

    Raises:
        OSError: If the file cannot be read or a raw file cannot be written.
        UnicodeDecodeError: If the file is not valid text in ``config.encoding``.
    """
    engine = ExtractionEngine(
        decoder,
        config.markers,
        target,
        path=path,
        tab_size=config.tab_size,
        extra_markers=config.extra_markers,
        diagnostics=diagnostics,
    )
    with path.open(encoding=config.encoding) as fh:
        return engine.extract(fh)


def process_file(path: Path, config: Config, target: SnippetTarget | None = None) -> FileResult:
    """Validate ``path`` and, when ``target`` is given, extract its snippets.

    Args:
        path (Path): Source file.
        config (Config): Run configuration.
        target (SnippetTarget | None): Snippet directory; ``None`` validates only.

    Returns:
        FileResult: The file's outcome. This function does not raise for
            marker defects or I/O failures.
    """
    result = FileResult(path=path)
    decoder: MarkerDecoder | None = get_decoder_for_file(path)
    if decoder is None:
        result.status = FileStatus.UNSUPPORTED
        result.diagnostics.add_info("no marker decoder for this file type")
        return result
    result.file_type = decoder.file_type.name if decoder.file_type else None

    try:
        validation: ValidationResult = validate_file(path, decoder, config)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Extraction error for file %s: %s", path, exc)
        result.status = FileStatus.UNREADABLE
        result.diagnostics.add_error(f"cannot read file: {exc}")
        return result

    result.defects = validation.defects
    for defect in validation.defects:
        result.diagnostics.add_error(
            f"line {defect.line_number}: [{defect.kind.value}] {defect.describe()}"
        )
    if validation.defects:
        result.status = FileStatus.INVALID
        return result
    if not validation.has_markers:
        result.status = FileStatus.NO_MARKERS
        return result
    if target is None:
        result.status = FileStatus.VALID
        return result

    logger.debug("File is valid, trying to extract: %s", path)
    try:
        extraction: ExtractionResult = extract_file(
            path, decoder, config, target, result.diagnostics
        )
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Extraction error for file %s: %s", path, exc)
        result.status = FileStatus.FAILED
        result.diagnostics.add_error(f"extraction failed: {exc}")
        return result

    result.skipped = list(extraction.skipped)
    for region in extraction.closed:
        try:
            snippet: Path = normalize_snippet(
                region.raw_path,
                target.snippet_path(region.region_id),
                region.min_indent,
                encoding=target.encoding,
                diagnostics=result.diagnostics,
            )
        except OSError as exc:
            logger.error("Snippet [%s] could not be formatted: %s", region.region_id, exc)
            result.diagnostics.add_error(
                f"snippet [{region.region_id}] could not be formatted: {exc}"
            )
            continue
        result.snippets.append(snippet)

    result.status = FileStatus.EXTRACTED
    return result


def run(
    files: Sequence[Path],
    config: Config,
    target: SnippetTarget | None = None,
) -> list[FileResult]:
    """Process ``files`` and return their results in input order.

    With ``config.jobs > 1`` files are processed on a thread pool. Within one
    file the two passes stay strictly sequential.
    """
    logger.debug("Processing %d file(s) with %d job(s)", len(files), config.jobs)
    register_all_decoders()
    if config.jobs <= 1 or len(files) <= 1:
        return [process_file(path, config, target) for path in files]

    with ThreadPoolExecutor(max_workers=config.jobs) as pool:
        return list(pool.map(lambda path: process_file(path, config, target), files))
