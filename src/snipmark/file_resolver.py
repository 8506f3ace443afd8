# topmark:header:start
#
#   project      : SnipMark
#   file         : file_resolver.py
#   file_relpath : src/snipmark/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Resolve input files for SnipMark based on config, paths, and filters.

This module expands positional paths, applies include/exclude patterns, and
keeps the files that have a registered marker decoder. Globs are expanded
relative to the current working directory. The result is a deterministic,
sorted list of files to process.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from snipmark.config.logging import get_logger
from snipmark.filetypes.instances import get_file_type_registry
from snipmark.pipeline.decoders import get_decoder_for_file

if TYPE_CHECKING:
    from collections.abc import Iterable

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.config.model import Config
    from snipmark.filetypes.base import FileType

logger: SnipmarkLogger = get_logger(__name__)

_GLOB_CHARS: str = "*?["


def _is_glob(raw: str) -> bool:
    return any(ch in raw for ch in _GLOB_CHARS)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(raw: str) -> list[Path]:
    """Expand one positional argument into the files it denotes.

    Globs are expanded relative to the current working directory, directories
    recursively; a plain file yields itself. Missing paths yield nothing.
    """
    if _is_glob(raw):
        candidate = Path(raw)
        if candidate.is_absolute():
            anchor = Path(candidate.anchor)
            return sorted(anchor.glob(str(candidate.relative_to(anchor))))
        return sorted(Path(".").glob(raw))
    p = Path(raw)
    if p.is_dir():
        return sorted(q for q in p.rglob("*") if q.is_file())
    if p.is_file():
        return [p]
    return []


def _filter(
    candidates: set[Path], patterns: Iterable[str], base: Path, *, keep_matches: bool
) -> set[Path]:
    spec: PathSpec = PathSpec.from_lines("gitwildmatch", list(patterns))
    return {p for p in candidates if spec.match_file(_rel_for_match(p, base)) == keep_matches}


def resolve_file_list(config: Config, *, base: Path | None = None) -> list[Path]:
    """Return the files to process, applying candidate expansion and filters.

    Semantics:
      1. **Candidate set**: expand ``config.files`` (files, directories
         recursively, and globs). Missing paths and empty globs are warned about.
      2. **Include intersection**: with include patterns, keep only matching files.
      3. **Exclude subtraction**: drop files matching any exclude pattern.
      4. **Decoder filter**: keep files whose type has a marker decoder,
         restricted to ``config.file_types`` when given.
      5. Return a **sorted** list for deterministic output.

    Args:
        config (Config): Configuration values influencing path collection and filters.
        base (Path | None): Directory patterns are matched against (default: CWD).

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    workspace_root: Path = base or Path.cwd()
    logger.trace(
        "files=%s include=%s exclude=%s file_types=%s root=%s",
        config.files,
        config.include_patterns,
        config.exclude_patterns,
        sorted(config.file_types),
        workspace_root,
    )

    candidate_set: set[Path] = set()
    for raw in config.files:
        expanded: list[Path] = expand_path(raw)
        if not expanded:
            if _is_glob(raw):
                logger.warning("No matches for glob pattern: %s", raw)
            elif not Path(raw).exists():
                logger.warning("No such file or directory: %s", raw)
        candidate_set.update(p for p in expanded if p.is_file())

    if config.include_patterns:
        candidate_set = _filter(
            candidate_set, config.include_patterns, workspace_root, keep_matches=True
        )
    if config.exclude_patterns:
        candidate_set = _filter(
            candidate_set, config.exclude_patterns, workspace_root, keep_matches=False
        )

    selected_types: list[FileType] = []
    if config.file_types:
        registry: dict[str, FileType] = get_file_type_registry()
        unknown: list[str] = sorted(t for t in config.file_types if t not in registry)
        if unknown:
            logger.warning("Unknown file types specified: %s", ", ".join(unknown))
        selected_types = [registry[t] for t in sorted(config.file_types) if t in registry]

    files: list[Path] = []
    for path in sorted(candidate_set):
        if selected_types and not any(ft.matches(path) for ft in selected_types):
            continue
        if get_decoder_for_file(path) is None:
            logger.debug("Skipping file without marker decoder: %s", path)
            continue
        files.append(path)

    logger.debug("Files to process: %d", len(files))
    return files
