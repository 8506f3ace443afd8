# topmark:header:start
#
#   project      : SnipMark
#   file         : model.py
#   file_relpath : src/snipmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the pipeline.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Unset values:
    Scalar fields of `MutableConfig` use ``None`` for "inherit", so a later
    layer only overrides what it actually sets. Break and resume markers use the
    empty string for "explicitly disabled".

Scope:
    TOML parsing and discovery live in [`snipmark.config.loaders`][] to keep this
    model import-light.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from snipmark.config.logging import get_logger
from snipmark.constants import (
    DEFAULT_BREAK_MARKER,
    DEFAULT_ENCODING,
    DEFAULT_END_MARKER,
    DEFAULT_RESUME_MARKER,
    DEFAULT_START_MARKER,
    DEFAULT_TAB_SIZE,
    SNIPPET_SUFFIX,
)
from snipmark.diagnostic import Diagnostic, DiagnosticLog
from snipmark.markers import MarkerSet

if TYPE_CHECKING:
    from collections.abc import Mapping

    from snipmark.config.logging import SnipmarkLogger

logger: SnipmarkLogger = get_logger(__name__)

# Marker in `config_files` recording that CLI or API overrides were applied.
CLI_OVERRIDE_STR: str = "<CLI overrides>"


class ConfigError(ValueError):
    """Raised when a configuration source or value is invalid."""


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for SnipMark.

    Attributes:
        markers (MarkerSet): Marker strings recognized in source files.
        extra_markers (tuple[str, ...]): Foreign markers; lines carrying them are
            never copied into a snippet.
        target_dir (Path | None): Directory receiving snippet files.
        snippet_suffix (str): Extension of normalized snippet files.
        tab_size (int): Number of spaces replacing each tab character.
        encoding (str): Encoding of source and snippet files.
        jobs (int): Number of files processed concurrently.
        files (tuple[str, ...]): Input files, directories or globs.
        include_patterns (tuple[str, ...]): Gitignore-style patterns to include.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns to exclude.
        file_types (frozenset[str]): File type names to restrict processing to.
        config_files (tuple[Path | str, ...]): Provenance of the merged layers.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading config.
    """

    markers: MarkerSet
    extra_markers: tuple[str, ...]
    target_dir: Path | None
    snippet_suffix: str
    tab_size: int
    encoding: str
    jobs: int
    files: tuple[str, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    file_types: frozenset[str]
    config_files: tuple[Path | str, ...]
    diagnostics: tuple[Diagnostic, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            start_marker=self.markers.start_marker,
            end_marker=self.markers.end_marker,
            break_marker=self.markers.break_marker or "",
            resume_marker=self.markers.resume_marker or "",
            extra_markers=list(self.extra_markers),
            target_dir=self.target_dir,
            snippet_suffix=self.snippet_suffix,
            tab_size=self.tab_size,
            encoding=self.encoding,
            jobs=self.jobs,
            files=list(self.files),
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            file_types=set(self.file_types),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Collects defaults, config files and CLI overrides, then produces an
    immutable `Config` via `freeze`.
    """

    start_marker: str | None = None
    end_marker: str | None = None
    break_marker: str | None = None
    resume_marker: str | None = None
    extra_markers: list[str] = field(default_factory=lambda: [])

    target_dir: Path | None = None
    snippet_suffix: str | None = None
    tab_size: int | None = None
    encoding: str | None = None
    jobs: int | None = None

    files: list[str] = field(default_factory=lambda: [])
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    file_types: set[str] = field(default_factory=lambda: set[str]())

    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            start_marker=DEFAULT_START_MARKER,
            end_marker=DEFAULT_END_MARKER,
            break_marker=DEFAULT_BREAK_MARKER,
            resume_marker=DEFAULT_RESUME_MARKER,
            snippet_suffix=SNIPPET_SUFFIX,
            tab_size=DEFAULT_TAB_SIZE,
            encoding=DEFAULT_ENCODING,
            jobs=1,
        )

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable `Config`.

        Unset fields fall back to the built-in defaults.

        Raises:
            ConfigError: If a value is out of range or the markers are inconsistent.
        """
        tab_size: int = DEFAULT_TAB_SIZE if self.tab_size is None else self.tab_size
        if tab_size < 0:
            raise ConfigError(f"tab_size must be >= 0 (got {tab_size})")

        jobs: int = 1 if self.jobs is None else self.jobs
        if jobs < 1:
            raise ConfigError(f"jobs must be >= 1 (got {jobs})")

        suffix: str = SNIPPET_SUFFIX if self.snippet_suffix is None else self.snippet_suffix
        if not suffix:
            raise ConfigError("snippet_suffix must not be empty")

        encoding: str = self.encoding or DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ConfigError(f"Unknown encoding: {encoding!r}") from exc

        try:
            markers = MarkerSet(
                start_marker=self.start_marker or DEFAULT_START_MARKER,
                end_marker=self.end_marker or DEFAULT_END_MARKER,
                break_marker=_window_marker(self.break_marker, DEFAULT_BREAK_MARKER),
                resume_marker=_window_marker(self.resume_marker, DEFAULT_RESUME_MARKER),
            )
        except ValueError as exc:
            raise ConfigError(f"Invalid marker configuration: {exc}") from exc

        return Config(
            markers=markers,
            extra_markers=tuple(m for m in self.extra_markers if m),
            target_dir=self.target_dir,
            snippet_suffix=suffix,
            tab_size=tab_size,
            encoding=encoding,
            jobs=jobs,
            files=tuple(self.files),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            file_types=frozenset(self.file_types),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` override this one."""
        merged = MutableConfig(
            start_marker=_pick(other.start_marker, self.start_marker),
            end_marker=_pick(other.end_marker, self.end_marker),
            break_marker=_pick(other.break_marker, self.break_marker),
            resume_marker=_pick(other.resume_marker, self.resume_marker),
            extra_markers=other.extra_markers or self.extra_markers,
            target_dir=_pick(other.target_dir, self.target_dir),
            snippet_suffix=_pick(other.snippet_suffix, self.snippet_suffix),
            tab_size=_pick(other.tab_size, self.tab_size),
            encoding=_pick(other.encoding, self.encoding),
            jobs=_pick(other.jobs, self.jobs),
            files=other.files or self.files,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            file_types=other.file_types or self.file_types,
            config_files=self.config_files + other.config_files,
        )
        merged.diagnostics = DiagnosticLog(items=[*self.diagnostics, *other.diagnostics])
        return merged

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Apply overrides from a CLI (or API) arguments mapping.

        Only keys present with a non-``None`` value override the builder; empty
        sequences leave list fields untouched.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        for key in (
            "start_marker",
            "end_marker",
            "break_marker",
            "resume_marker",
            "snippet_suffix",
            "tab_size",
            "encoding",
            "jobs",
        ):
            value = args.get(key)
            if value is not None:
                setattr(self, key, value)

        target_dir = args.get("target_dir")
        if target_dir is not None:
            self.target_dir = Path(target_dir)

        if args.get("no_window_markers"):
            self.break_marker = ""
            self.resume_marker = ""

        for key in ("extra_markers", "files", "include_patterns", "exclude_patterns"):
            values = args.get(key)
            if values:
                setattr(self, key, [str(v) for v in values])

        file_types = args.get("file_types")
        if file_types:
            self.file_types = set(file_types)
        return self


def _pick(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def _window_marker(value: str | None, default: str) -> str | None:
    """Map an unset window marker to its default and an empty one to ``None``."""
    if value is None:
        return default
    return value or None
