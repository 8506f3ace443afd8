# topmark:header:start
#
#   project      : SnipMark
#   file         : keys.py
#   file_relpath : src/snipmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Canonical TOML section and key names for SnipMark configuration.

These names are the external configuration schema, used in ``snipmark.toml``
and in ``[tool.snipmark]`` inside ``pyproject.toml``. Renaming a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SnipMark configuration."""

    # Top level
    KEY_TARGET_DIR: Final[str] = "target_dir"
    KEY_SNIPPET_SUFFIX: Final[str] = "snippet_suffix"
    KEY_TAB_SIZE: Final[str] = "tab_size"
    KEY_ENCODING: Final[str] = "encoding"
    KEY_JOBS: Final[str] = "jobs"

    # [markers]
    SECTION_MARKERS: Final[str] = "markers"

    KEY_START: Final[str] = "start"
    KEY_END: Final[str] = "end"
    KEY_BREAK: Final[str] = "break"
    KEY_RESUME: Final[str] = "resume"
    KEY_EXTRA: Final[str] = "extra"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_FILES: Final[str] = "files"
    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"
    KEY_FILE_TYPES: Final[str] = "file_types"

    TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_TARGET_DIR,
            KEY_SNIPPET_SUFFIX,
            KEY_TAB_SIZE,
            KEY_ENCODING,
            KEY_JOBS,
            SECTION_MARKERS,
            SECTION_FILES,
        }
    )
    MARKER_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_START, KEY_END, KEY_BREAK, KEY_RESUME, KEY_EXTRA}
    )
    FILES_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_FILES, KEY_INCLUDE_PATTERNS, KEY_EXCLUDE_PATTERNS, KEY_FILE_TYPES}
    )
