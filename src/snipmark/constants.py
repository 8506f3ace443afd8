# topmark:header:start
#
#   project      : SnipMark
#   file         : constants.py
#   file_relpath : src/snipmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SNIPMARK_VERSION: str = get_version("snipmark")
except PackageNotFoundError:  # running from a source checkout
    SNIPMARK_VERSION = "0.0.0+unknown"

DEFAULT_START_MARKER: str = "@snippet-start"
DEFAULT_END_MARKER: str = "@snippet-end"
DEFAULT_BREAK_MARKER: str = "@snippet-break"
DEFAULT_RESUME_MARKER: str = "@snippet-resume"

# Suffixes appended to the start marker to request a header or copyright block.
HEADER_VARIANT_SUFFIX: str = "-with-header"
COPYRIGHT_VARIANT_SUFFIX: str = "-with-copyright"

# Extension of normalized snippet files; raw intermediates use the bare region id.
SNIPPET_SUFFIX: str = ".snip"

DEFAULT_TAB_SIZE: int = 4
DEFAULT_ENCODING: str = "utf-8"

CONFIG_FILE_NAME: str = "snipmark.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_TABLE: str = "snipmark"
