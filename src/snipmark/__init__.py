# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark package.

SnipMark extracts tagged regions of source files into standalone snippet files
for inclusion in generated documentation. It validates the markers of each file
before writing anything, and exposes both a CLI and a small typed API.
"""

from __future__ import annotations
