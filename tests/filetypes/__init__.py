# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : tests/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for file types and the decoder registry."""
