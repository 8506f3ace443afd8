# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : tests/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for the SnipMark command line interface."""
