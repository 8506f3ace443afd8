# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""SnipMark CLI subcommands."""
