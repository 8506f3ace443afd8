# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Built-in file type groups.

Each module exports a ``FILETYPES`` list consumed by
[`snipmark.filetypes.instances`][].
"""
