# topmark:header:start
#
#   project      : SnipMark
#   file         : slash.py
#   file_relpath : src/snipmark/pipeline/decoders/slash.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder for C-style comment formats.

Markers may sit in `//` line comments or in `/* ... */` block comments; the
block closer is dropped when it trails the identifier.
"""

from __future__ import annotations

from snipmark.filetypes.registry import register_filetype
from snipmark.pipeline.decoders.base import MarkerDecoder


@register_filetype("c")
@register_filetype("cpp")
@register_filetype("cs")
@register_filetype("go")
@register_filetype("groovy")
@register_filetype("java")
@register_filetype("javascript")
@register_filetype("kotlin")
@register_filetype("rust")
@register_filetype("scala")
@register_filetype("swift")
@register_filetype("typescript")
class SlashMarkerDecoder(MarkerDecoder):
    """Decoder for files that accept `//` and `/* */` comments."""

    line_prefix = "//"
    block_prefix = "/*"
    block_suffix = "*/"
