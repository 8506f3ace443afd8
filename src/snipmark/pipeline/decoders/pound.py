# topmark:header:start
#
#   project      : SnipMark
#   file         : pound.py
#   file_relpath : src/snipmark/pipeline/decoders/pound.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder for pound-prefixed comment formats.

Supports files using `#`-style comments, such as Python, shell scripts,
Makefiles and YAML.
"""

from __future__ import annotations

from snipmark.filetypes.registry import register_filetype
from snipmark.pipeline.decoders.base import MarkerDecoder


@register_filetype("dockerfile")
@register_filetype("ini")
@register_filetype("makefile")
@register_filetype("perl")
@register_filetype("python")
@register_filetype("r")
@register_filetype("ruby")
@register_filetype("shell")
@register_filetype("toml")
@register_filetype("yaml")
class PoundMarkerDecoder(MarkerDecoder):
    """Decoder for line-comment `#` files."""

    line_prefix = "#"
