# topmark:header:start
#
#   project      : SnipMark
#   file         : cblock.py
#   file_relpath : src/snipmark/pipeline/decoders/cblock.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder for formats that only have `/* ... */` block comments (CSS)."""

from __future__ import annotations

from snipmark.filetypes.registry import register_filetype
from snipmark.pipeline.decoders.base import MarkerDecoder


@register_filetype("css")
class CBlockMarkerDecoder(MarkerDecoder):
    """Decoder for block-comment-only files."""

    block_prefix = "/*"
    block_suffix = "*/"
