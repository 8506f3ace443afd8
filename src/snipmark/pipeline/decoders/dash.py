# topmark:header:start
#
#   project      : SnipMark
#   file         : dash.py
#   file_relpath : src/snipmark/pipeline/decoders/dash.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder for `--` line comments (SQL, Lua)."""

from __future__ import annotations

from snipmark.filetypes.registry import register_filetype
from snipmark.pipeline.decoders.base import MarkerDecoder


@register_filetype("lua")
@register_filetype("sql")
class DashMarkerDecoder(MarkerDecoder):
    """Decoder for line-comment `--` files."""

    line_prefix = "--"
