# topmark:header:start
#
#   project      : SnipMark
#   file         : xml.py
#   file_relpath : src/snipmark/pipeline/decoders/xml.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoder for XML-like formats.

Markers live in `<!-- ... -->` comments. XML documents cannot carry a comment
before their `<?xml ...?>` declaration, so XML-based file types honor the
``-with-header`` start variant: the declaration is captured while scanning and
written as the first line of the snippet.
"""

from __future__ import annotations

from snipmark.filetypes.registry import register_filetype
from snipmark.pipeline.decoders.base import MarkerDecoder


@register_filetype("fractal")
@register_filetype("html")
@register_filetype("markdown")
@register_filetype("svg")
@register_filetype("xml")
class XmlMarkerDecoder(MarkerDecoder):
    """Decoder for `<!-- -->` comment files."""

    block_prefix = "<!--"
    block_suffix = "-->"
