# topmark:header:start
#
#   project      : SnipMark
#   file         : markup.py
#   file_relpath : src/snipmark/filetypes/builtins/markup.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Markup formats using ``<!-- ... -->`` comments.

Exports:
    FILETYPES (list[FileType]): XML and XML-based descriptors, HTML, SVG and Markdown.

Notes:
    XML-based types honor ``-with-header`` start markers: a region cannot start
    before the ``<?xml ...?>`` declaration, so the declaration is captured and
    replayed at the top of the snippet on request.
"""

from __future__ import annotations

from ..base import DecoderVariant, FileType

FILETYPES: list[FileType] = [
    FileType(
        name="xml",
        extensions=[".xml", ".xsd", ".xsl", ".xslt", ".wsdl", ".pom"],
        filenames=[],
        patterns=[],
        description="XML documents (*.xml, *.xsd, *.xsl, *.xslt, *.wsdl, *.pom)",
        variant=DecoderVariant.MARKUP_WITH_HEADER,
    ),
    FileType(
        name="fractal",
        extensions=[".fractal"],
        filenames=[],
        patterns=[],
        description="Fractal ADL component descriptors (*.fractal)",
        variant=DecoderVariant.MARKUP_WITH_HEADER,
    ),
    FileType(
        name="svg",
        extensions=[".svg"],
        filenames=[],
        patterns=[],
        description="SVG images (*.svg)",
        variant=DecoderVariant.MARKUP_WITH_HEADER,
    ),
    FileType(
        name="html",
        extensions=[".html", ".htm", ".xhtml"],
        filenames=[],
        patterns=[],
        description="HTML documents (*.html, *.htm, *.xhtml)",
    ),
    FileType(
        name="markdown",
        extensions=[".md", ".markdown"],
        filenames=[],
        patterns=[],
        description="Markdown documents (*.md, *.markdown)",
    ),
]
