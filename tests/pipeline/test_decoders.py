# topmark:header:start
#
#   project      : SnipMark
#   file         : test_decoders.py
#   file_relpath : tests/pipeline/test_decoders.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for marker decoders: identifier parsing, marker scanning and side capture."""

from __future__ import annotations

from pathlib import Path

from snipmark.filetypes.base import DecoderVariant
from snipmark.markers import MarkerKind, MarkerOccurrence, MarkerSet, StartMarker
from snipmark.pipeline.decoders import get_decoder_for_file
from snipmark.pipeline.decoders.base import CapturedContext, MarkerDecoder
from tests.conftest import mark_pipeline, parametrize
from tests.pipeline.conftest import decoder_for

MARKERS = MarkerSet()


@mark_pipeline
@parametrize(
    "name, line, expected",
    [
        ("ex.py", "# @snippet-start foo", "foo"),
        ("ex.py", "    # @snippet-start   foo   trailing words", "foo"),
        ("Ex.java", "// @snippet-start foo", "foo"),
        ("Ex.java", "/* @snippet-start foo */", "foo"),
        ("Ex.java", "/* @snippet-start foo*/", "foo"),
        ("ex.css", "/* @snippet-start rules*/", "rules"),
        ("ex.xml", "<!-- @snippet-start foo -->", "foo"),
        ("ex.xml", "<!-- @snippet-start foo-->", "foo"),
        ("ex.sql", "-- @snippet-start query", "query"),
        ("ex.py", "# @snippet-start", ""),
        ("ex.xml", "<!-- @snippet-start -->", ""),
    ],
)
def test_decode_identifier(name: str, line: str, expected: str) -> None:
    """The identifier is the first token after the marker, comment closers dropped."""
    assert decoder_for(name).decode(line, MARKERS.start_marker) == expected


@mark_pipeline
def test_decode_absent_marker_is_none() -> None:
    """``None`` means no marker; ``""`` means a marker without identifier."""
    decoder: MarkerDecoder = decoder_for("ex.py")
    assert decoder.decode("x = 1", MARKERS.start_marker) is None
    assert decoder.decode("# @snippet-start", MARKERS.start_marker) == ""


@mark_pipeline
def test_scan_line_orders_end_before_start() -> None:
    """A line closing one region and opening another yields End then Start."""
    found: list[MarkerOccurrence] = decoder_for("ex.py").scan_line(
        "# @snippet-start b @snippet-end a", 7, MARKERS
    )
    assert [(o.kind, o.region_id, o.line_number) for o in found] == [
        (MarkerKind.END, "a", 7),
        (MarkerKind.START, "b", 7),
    ]


@mark_pipeline
def test_scan_line_ignores_disabled_window_markers() -> None:
    """Break and resume literals are not markers when windows are disabled."""
    markers = MarkerSet(break_marker=None, resume_marker=None)
    assert decoder_for("ex.py").scan_line("# @snippet-break a", 1, markers) == []
    assert decoder_for("ex.py").scan_line("# @snippet-break a", 1, MARKERS) == [
        MarkerOccurrence(MarkerKind.BREAK, "a", 1)
    ]


@mark_pipeline
def test_header_variant_only_for_markup_with_header() -> None:
    """``-with-header`` is a variant for XML but part of the identifier for HTML."""
    line: str = "<!-- @snippet-start-with-header doc -->"
    xml: MarkerDecoder = decoder_for("ex.xml")
    html: MarkerDecoder = decoder_for("ex.html")
    assert xml.variant is DecoderVariant.MARKUP_WITH_HEADER
    assert xml.decode_start(line, MARKERS) == StartMarker("doc", has_header=True)
    assert html.decode_start(line, MARKERS) == StartMarker("-with-header")


@mark_pipeline
def test_copyright_variant_only_for_code_with_copyright() -> None:
    """``-with-copyright`` is honored for Java and ignored for C."""
    line: str = "// @snippet-start-with-copyright demo"
    assert decoder_for("Ex.java").decode_start(line, MARKERS) == StartMarker(
        "demo", has_copyright=True
    )
    assert decoder_for("ex.c").decode_start(line, MARKERS) == StartMarker("-with-copyright")


@mark_pipeline
def test_is_marker_line_with_extra_markers() -> None:
    """Foreign markers make a line a marker line."""
    decoder: MarkerDecoder = decoder_for("ex.py")
    assert decoder.is_marker_line("# @snippet-resume a", MARKERS)
    assert not decoder.is_marker_line("# @callout 1", MARKERS)
    assert decoder.is_marker_line("# @callout 1", MARKERS, extra_markers=("@callout",))


@mark_pipeline
def test_capture_header_before_first_region() -> None:
    """The XML declaration is remembered only until the first start marker."""
    decoder: MarkerDecoder = decoder_for("ex.xml")
    capture = CapturedContext()
    decoder.capture_context('<?xml version="1.0"?>', capture, MARKERS)
    assert capture.header_line == '<?xml version="1.0"?>'
    capture.started = True
    decoder.capture_context('<?xml version="2.0"?>', capture, MARKERS)
    assert capture.header_line == '<?xml version="1.0"?>'


@mark_pipeline
def test_capture_preamble_until_package_declaration() -> None:
    """Java preamble lines stop at the package declaration; marker lines are skipped."""
    decoder: MarkerDecoder = decoder_for("Ex.java")
    capture = CapturedContext()
    for line in ("/*", " * Copyright", " */", "// @snippet-start x", "package a.b;", "int y;"):
        decoder.capture_context(line, capture, MARKERS)
    assert capture.preamble == ["/*", " * Copyright", " */"]
    assert capture.preamble_closed


@mark_pipeline
def test_unknown_file_has_no_decoder() -> None:
    """Files without a registered type are unsupported."""
    assert get_decoder_for_file(Path("notes.unknownext")) is None
    assert get_decoder_for_file(Path("Makefile")) is not None
