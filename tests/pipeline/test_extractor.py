# topmark:header:start
#
#   project      : SnipMark
#   file         : test_extractor.py
#   file_relpath : tests/pipeline/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for the extraction engine.

Most tests drive a whole file through
[`process_file`][snipmark.pipeline.runner.process_file] and compare the
normalized snippet content byte for byte.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from snipmark.diagnostic import DiagnosticLevel, DiagnosticLog
from snipmark.filetypes.base import FileType
from snipmark.filetypes.instances import get_file_type_registry
from snipmark.markers import MarkerSet
from snipmark.pipeline.extractor import ExtractionEngine, ExtractionResult
from snipmark.pipeline.runner import FileResult, FileStatus, process_file
from snipmark.pipeline.target import SnippetTarget
from tests.conftest import make_config, mark_pipeline, parametrize, read_snippet, write_source
from tests.pipeline.conftest import decoder_for


@mark_pipeline
def test_nested_regions(src_dir: Path, target: SnippetTarget) -> None:
    """An inner region's lines also belong to the enclosing region."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start outer\n"
        "a = 1\n"
        "    # @snippet-start inner\n"
        "    b = 2\n"
        "    # @snippet-end inner\n"
        "c = 3\n"
        "# @snippet-end outer\n",
    )
    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.EXTRACTED
    assert read_snippet(target, "outer") == "a = 1\n    b = 2\nc = 3\n"
    assert read_snippet(target, "inner") == "b = 2\n"
    assert sorted(p.name for p in target.directory.iterdir()) == ["inner.snip", "outer.snip"]


@mark_pipeline
def test_overlapping_regions(src_dir: Path, target: SnippetTarget) -> None:
    """Regions may overlap without nesting."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start a\none\n# @snippet-start b\ntwo\n"
        "# @snippet-end a\nthree\n# @snippet-end b\n",
    )
    process_file(src, make_config(), target)

    assert read_snippet(target, "a") == "one\ntwo\n"
    assert read_snippet(target, "b") == "two\nthree\n"


@mark_pipeline
def test_break_and_resume_exclude_lines(src_dir: Path, target: SnippetTarget) -> None:
    """Lines between a break and its resume are left out."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start w\nkeep1\n# @snippet-break w\ndrop\n"
        "# @snippet-resume w\nkeep2\n# @snippet-end w\n",
    )
    process_file(src, make_config(), target)

    assert read_snippet(target, "w") == "keep1\nkeep2\n"


@mark_pipeline
def test_window_only_affects_its_own_region(src_dir: Path, target: SnippetTarget) -> None:
    """A break in one region does not exclude lines from another open region."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start a\n# @snippet-start b\n# @snippet-break a\nonly-b\n"
        "# @snippet-resume a\nboth\n# @snippet-end a\n# @snippet-end b\n",
    )
    process_file(src, make_config(), target)

    assert read_snippet(target, "a") == "both\n"
    assert read_snippet(target, "b") == "only-b\nboth\n"


@mark_pipeline
def test_existing_snippet_is_not_overwritten(src_dir: Path, target: SnippetTarget) -> None:
    """A region whose snippet already exists is skipped with a warning."""
    target.directory.mkdir()
    (target.directory / "w.snip").write_text("original\n", encoding="utf-8")
    src: Path = write_source(src_dir, "ex.py", "# @snippet-start w\nnew\n# @snippet-end w\n")

    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.EXTRACTED
    assert result.skipped == ["w"]
    assert result.snippets == []
    assert not result.had_errors
    assert result.diagnostics.has_warning()
    assert read_snippet(target, "w") == "original\n"
    assert not (target.directory / "w").exists()


@mark_pipeline
def test_second_run_is_a_no_op(src_dir: Path, target: SnippetTarget) -> None:
    """Re-running on an unchanged tree skips every region and leaves content intact."""
    src: Path = write_source(src_dir, "ex.py", "# @snippet-start w\n    x\n# @snippet-end w\n")
    first: FileResult = process_file(src, make_config(), target)
    second: FileResult = process_file(src, make_config(), target)

    assert [p.name for p in first.snippets] == ["w.snip"]
    assert second.snippets == []
    assert second.skipped == ["w"]
    assert read_snippet(target, "w") == "x\n"


@mark_pipeline
def test_xml_header_variant(src_dir: Path, target: SnippetTarget) -> None:
    """The XML declaration is prepended to a header-variant snippet."""
    src: Path = write_source(
        src_dir,
        "ex.xml",
        '<?xml version="1.0"?>\n'
        "<root>\n"
        "  <!-- @snippet-start-with-header cfg -->\n"
        "  <item/>\n"
        "  <!-- @snippet-end cfg -->\n"
        "</root>\n",
    )
    process_file(src, make_config(), target)

    assert read_snippet(target, "cfg") == '<?xml version="1.0"?>\n<item/>\n'


@mark_pipeline
def test_java_copyright_variant(src_dir: Path, target: SnippetTarget) -> None:
    """The preamble before the package declaration is prepended to a copyright snippet."""
    src: Path = write_source(
        src_dir,
        "Demo.java",
        "/* Copyright 2025 ACME */\n"
        "package com.acme;\n"
        "// @snippet-start-with-copyright demo\n"
        "public class Demo {}\n"
        "// @snippet-end demo\n",
    )
    process_file(src, make_config(), target)

    assert read_snippet(target, "demo") == "/* Copyright 2025 ACME */\npublic class Demo {}\n"


@mark_pipeline
def test_indent_is_measured_before_tab_expansion(src_dir: Path, target: SnippetTarget) -> None:
    """Tabs count as one indentation character but are written as ``tab_size`` spaces."""
    src: Path = write_source(
        src_dir, "ex.py", "# @snippet-start t\n\tif x:\n\t\ty = 1\n# @snippet-end t\n"
    )
    process_file(src, make_config(), target)
    assert read_snippet(target, "t") == "   if x:\n       y = 1\n"


@mark_pipeline
def test_tab_size_applies_to_expansion(src_dir: Path, target: SnippetTarget) -> None:
    """With ``tab_size=1`` tab-indented code dedents like space-indented code."""
    src: Path = write_source(
        src_dir, "ex.py", "# @snippet-start t\n\tif x:\n\t\ty = 1\n# @snippet-end t\n"
    )
    process_file(src, make_config(tab_size=1), target)
    assert read_snippet(target, "t") == "if x:\n y = 1\n"


@mark_pipeline
def test_extra_marker_lines_are_dropped(src_dir: Path, target: SnippetTarget) -> None:
    """Lines carrying a foreign marker never reach a snippet."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start c\nx = 1\nx += 1  # @callout 1\ny = 2\n# @snippet-end c\n",
    )
    process_file(src, make_config(extra_markers=["@callout"]), target)
    assert read_snippet(target, "c") == "x = 1\ny = 2\n"


@mark_pipeline
def test_custom_markers(src_dir: Path, target: SnippetTarget) -> None:
    """Configured marker strings drive extraction."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @start: foo\n    hello\n      world\n# @end: foo\n# @snippet-start other\n",
    )
    result: FileResult = process_file(
        src, make_config(start_marker="@start:", end_marker="@end:"), target
    )

    assert result.status is FileStatus.EXTRACTED
    assert read_snippet(target, "foo") == "hello\n  world\n"
    assert not (target.directory / "other.snip").exists()


@mark_pipeline
def test_empty_region_gives_empty_snippet(src_dir: Path, target: SnippetTarget) -> None:
    """A region without content lines still produces its (empty) snippet."""
    src: Path = write_source(src_dir, "ex.py", "# @snippet-start e\n# @snippet-end e\n")
    process_file(src, make_config(), target)
    assert read_snippet(target, "e") == ""


@mark_pipeline
def test_invalid_file_writes_nothing(src_dir: Path, target: SnippetTarget) -> None:
    """A file with any defect produces no output at all."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start good\nx\n# @snippet-end good\n# @snippet-start bad\n",
    )
    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.INVALID
    assert result.had_errors
    assert [d.kind.value for d in result.defects] == ["orphan-start"]
    assert not target.directory.exists() or not any(target.directory.iterdir())


@mark_pipeline
def test_unusable_region_id_is_skipped_with_error(src_dir: Path, target: SnippetTarget) -> None:
    """A region id that is not a plain file name is reported and skipped."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        "# @snippet-start a/b\nx\n# @snippet-end a/b\n# @snippet-start ok\ny\n# @snippet-end ok\n",
    )
    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.EXTRACTED
    assert result.had_errors
    assert any(d.level is DiagnosticLevel.ERROR for d in result.diagnostics)
    assert read_snippet(target, "ok") == "y\n"
    assert [p.name for p in result.snippets] == ["ok.snip"]


@mark_pipeline
def test_failure_mid_file_discards_raw_files(tmp_path: Path) -> None:
    """An exception during the pass removes every raw file created for the file."""
    target = SnippetTarget(tmp_path / "out")
    engine = ExtractionEngine(decoder_for("ex.py"), MarkerSet(), target)

    def _lines() -> Iterator[str]:
        yield "# @snippet-start a\n"
        yield "x\n"
        yield "# @snippet-end a\n"
        yield "# @snippet-start b\n"
        raise OSError("disk gone")

    with pytest.raises(OSError, match="disk gone"):
        engine.extract(_lines())
    assert list(target.directory.iterdir()) == []


@mark_pipeline
def test_engine_reports_closed_regions(tmp_path: Path) -> None:
    """The engine returns raw files in End order with their minimum indentation."""
    target = SnippetTarget(tmp_path / "out")
    log = DiagnosticLog()
    engine = ExtractionEngine(decoder_for("ex.py"), MarkerSet(), target, diagnostics=log)
    result: ExtractionResult = engine.extract(
        [
            "# @snippet-start a\n",
            "    # @snippet-start b\n",
            "      x\n",
            "    # @snippet-end b\n",
            "  y\n",
            "# @snippet-end a\n",
        ]
    )

    assert [(r.region_id, r.min_indent, r.line_count) for r in result.closed] == [
        ("b", 6, 1),
        ("a", 2, 2),
    ]
    assert (target.directory / "a").read_text(encoding="utf-8") == "      x\n  y\n"
    assert result.skipped == ()
    assert len(log) == 0


@mark_pipeline
@parametrize("first, second", [("foo", "foo.snip"), ("foo.snip", "foo")])
def test_region_ids_cannot_alias_each_others_files(
    src_dir: Path, target: SnippetTarget, first: str, second: str
) -> None:
    """``foo.snip`` (raw) and ``foo`` (snippet) share a file: the later region is skipped."""
    src: Path = write_source(
        src_dir,
        "ex.py",
        f"# @snippet-start {first}\nFIRST\n# @snippet-end {first}\n"
        f"# @snippet-start {second}\nSECOND\n# @snippet-end {second}\n",
    )
    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.EXTRACTED
    assert result.skipped == [second]
    assert result.diagnostics.has_warning()
    assert read_snippet(target, first) == "FIRST\n"
    assert sorted(p.name for p in target.directory.iterdir()) == [f"{first}.snip"]


@mark_pipeline
def test_region_id_aliasing_across_files(src_dir: Path, target: SnippetTarget) -> None:
    """A region still being extracted by another file reserves its snippet name."""
    writer = target.claim("foo")
    assert writer is not None
    with writer:
        src: Path = write_source(
            src_dir, "b.py", "# @snippet-start foo.snip\nB\n# @snippet-end foo.snip\n"
        )
        result: FileResult = process_file(src, make_config(), target)

    assert result.skipped == ["foo.snip"]
    assert sorted(p.name for p in target.directory.iterdir()) == ["foo"]


@mark_pipeline
def test_marker_glued_to_identifier(src_dir: Path, target: SnippetTarget) -> None:
    """``@start:foo`` without a space still names region ``foo``."""
    src: Path = write_source(
        src_dir, "ex.py", "# @start:foo\n  hello\n    world\n# @end:foo\n"
    )
    result: FileResult = process_file(
        src, make_config(start_marker="@start:", end_marker="@end:"), target
    )

    assert result.status is FileStatus.EXTRACTED
    assert read_snippet(target, "foo") == "hello\n  world\n"


@mark_pipeline
def test_invalid_preamble_pattern_does_not_escape(
    src_dir: Path, target: SnippetTarget, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A broken preamble regex is logged; the file is still extracted."""
    java: FileType = get_file_type_registry()["java"]
    monkeypatch.setattr(java, "preamble_end_regex", "(unclosed")
    monkeypatch.setattr(java, "_compiled_preamble_end", None)
    monkeypatch.setattr(java, "_preamble_end_invalid", False)
    src: Path = write_source(
        src_dir,
        "Demo.java",
        "// header\n// @snippet-start-with-copyright demo\nclass Demo {}\n// @snippet-end demo\n",
    )
    result: FileResult = process_file(src, make_config(), target)

    assert result.status is FileStatus.EXTRACTED
    assert read_snippet(target, "demo") == "// header\nclass Demo {}\n"
