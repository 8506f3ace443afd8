# topmark:header:start
#
#   project      : SnipMark
#   file         : test_runner.py
#   file_relpath : tests/pipeline/test_runner.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for per-file orchestration and multi-file runs."""

from __future__ import annotations

from pathlib import Path

from snipmark.pipeline.runner import FileResult, FileStatus, process_file, run
from snipmark.pipeline.target import SnippetTarget
from tests.conftest import make_config, mark_pipeline, parametrize, read_snippet, write_source


@mark_pipeline
def test_unsupported_file(src_dir: Path) -> None:
    """Files without a decoder are reported, not failed."""
    src: Path = write_source(src_dir, "notes.unknownext", "@snippet-start x\n")
    result: FileResult = process_file(src, make_config())

    assert result.status is FileStatus.UNSUPPORTED
    assert result.file_type is None
    assert not result.had_errors


@mark_pipeline
def test_unreadable_file(src_dir: Path) -> None:
    """Bytes that do not decode in the configured encoding make the file unreadable."""
    src: Path = src_dir / "bad.py"
    src.write_bytes(b"# @snippet-start x\n\xff\xfe\n# @snippet-end x\n")
    result: FileResult = process_file(src, make_config())

    assert result.status is FileStatus.UNREADABLE
    assert result.had_errors


@mark_pipeline
def test_missing_file_is_unreadable(src_dir: Path) -> None:
    """A file that vanished before processing is unreadable."""
    result: FileResult = process_file(src_dir / "gone.py", make_config())
    assert result.status is FileStatus.UNREADABLE


@mark_pipeline
@parametrize(
    "text, expected",
    [
        ("x = 1\n", FileStatus.NO_MARKERS),
        ("# @snippet-start a\nx\n# @snippet-end a\n", FileStatus.VALID),
        ("# @snippet-start a\nx\n", FileStatus.INVALID),
    ],
)
def test_check_only_statuses(src_dir: Path, text: str, expected: FileStatus) -> None:
    """Without a target the file is only validated."""
    src: Path = write_source(src_dir, "ex.py", text)
    result: FileResult = process_file(src, make_config())

    assert result.status is expected
    assert result.file_type == "python"
    assert result.snippets == []


@mark_pipeline
def test_defects_become_error_diagnostics(src_dir: Path) -> None:
    """Each defect is rendered as one error diagnostic with its line number."""
    src: Path = write_source(src_dir, "ex.py", "x\n# @snippet-end a\n")
    result: FileResult = process_file(src, make_config())

    messages: list[str] = [d.message for d in result.diagnostics]
    assert messages == ["line 2: [orphan-end] orphaned end tag [a] has no start tag"]


@mark_pipeline
def test_first_writer_wins_across_files(src_dir: Path, target: SnippetTarget) -> None:
    """When two files define the same region, the first file in run order wins."""
    first: Path = write_source(
        src_dir, "a.py", "# @snippet-start dup\nfrom a\n# @snippet-end dup\n"
    )
    second: Path = write_source(
        src_dir, "b.py", "# @snippet-start dup\nfrom b\n# @snippet-end dup\n"
    )
    results: list[FileResult] = run([first, second], make_config(), target)

    assert [r.path for r in results] == [first, second]
    assert read_snippet(target, "dup") == "from a\n"
    assert results[1].skipped == ["dup"]


@mark_pipeline
def test_parallel_run_preserves_order_and_unique_writers(
    src_dir: Path, target: SnippetTarget
) -> None:
    """With several jobs, results keep input order and each region has one writer."""
    files: list[Path] = [
        write_source(
            src_dir,
            f"m{i:02d}.py",
            f"# @snippet-start own{i}\nv = {i}\n# @snippet-end own{i}\n"
            f"# @snippet-start shared\nv = {i}\n# @snippet-end shared\n",
        )
        for i in range(12)
    ]
    results: list[FileResult] = run(files, make_config(jobs=4), target)

    assert [r.path for r in results] == files
    assert all(r.status is FileStatus.EXTRACTED for r in results)
    assert sum(1 for r in results if "shared" in r.skipped) == len(files) - 1
    names: list[str] = sorted(p.name for p in target.directory.iterdir())
    assert names == sorted([f"own{i}.snip" for i in range(12)] + ["shared.snip"])
    assert read_snippet(target, "shared").startswith("v = ")


@mark_pipeline
def test_one_bad_file_does_not_stop_the_run(src_dir: Path, target: SnippetTarget) -> None:
    """Failures are contained per file."""
    bad: Path = write_source(src_dir, "bad.py", "# @snippet-start x\n")
    good: Path = write_source(src_dir, "good.py", "# @snippet-start y\nok\n# @snippet-end y\n")
    results: list[FileResult] = run([bad, good], make_config(), target)

    assert [r.status for r in results] == [FileStatus.INVALID, FileStatus.EXTRACTED]
    assert read_snippet(target, "y") == "ok\n"
