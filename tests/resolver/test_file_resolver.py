# topmark:header:start
#
#   project      : SnipMark
#   file         : test_file_resolver.py
#   file_relpath : tests/resolver/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Tests for expanding positional paths and filtering the candidate set.

Every test runs inside the ``isolation`` working directory, so globs and
patterns are relative to a small throwaway tree.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from snipmark.file_resolver import expand_path, resolve_file_list
from tests.conftest import make_config, write_source


@pytest.fixture
def tree(isolation: Path) -> Path:
    """A small project tree with supported and unsupported files."""
    for name in (
        "src/app.py",
        "src/pkg/util.py",
        "src/Main.java",
        "src/notes.unknownext",
        "docs/page.md",
        "vendor/lib.py",
    ):
        write_source(isolation, name, "x\n")
    return isolation


def _names(paths: list[Path]) -> list[str]:
    return [p.as_posix() for p in paths]


def test_directory_is_expanded_recursively(tree: Path) -> None:
    """Directories yield their supported files, sorted."""
    files: list[Path] = resolve_file_list(make_config(files=["src"]), base=tree)
    assert _names(files) == ["src/Main.java", "src/app.py", "src/pkg/util.py"]


def test_glob_is_expanded_from_cwd(tree: Path) -> None:
    """Globs are expanded relative to the working directory."""
    files: list[Path] = resolve_file_list(make_config(files=["**/*.py"]), base=tree)
    assert _names(files) == ["src/app.py", "src/pkg/util.py", "vendor/lib.py"]


def test_include_then_exclude(tree: Path) -> None:
    """Include patterns intersect, exclude patterns subtract."""
    config = make_config(
        files=["."], include_patterns=["*.py"], exclude_patterns=["vendor/", "src/pkg/"]
    )
    assert _names(resolve_file_list(config, base=tree)) == ["src/app.py"]


def test_file_types_restrict_selection(tree: Path) -> None:
    """Only files of the requested types are kept."""
    config = make_config(files=["."], file_types={"java", "markdown"})
    assert _names(resolve_file_list(config, base=tree)) == ["docs/page.md", "src/Main.java"]


def test_unknown_file_type_warns(tree: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Unknown type names are reported and select nothing."""
    caplog.set_level("WARNING", logger="snipmark")
    config = make_config(files=["src"], file_types={"java", "cobol"})
    assert _names(resolve_file_list(config, base=tree)) == ["src/Main.java"]
    assert "cobol" in caplog.text


def test_missing_path_and_empty_glob_warn(tree: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Missing inputs are warnings, not errors."""
    caplog.set_level("WARNING", logger="snipmark")
    config = make_config(files=["nope.py", "*.nothing"])
    assert resolve_file_list(config, base=tree) == []
    assert "No such file or directory: nope.py" in caplog.text
    assert "No matches for glob pattern: *.nothing" in caplog.text


def test_expand_plain_file(tree: Path) -> None:
    """A plain file expands to itself, even when unsupported."""
    assert expand_path("src/notes.unknownext") == [Path("src/notes.unknownext")]
    assert expand_path("missing.txt") == []


def test_duplicates_are_collapsed(tree: Path) -> None:
    """A file named both directly and through its directory is processed once."""
    config = make_config(files=["src/app.py", "src"], include_patterns=["src/app.py"])
    assert _names(resolve_file_list(config, base=tree)) == ["src/app.py"]
