# topmark:header:start
#
#   project      : SnipMark
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Shared fixtures and helpers for pipeline tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from snipmark.pipeline.decoders import get_decoder_for_file
from snipmark.pipeline.decoders.base import MarkerDecoder
from snipmark.pipeline.target import SnippetTarget


def decoder_for(name: str) -> MarkerDecoder:
    """Return the registered decoder for a file called ``name``."""
    decoder: MarkerDecoder | None = get_decoder_for_file(Path(name))
    assert decoder is not None, f"no decoder for {name}"
    return decoder


@pytest.fixture
def src_dir(tmp_path: Path) -> Path:
    """Directory holding the source files of a test."""
    path: Path = tmp_path / "src"
    path.mkdir()
    return path


@pytest.fixture
def target(tmp_path: Path) -> SnippetTarget:
    """Snippet target directory (created lazily by the first claim)."""
    return SnippetTarget(tmp_path / "snippets")
