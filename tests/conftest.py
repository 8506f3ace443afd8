# topmark:header:start
#
#   project      : SnipMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Pytest configuration for the SnipMark test suite.

Sets up typed mark helpers, global logging and small builders shared by the
test packages.

Notes:
    Build configs with `snipmark.config.model.MutableConfig`, then `freeze()`
    into a `Config` for pipeline and API calls. Use `make_config` for the common
    case.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from snipmark.config import logging
from snipmark.config.model import MutableConfig
from snipmark.pipeline.target import SnippetTarget

if TYPE_CHECKING:
    from pathlib import Path

    from snipmark.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# A decorator taking a callable and returning the same callable.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_config: DecoratorType[Any] = as_typed_mark(pytest.mark.config)
mark_api: DecoratorType[Any] = as_typed_mark(pytest.mark.api)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_snipmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the log level is not forced via ``SNIPMARK_LOG_LEVEL`` during tests."""
    monkeypatch.delenv("SNIPMARK_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for the whole test session."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory (no config files to discover).

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Keys are `MutableConfig` field names, e.g. ``tab_size=2`` or
    ``start_marker="@start:"``.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    for key, value in overrides.items():
        if not hasattr(draft, key):
            raise AttributeError(f"MutableConfig has no field {key!r}")
        setattr(draft, key, value)
    return draft.freeze()


def write_source(directory: Path, name: str, text: str) -> Path:
    """Write ``text`` to ``directory/name`` (UTF-8, LF) and return the path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8", newline="\n")
    return path


def read_snippet(target: SnippetTarget | Path, region_id: str, suffix: str = ".snip") -> str:
    """Return the content of the normalized snippet of ``region_id``."""
    directory: Path = target.directory if isinstance(target, SnippetTarget) else target
    return (directory / f"{region_id}{suffix}").read_text(encoding="utf-8")
