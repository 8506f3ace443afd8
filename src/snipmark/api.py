# topmark:header:start
#
#   project      : SnipMark
#   file         : api.py
#   file_relpath : src/snipmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Public SnipMark API (stable surface).

Thin wrappers around the pipeline for integrations that want to run SnipMark
without going through the CLI. File discovery, filtering and configuration
layering are the same as the CLI's.

Configuration contract:
    ``config`` accepts either a frozen [`Config`][snipmark.config.model.Config],
    used as is, or a plain mapping mirroring the TOML shape, layered over the
    discovered configuration:

```python
from snipmark import api

run = api.extract(
    ["src"],
    "build/snippets",
    config={
        "tab_size": 2,
        "markers": {"start": "@start:", "end": "@end:"},
        "files": {"exclude_patterns": ["tests/"]},
    },
)
assert not run.had_errors
```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from snipmark.config.loaders import config_from_toml_dict, load_merged_config
from snipmark.config.logging import get_logger
from snipmark.config.model import Config
from snipmark.constants import SNIPMARK_VERSION
from snipmark.file_resolver import resolve_file_list
from snipmark.pipeline.runner import FileResult, FileStatus, run
from snipmark.pipeline.target import SnippetTarget

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.config.model import MutableConfig

logger: SnipmarkLogger = get_logger(__name__)

__all__: list[str] = [
    "FileResult",
    "FileStatus",
    "RunResult",
    "check",
    "extract",
    "version",
]


@dataclass(frozen=True)
class RunResult:
    """Outcome of one API run.

    Attributes:
        files (tuple[FileResult, ...]): Per-file results, in processing order.
        config (Config): The configuration the run used.
    """

    files: tuple[FileResult, ...]
    config: Config

    @property
    def snippets(self) -> list[Path]:
        """Snippet files written by this run."""
        return [snippet for result in self.files for snippet in result.snippets]

    @property
    def had_errors(self) -> bool:
        """Whether any file failed or had marker defects."""
        return any(result.had_errors for result in self.files)

    def by_status(self, status: FileStatus) -> list[FileResult]:
        """Return the results with the given status."""
        return [result for result in self.files if result.status is status]


def _resolve_config(
    paths: Iterable[Path | str],
    config: Mapping[str, Any] | Config | None,
    overrides: Mapping[str, Any],
) -> Config:
    if isinstance(config, Config):
        draft: MutableConfig = config.thaw()
    else:
        draft = load_merged_config()
        if config is not None:
            draft = draft.merge_with(config_from_toml_dict(dict(config)))
    draft.apply_cli_args({"files": [str(p) for p in paths], **overrides})
    return draft.freeze()


def check(
    paths: Iterable[Path | str],
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> RunResult:
    """Validate the markers of the files under ``paths``; nothing is written.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    cfg: Config = _resolve_config(paths, config, {})
    files: list[Path] = resolve_file_list(cfg)
    return RunResult(files=tuple(run(files, cfg)), config=cfg)


def extract(
    paths: Iterable[Path | str],
    target_dir: Path | str | None = None,
    *,
    config: Mapping[str, Any] | Config | None = None,
) -> RunResult:
    """Extract the snippets of the files under ``paths`` into ``target_dir``.

    ``target_dir`` overrides the configured one; one of them must be set.

    Raises:
        ConfigError: If the configuration is invalid.
        ValueError: If no target directory is known.
    """
    overrides: dict[str, Any] = {"target_dir": target_dir} if target_dir is not None else {}
    cfg: Config = _resolve_config(paths, config, overrides)
    if cfg.target_dir is None:
        raise ValueError("extract() needs a target directory")
    target = SnippetTarget(cfg.target_dir, suffix=cfg.snippet_suffix, encoding=cfg.encoding)
    files: list[Path] = resolve_file_list(cfg)
    logger.info("Extracting snippets from %d file(s) into %s", len(files), target.directory)
    return RunResult(files=tuple(run(files, cfg, target)), config=cfg)


def version() -> str:
    """Return the installed SnipMark version."""
    return SNIPMARK_VERSION
