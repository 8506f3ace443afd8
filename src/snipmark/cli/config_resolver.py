# topmark:header:start
#
#   project      : SnipMark
#   file         : config_resolver.py
#   file_relpath : src/snipmark/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Resolve a SnipMark [`Config`][snipmark.config.model.Config] from Click parameters.

Resolution order (lowest to highest precedence):
  1. built-in defaults;
  2. ``pyproject.toml`` (``[tool.snipmark]``) then ``snipmark.toml`` in the
     working directory, unless ``--no-config`` is given;
  3. explicit ``--config`` files, in order;
  4. CLI options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from snipmark.cli.errors import SnipmarkConfigError
from snipmark.config.loaders import load_merged_config
from snipmark.config.logging import get_logger
from snipmark.config.model import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.config.model import Config, MutableConfig

logger: SnipmarkLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: tuple[str, ...] | list[str],
    overrides: Mapping[str, Any],
) -> Config:
    """Build the frozen run configuration from Click parameters.

    Args:
        no_config (bool): Skip discovery of config files in the working directory.
        config_paths (tuple[str, ...] | list[str]): Explicit config files (``--config``).
        overrides (Mapping[str, Any]): CLI values keyed like
            [`MutableConfig.apply_cli_args`][snipmark.config.model.MutableConfig.apply_cli_args].

    Returns:
        Config: The immutable configuration snapshot.

    Raises:
        SnipmarkConfigError: If a config file or a resulting value is invalid.
    """
    try:
        draft: MutableConfig = load_merged_config(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
        draft = draft.apply_cli_args(overrides)
        config: Config = draft.freeze()
    except ConfigError as exc:
        raise SnipmarkConfigError(str(exc)) from exc
    logger.trace("Resolved config: %s", config)
    return config
