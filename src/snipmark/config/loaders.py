# topmark:header:start
#
#   project      : SnipMark
#   file         : loaders.py
#   file_relpath : src/snipmark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Load, discover and render TOML configuration.

SnipMark reads its configuration from:
- ``pyproject.toml`` (the ``[tool.snipmark]`` table) and ``snipmark.toml`` in
  the working directory, merged in that order;
- explicit files given with ``--config``, merged afterwards in their given order.

Parsing is done with `tomlkit`. Unlike header tools that tolerate broken
configuration, a snippet run writes files: invalid TOML and values of the wrong
type raise [`ConfigError`][snipmark.config.model.ConfigError]. Unknown keys only
produce a warning.

Path semantics:
    ``target_dir`` and ``files`` declared in a config file are resolved against
    that file's directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from snipmark.config.keys import Toml
from snipmark.config.logging import get_logger
from snipmark.config.model import ConfigError, MutableConfig
from snipmark.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from snipmark.config.logging import SnipmarkLogger
    from snipmark.config.model import Config

TomlTable = dict[str, Any]

logger: SnipmarkLogger = get_logger(__name__)


# --- TOML file I/O ---


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


# --- Typed getters ---


def _get_str(table: TomlTable, key: str, source: str) -> str | None:
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"{source}: '{key}' must be a string (got {type(value).__name__})")


def _get_int(table: TomlTable, key: str, source: str) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source}: '{key}' must be an integer (got {type(value).__name__})")
    return value


def _get_str_list(table: TomlTable, key: str, source: str) -> list[str]:
    value: Any = table.get(key)
    if value is None:
        return []
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    raise ConfigError(f"{source}: '{key}' must be a list of strings")


def _get_table(table: TomlTable, key: str, source: str) -> TomlTable:
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    raise ConfigError(f"{source}: [{key}] must be a table")


def _warn_unknown_keys(
    draft: MutableConfig, table: TomlTable, known: frozenset[str], where: str
) -> None:
    for key in sorted(set(table) - known):
        message: str = f"{where}: unknown configuration key '{key}' ignored"
        logger.warning(message)
        draft.diagnostics.add_warning(message)


# --- Parsing ---


def config_from_toml_dict(table: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
    """Build a `MutableConfig` layer from a parsed SnipMark TOML table.

    Args:
        table (TomlTable): Top-level SnipMark table (``[tool.snipmark]`` already unwrapped).
        config_file (Path | None): File the table was read from; relative paths are
            resolved against its directory (the working directory when ``None``).

    Returns:
        MutableConfig: A layer holding only the values set in ``table``.

    Raises:
        ConfigError: If a value has the wrong type.
    """
    source: str = str(config_file) if config_file is not None else "<config>"
    base: Path = config_file.parent if config_file is not None else Path.cwd()
    draft = MutableConfig()

    _warn_unknown_keys(draft, table, Toml.TOP_LEVEL_KEYS, source)

    target_dir: str | None = _get_str(table, Toml.KEY_TARGET_DIR, source)
    if target_dir:
        draft.target_dir = (base / target_dir).resolve()
    draft.snippet_suffix = _get_str(table, Toml.KEY_SNIPPET_SUFFIX, source)
    draft.tab_size = _get_int(table, Toml.KEY_TAB_SIZE, source)
    draft.encoding = _get_str(table, Toml.KEY_ENCODING, source)
    draft.jobs = _get_int(table, Toml.KEY_JOBS, source)

    markers: TomlTable = _get_table(table, Toml.SECTION_MARKERS, source)
    _warn_unknown_keys(draft, markers, Toml.MARKER_KEYS, f"{source} [{Toml.SECTION_MARKERS}]")
    draft.start_marker = _get_str(markers, Toml.KEY_START, source)
    draft.end_marker = _get_str(markers, Toml.KEY_END, source)
    draft.break_marker = _get_str(markers, Toml.KEY_BREAK, source)
    draft.resume_marker = _get_str(markers, Toml.KEY_RESUME, source)
    draft.extra_markers = _get_str_list(markers, Toml.KEY_EXTRA, source)

    files: TomlTable = _get_table(table, Toml.SECTION_FILES, source)
    _warn_unknown_keys(draft, files, Toml.FILES_KEYS, f"{source} [{Toml.SECTION_FILES}]")
    draft.files = [
        p if Path(p).is_absolute() or "*" in p else str(base / p)
        for p in _get_str_list(files, Toml.KEY_FILES, source)
    ]
    draft.include_patterns = _get_str_list(files, Toml.KEY_INCLUDE_PATTERNS, source)
    draft.exclude_patterns = _get_str_list(files, Toml.KEY_EXCLUDE_PATTERNS, source)
    draft.file_types = set(_get_str_list(files, Toml.KEY_FILE_TYPES, source))
    return draft


def config_from_toml_file(path: Path) -> MutableConfig | None:
    """Load one config layer from ``path``.

    For ``pyproject.toml`` only the ``[tool.snipmark]`` table is read; a
    ``pyproject.toml`` without it yields ``None``.

    Raises:
        ConfigError: If the file is unreadable, invalid TOML, or holds invalid values.
    """
    logger.debug("Creating MutableConfig from TOML config: %s", path)
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        tool: TomlTable = _get_table(data, "tool", str(path))
        if PYPROJECT_TOOL_TABLE not in tool:
            logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
            return None
        data = _get_table(tool, PYPROJECT_TOOL_TABLE, str(path))
    draft: MutableConfig = config_from_toml_dict(data, config_file=path)
    draft.config_files = [path]
    return draft


def discover_config_files(directory: Path) -> list[Path]:
    """Return the config files present in ``directory``, lowest precedence first."""
    found: list[Path] = []
    for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
        candidate: Path = directory / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", directory, found)
    return found


def load_merged_config(
    *,
    extra_config_files: Iterable[Path] = (),
    no_config: bool = False,
    cwd: Path | None = None,
) -> MutableConfig:
    """Discover and merge configuration layers into a draft `MutableConfig`.

    Merge order (lowest to highest precedence):
        1) built-in defaults;
        2) ``pyproject.toml`` then ``snipmark.toml`` in ``cwd`` (unless ``no_config``);
        3) ``extra_config_files``, in the given order.

    CLI overrides are applied afterwards by the caller with
    [`MutableConfig.apply_cli_args`][snipmark.config.model.MutableConfig.apply_cli_args].
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    layers: list[Path] = []
    if not no_config:
        layers.extend(discover_config_files(cwd or Path.cwd()))
    layers.extend(Path(p) for p in extra_config_files)

    for path in layers:
        layer: MutableConfig | None = config_from_toml_file(path)
        if layer is not None:
            draft = draft.merge_with(layer)
    return draft


# --- Rendering ---


def config_to_toml(config: Config, *, for_pyproject: bool = False) -> str:
    """Render ``config`` as a TOML document (used by ``snipmark init-config``).

    Args:
        config (Config): Configuration to render.
        for_pyproject (bool): Nest the document under ``[tool.snipmark]``.

    Returns:
        str: The TOML text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("SnipMark configuration"))
    if config.target_dir is not None:
        doc.add(Toml.KEY_TARGET_DIR, config.target_dir.as_posix())
    doc.add(Toml.KEY_SNIPPET_SUFFIX, config.snippet_suffix)
    doc.add(Toml.KEY_TAB_SIZE, config.tab_size)
    doc.add(Toml.KEY_ENCODING, config.encoding)
    doc.add(Toml.KEY_JOBS, config.jobs)

    markers = tomlkit.table()
    markers.add(Toml.KEY_START, config.markers.start_marker)
    markers.add(Toml.KEY_END, config.markers.end_marker)
    markers.add(Toml.KEY_BREAK, config.markers.break_marker or "")
    markers.add(Toml.KEY_RESUME, config.markers.resume_marker or "")
    markers.add(Toml.KEY_EXTRA, list(config.extra_markers))
    doc.add(Toml.SECTION_MARKERS, markers)

    files = tomlkit.table()
    files.add(Toml.KEY_FILES, list(config.files))
    files.add(Toml.KEY_INCLUDE_PATTERNS, list(config.include_patterns))
    files.add(Toml.KEY_EXCLUDE_PATTERNS, list(config.exclude_patterns))
    files.add(Toml.KEY_FILE_TYPES, sorted(config.file_types))
    doc.add(Toml.SECTION_FILES, files)

    if not for_pyproject:
        return tomlkit.dumps(doc)

    nested: TomlTable = {"tool": {PYPROJECT_TOOL_TABLE: doc.unwrap()}}
    return tomlkit.dumps(nested)
