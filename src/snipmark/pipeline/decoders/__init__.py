# topmark:header:start
#
#   project      : SnipMark
#   file         : __init__.py
#   file_relpath : src/snipmark/pipeline/decoders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Marker decoders and decoder lookup by path."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.pipeline.decoders.base import MarkerDecoder

if TYPE_CHECKING:
    from snipmark.filetypes.base import FileType


logger = get_logger(__name__)


def get_decoder_for_file(path: Path) -> MarkerDecoder | None:
    """Retrieve the marker decoder for a given file based on its file type.

    Args:
        path: The path to the file for which to find a decoder.

    Returns:
        The registered MarkerDecoder bound to the first matching file type, or
        None if no registered file type matches.
    """
    from snipmark.filetypes.instances import get_file_type_registry
    from snipmark.filetypes.registry import get_decoder_registry

    register_all_decoders()
    file_type_registry = get_file_type_registry()

    for file_type_name, decoder in get_decoder_registry().items():
        file_type: FileType | None = file_type_registry.get(file_type_name)
        if file_type is None:
            logger.warning("No FileType found for registered decoder '%s'", type(decoder).__name__)
            continue
        if file_type.matches(path):
            logger.debug("File type '%s' detected for file: %s", file_type.name, path)
            return decoder

    logger.debug("File '%s' cannot be resolved to a file type with a marker decoder", path)
    return None


def register_all_decoders() -> None:
    """Import all decoder modules in the current package so they register themselves."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name != "base":
            importlib.import_module(f"{__name__}.{module_info.name}")


__all__ = ["MarkerDecoder", "get_decoder_for_file", "register_all_decoders"]
