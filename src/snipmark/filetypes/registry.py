# topmark:header:start
#
#   project      : SnipMark
#   file         : registry.py
#   file_relpath : src/snipmark/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Registry of MarkerDecoders for SnipMark file types.

This module provides a decorator to register MarkerDecoder implementations
for specific file types, using the centralized file type registry.

Each MarkerDecoder is associated with a FileType by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.filetypes.instances import get_file_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from snipmark.pipeline.decoders.base import MarkerDecoder

logger = get_logger(__name__)


_registry: dict[str, MarkerDecoder] = {}


def register_filetype(
    name: str,
) -> Callable[[type[MarkerDecoder]], type[MarkerDecoder]]:
    """Class decorator to register a MarkerDecoder for a specific file type.

    Each decorated class is instantiated once per file type and bound to it
    (``decoder.file_type = ft``), so a single decoder class can serve many
    file types with different start-marker variants.

    Args:
        name (str): Name of the file type as defined in the file type registry.

    Returns:
        Callable[[type[MarkerDecoder]], type[MarkerDecoder]]: A decorator that
            registers the class as a MarkerDecoder.

    Raises:
        ValueError: If the file type name is unknown.
    """
    file_type_registry = get_file_type_registry()
    if name not in file_type_registry:
        raise ValueError(f"Unknown file type: {name}")

    file_type = file_type_registry[name]

    def decorator(cls: type[MarkerDecoder]) -> type[MarkerDecoder]:
        logger.debug("Registering decoder %s for file type: %s", cls.__name__, file_type.name)
        if file_type.name in _registry:
            raise ValueError(f"File type '{file_type.name}' already has a registered decoder.")
        instance = cls()
        instance.file_type = file_type
        _registry[file_type.name] = instance
        return cls

    return decorator


def get_decoder_registry() -> dict[str, MarkerDecoder]:
    """Return the registry of file type names to MarkerDecoder instances."""
    return _registry
