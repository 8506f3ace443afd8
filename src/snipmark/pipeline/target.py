# topmark:header:start
#
#   project      : SnipMark
#   file         : target.py
#   file_relpath : src/snipmark/pipeline/target.py
#   license      : MIT
#   copyright    : (c) 2025 SnipMark contributors
#
# topmark:header:end

"""Snippet target directory with first-writer-wins region claims.

Every region id maps to two files in the target directory: the raw intermediate
``<id>`` written during extraction, and the normalized snippet ``<id><suffix>``
written afterwards. A region may be claimed only if neither exists; the claim
creates the raw file with exclusive mode under a lock, so concurrent workers
sharing one `SnippetTarget` resolve each region id to exactly one winner.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING

from snipmark.config.logging import get_logger
from snipmark.constants import DEFAULT_ENCODING, SNIPPET_SUFFIX

if TYPE_CHECKING:
    from typing import TextIO

    from snipmark.config.logging import SnipmarkLogger

logger: SnipmarkLogger = get_logger(__name__)


class InvalidRegionIdError(ValueError):
    """Raised when a region id cannot be used as a file name."""


class SnippetTarget:
    """Directory receiving the snippet files of a run.

    Args:
        directory (Path): Target directory; created on first use.
        suffix (str): Extension of normalized snippet files.
        encoding (str): Encoding used for raw and normalized snippet files.
    """

    def __init__(
        self,
        directory: Path,
        *,
        suffix: str = SNIPPET_SUFFIX,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.directory = Path(directory)
        self.suffix = suffix
        self.encoding = encoding
        self._lock = threading.Lock()
        self._reserved: set[str] = set()

    def raw_path(self, region_id: str) -> Path:
        """Return the path of the raw intermediate for ``region_id``."""
        self._check_region_id(region_id)
        return self.directory / region_id

    def snippet_path(self, region_id: str) -> Path:
        """Return the path of the normalized snippet for ``region_id``."""
        self._check_region_id(region_id)
        return self.directory / f"{region_id}{self.suffix}"

    def exists(self, region_id: str) -> bool:
        """Return True if ``region_id`` was already produced (raw or normalized)."""
        return self.raw_path(region_id).exists() or self.snippet_path(region_id).exists()

    def claim(self, region_id: str) -> TextIO | None:
        """Claim ``region_id`` and open its raw intermediate for writing.

        A claim reserves both file names of the region for the lifetime of
        this target, so ``foo.snip`` cannot take the raw name of ``foo`` whose
        snippet is written only after its whole file was extracted.

        Returns:
            TextIO | None: The open raw stream, or ``None`` when the region was
                already claimed or produced by an earlier writer.

        Raises:
            InvalidRegionIdError: If ``region_id`` is not a plain file name.
            OSError: If the raw file cannot be created.
        """
        names: set[str] = {region_id, f"{region_id}{self.suffix}"}
        with self._lock:
            if names & self._reserved or self.exists(region_id):
                return None
            self._reserved.update(names)
            self.directory.mkdir(parents=True, exist_ok=True)
            try:
                stream: TextIO = self.raw_path(region_id).open(
                    "x", encoding=self.encoding, newline="\n"
                )
            except FileExistsError:
                return None
        logger.debug("Creating: %s", self.raw_path(region_id))
        return stream

    @staticmethod
    def _check_region_id(region_id: str) -> None:
        if (
            not region_id
            or region_id in (".", "..")
            or "/" in region_id
            or "\\" in region_id
            or "\0" in region_id
        ):
            raise InvalidRegionIdError(f"Region id {region_id!r} is not a valid file name")
