"""Document store protocol and implementations.

A store is an opaque byte bucket under one fixed key.  It knows nothing
about the document format; see ``requestie.persistence`` for that.
"""

import logging
from pathlib import Path
from typing import Protocol

from requestie.constants import APP_KEY

logger = logging.getLogger(__name__)

DEFAULT_STATE_DIR = Path("~/.local/share/requestie").expanduser()


class DocumentStore(Protocol):
    """Protocol that all storage backends must satisfy."""

    def load(self) -> bytes | None:
        """Return the last saved bytes, or None if nothing was saved."""
        ...

    def save(self, data: bytes) -> None:
        """Persist ``data``, replacing whatever was saved before."""
        ...


class MemoryStore:
    """In-memory store, optionally seeded with previously saved bytes."""

    def __init__(self, data: bytes | None = None) -> None:
        self._data = data
        self.save_count = 0

    def load(self) -> bytes | None:
        return self._data

    def save(self, data: bytes) -> None:
        self._data = data
        self.save_count += 1

    def clear(self) -> None:
        self._data = None


class FileStore:
    """Stores the document in ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a crash mid-save leaves the previous state intact.
    """

    def __init__(self, directory: Path = DEFAULT_STATE_DIR, key: str = APP_KEY) -> None:
        self._path = Path(directory) / f"{key}.json"

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> bytes | None:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return None

    def save(self, data: bytes) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_bytes(data)
        tmp_path.replace(self._path)
        logger.info("wrote %d bytes to %s", len(data), self._path)

    def clear(self) -> None:
        """Delete the stored document, if any."""
        self._path.unlink(missing_ok=True)
