from __future__ import annotations

from pathlib import Path


class NoteMasterError(Exception):
    """Base class for all errors raised by notemaster."""


class NoteFormatError(NoteMasterError, ValueError):
    """Persisted notes could not be decoded."""


class StorageWriteError(NoteMasterError):
    """The note collection could not be written to disk.

    The in-memory collection is still valid; only the file is stale.
    """

    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)
