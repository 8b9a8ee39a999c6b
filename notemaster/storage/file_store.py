from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from notemaster.core.codec import decode_collection, encode_collection
from notemaster.core.errors import NoteFormatError, StorageWriteError
from notemaster.core.note import Note
from notemaster.settings import APP_NAME
from notemaster.storage.atomic import atomic_write_text

log = logging.getLogger(f"{APP_NAME}.storage")


@dataclass(frozen=True)
class NoteFileStore:
    """Whole-collection persistence to a single JSON file."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))

    def save(self, notes: Iterable[Note]) -> None:
        notes = list(notes)
        try:
            text = encode_collection(notes)
            atomic_write_text(self.path, text, encoding="utf-8")
        except (OSError, ValueError) as e:
            log.error("Saving notes failed: path=%s notes=%d error=%s", self.path, len(notes), e)
            raise StorageWriteError(self.path, "could not save notes") from e
        log.debug("Notes saved: path=%s notes=%d", self.path, len(notes))

    def load(self) -> list[Note]:
        """
        Read the collection back. A missing, unreadable or corrupt file
        yields an empty list; this never raises.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            log.debug("Notes file not found, starting empty: %s", self.path)
            return []
        except (OSError, UnicodeDecodeError) as e:
            log.warning("Notes file unreadable, starting empty: path=%s error=%s", self.path, e)
            return []

        try:
            notes = decode_collection(text)
        except NoteFormatError as e:
            log.warning("Notes file corrupt, starting empty: path=%s error=%s", self.path, e)
            return []

        log.debug("Notes loaded: path=%s notes=%d", self.path, len(notes))
        return notes
