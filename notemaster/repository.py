from __future__ import annotations

import logging

from notemaster.core.note import Note
from notemaster.settings import APP_NAME
from notemaster.storage.file_store import NoteFileStore

log = logging.getLogger(f"{APP_NAME}.repository")


class NoteRepository:
    """
    In-memory owner of the note collection.

    Every mutation rewrites the whole collection through the store before
    returning. If the write fails the in-memory change is kept and
    StorageWriteError propagates; memory stays the source of truth until the
    next successful save.
    """

    def __init__(self, store: NoteFileStore):
        self.store = store
        self._notes: list[Note] = []

    @classmethod
    def open(cls, store: NoteFileStore) -> "NoteRepository":
        repo = cls(store)
        repo.reload()
        return repo

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return self._index_of(note_id) is not None

    def _index_of(self, note_id: object) -> int | None:
        for i, n in enumerate(self._notes):
            if n.id == note_id:
                return i
        return None

    def add_or_replace(self, note: Note) -> None:
        stored = note.copy()
        idx = self._index_of(stored.id)
        if idx is None:
            self._notes.append(stored)
            log.info("Note added: id=%s title=%r", stored.id, stored.title)
        else:
            self._notes[idx] = stored
            log.info("Note replaced: id=%s title=%r", stored.id, stored.title)
        self._persist()

    def remove_by_id(self, note_id: str) -> bool:
        idx = self._index_of(note_id)
        if idx is None:
            log.debug("remove_by_id: no note with id=%s", note_id)
        else:
            removed = self._notes.pop(idx)
            log.info("Note removed: id=%s title=%r", removed.id, removed.title)
        # rewrite even on a miss
        self._persist()
        return idx is not None

    def get(self, note_id: str) -> Note | None:
        idx = self._index_of(note_id)
        if idx is None:
            return None
        return self._notes[idx].copy()

    def list_all(self) -> tuple[Note, ...]:
        return tuple(n.copy() for n in self._notes)

    def reload(self) -> None:
        self._notes = self.store.load()
        log.info("Notes reloaded: path=%s notes=%d", self.store.path, len(self._notes))

    def _persist(self) -> None:
        self.store.save(self._notes)
