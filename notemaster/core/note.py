from __future__ import annotations

import uuid
from enum import Enum
from typing import Callable


class NoteKind(str, Enum):
    TEXT = "text"


_KIND_LABELS: dict[NoteKind, str] = {
    NoteKind.TEXT: "Text Note",
}


def kind_label(kind: NoteKind) -> str:
    return _KIND_LABELS[kind]


def new_note_id() -> str:
    return str(uuid.uuid4())


class Note:
    """
    A single user-authored note.

    `id` is assigned once and never changes; `title` and `content` are plain
    mutable attributes. The kind tag selects how the note is rendered, new
    kinds are added to NoteKind and to the renderer table below.
    """

    __slots__ = ("_id", "title", "content", "kind")

    def __init__(self, title: str, content: str, *, kind: NoteKind = NoteKind.TEXT):
        self._id = new_note_id()
        self.title = title
        self.content = content
        self.kind = NoteKind(kind)

    @classmethod
    def restore(cls, note_id: str, title: str, content: str, kind: NoteKind = NoteKind.TEXT) -> "Note":
        """Rebuild a note with a previously issued id (persistence only)."""
        note = cls.__new__(cls)
        note._id = note_id
        note.title = title
        note.content = content
        note.kind = NoteKind(kind)
        return note

    @property
    def id(self) -> str:
        return self._id

    def copy(self) -> "Note":
        return Note.restore(self._id, self.title, self.content, self.kind)

    def edited(self, *, title: str | None = None, content: str | None = None) -> "Note":
        """Copy with the same id and the given fields replaced."""
        note = self.copy()
        if title is not None:
            note.title = title
        if content is not None:
            note.content = content
        return note

    def render(self) -> str:
        return _RENDERERS[self.kind](self)

    def __eq__(self, other):
        if not isinstance(other, Note):
            return NotImplemented
        return (self._id, self.kind, self.title, self.content) == (
            other._id, other.kind, other.title, other.content
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Note(id={self._id!r}, kind={self.kind.value!r}, title={self.title!r})"


def _render_text(note: Note) -> str:
    return f"{kind_label(note.kind)} - Title: {note.title}\nContent: {note.content}"


_RENDERERS: dict[NoteKind, Callable[[Note], str]] = {
    NoteKind.TEXT: _render_text,
}
