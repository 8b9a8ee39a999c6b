from __future__ import annotations

import json
from typing import Any, Iterable

from notemaster.core.errors import NoteFormatError
from notemaster.core.note import Note, NoteKind

FORMAT_VERSION = 1

_FIELDS = ("kind", "id", "title", "content")


def note_to_record(note: Note) -> dict[str, str]:
    return {
        "kind": note.kind.value,
        "id": note.id,
        "title": note.title,
        "content": note.content,
    }


def note_from_record(record: Any) -> Note:
    if not isinstance(record, dict):
        raise NoteFormatError(f"note record must be an object, got {type(record).__name__}")

    for name in _FIELDS:
        if name not in record:
            raise NoteFormatError(f"note record is missing {name!r}")
        if not isinstance(record[name], str):
            raise NoteFormatError(f"note field {name!r} must be a string")

    if not record["id"]:
        raise NoteFormatError("note record has an empty id")

    try:
        kind = NoteKind(record["kind"])
    except ValueError:
        raise NoteFormatError(f"unknown note kind {record['kind']!r}") from None

    return Note.restore(record["id"], record["title"], record["content"], kind)


def encode_collection(notes: Iterable[Note]) -> str:
    doc = {
        "format": FORMAT_VERSION,
        "notes": [note_to_record(n) for n in notes],
    }
    return json.dumps(doc, ensure_ascii=False, indent=2) + "\n"


def decode_collection(text: str) -> list[Note]:
    """
    Parse a whole notes document. Any invalid record rejects the document.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise NoteFormatError(f"not a JSON document: {e}") from e
    except RecursionError as e:
        # pathologically nested input
        raise NoteFormatError("notes document is nested too deeply") from e

    if not isinstance(doc, dict):
        raise NoteFormatError("notes document must be a JSON object")
    fmt = doc.get("format")
    # bool is an int subclass; true must not pass for format 1
    if type(fmt) is not int or fmt != FORMAT_VERSION:
        raise NoteFormatError(f"unsupported notes format {fmt!r}")

    records = doc.get("notes")
    if not isinstance(records, list):
        raise NoteFormatError("notes document has no 'notes' list")

    notes: list[Note] = []
    seen: set[str] = set()
    for record in records:
        note = note_from_record(record)
        if note.id in seen:
            raise NoteFormatError(f"duplicate note id {note.id!r}")
        seen.add(note.id)
        notes.append(note)
    return notes
