import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from notemaster.core.note import Note, NoteKind, kind_label


def test_new_note_gets_fresh_id():
    a = Note("Groceries", "milk, eggs")
    b = Note("Groceries", "milk, eggs")

    assert a.id
    assert a.id != b.id
    assert a.kind is NoteKind.TEXT


def test_id_is_read_only():
    note = Note("A", "b")
    with pytest.raises(AttributeError):
        note.id = "other"


def test_set_title_keeps_id():
    note = Note("Old", "body")
    before = note.id
    note.title = "New"

    assert note.title == "New"
    assert note.id == before


def test_render_text_note():
    note = Note("Groceries", "milk, eggs")
    assert note.render() == "Text Note - Title: Groceries\nContent: milk, eggs"


def test_render_is_pure():
    note = Note("T", "C")
    assert note.render() == note.render()
    assert note.title == "T" and note.content == "C"


def test_edited_keeps_id_and_source_note():
    note = Note("Todo", "one")
    changed = note.edited(content="two")

    assert changed.id == note.id
    assert changed.title == "Todo"
    assert changed.content == "two"
    assert note.content == "one"


def test_equality_and_copy():
    note = Note("T", "C")
    dup = note.copy()

    assert dup == note
    assert dup is not note
    dup.title = "X"
    assert dup != note
    assert note != Note("T", "C")


def test_restore_keeps_given_id():
    note = Note.restore("abc", "T", "C", NoteKind.TEXT)
    assert note.id == "abc"
    assert note == Note.restore("abc", "T", "C")
    assert (note.title, note.content, note.kind) == ("T", "C", NoteKind.TEXT)


def test_kind_label():
    assert kind_label(NoteKind.TEXT) == "Text Note"


def test_restore_does_not_generate_an_id(monkeypatch):
    import notemaster.core.note as note_mod

    def fail():
        raise AssertionError("new id generated")

    monkeypatch.setattr(note_mod, "new_note_id", fail)
    assert Note.restore("abc", "T", "C").id == "abc"
