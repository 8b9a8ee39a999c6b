import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from notemaster.core.errors import StorageWriteError
from notemaster.core.note import Note
from notemaster.repository import NoteRepository
from notemaster.storage.file_store import NoteFileStore


@pytest.fixture
def store(tmp_path):
    return NoteFileStore(tmp_path / "notes.json")


@pytest.fixture
def repo(store):
    return NoteRepository.open(store)


def test_create_note(repo, store):
    note = Note("Groceries", "milk, eggs")
    repo.add_or_replace(note)

    notes = repo.list_all()
    assert len(notes) == 1
    assert notes[0].id == note.id
    assert notes[0].title == "Groceries"
    assert notes[0].content == "milk, eggs"
    assert store.load() == list(notes)


def test_add_same_id_twice_replaces(repo):
    note = Note("Todo", "first")
    repo.add_or_replace(note)
    repo.add_or_replace(note.edited(content="second"))

    matches = [n for n in repo.list_all() if n.id == note.id]
    assert len(matches) == 1
    assert matches[0].content == "second"
    assert matches[0].title == "Todo"


def test_replace_keeps_position(repo):
    a, b, c = Note("a", "1"), Note("b", "2"), Note("c", "3")
    for n in (a, b, c):
        repo.add_or_replace(n)
    repo.add_or_replace(b.edited(title="B"))

    assert [n.title for n in repo.list_all()] == ["a", "B", "c"]


def test_duplicate_titles_removed_by_id(repo, store):
    first = Note("Todo", "one")
    second = Note("Todo", "two")
    repo.add_or_replace(first)
    repo.add_or_replace(second)
    assert first.id != second.id

    assert repo.remove_by_id(first.id) is True

    remaining = repo.list_all()
    assert len(remaining) == 1
    assert remaining[0].id == second.id
    assert remaining[0].content == "two"
    assert store.load() == list(remaining)


def test_remove_missing_id_is_noop(repo):
    note = Note("a", "b")
    repo.add_or_replace(note)
    before = repo.list_all()

    assert repo.remove_by_id("no-such-id") is False
    assert repo.list_all() == before


def test_get(repo):
    note = Note("a", "b")
    repo.add_or_replace(note)

    assert repo.get(note.id) == note
    assert repo.get("missing") is None
    assert note.id in repo
    assert "missing" not in repo
    assert len(repo) == 1


def test_list_all_is_a_snapshot(repo):
    note = Note("a", "b")
    repo.add_or_replace(note)

    snap = repo.list_all()
    snap[0].title = "changed"
    note.content = "changed too"

    stored = repo.list_all()[0]
    assert stored.title == "a"
    assert stored.content == "b"
    assert isinstance(snap, tuple)


def test_reload_picks_up_external_write(repo, store):
    repo.add_or_replace(Note("mine", "x"))
    external = [Note("theirs", "y")]
    store.save(external)

    repo.reload()

    assert list(repo.list_all()) == external


def test_open_existing_file(store):
    notes = [Note("a", "1"), Note("b", "2")]
    store.save(notes)

    assert list(NoteRepository.open(store).list_all()) == notes


def test_open_corrupt_file_starts_empty(store):
    store.path.write_text("{broken", encoding="utf-8")
    assert NoteRepository.open(store).list_all() == ()


def test_write_failure_keeps_memory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    repo = NoteRepository(NoteFileStore(blocker / "notes.json"))
    note = Note("a", "b")

    with pytest.raises(StorageWriteError):
        repo.add_or_replace(note)

    assert repo.get(note.id) == note
