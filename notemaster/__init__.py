from .core.note import Note, NoteKind
from .core.errors import NoteMasterError, NoteFormatError, StorageWriteError
from .storage.file_store import NoteFileStore
from .repository import NoteRepository

__all__ = ["Note",
           "NoteKind",
           "NoteMasterError",
           "NoteFormatError",
           "StorageWriteError",
           "NoteFileStore",
           "NoteRepository",
           ]
