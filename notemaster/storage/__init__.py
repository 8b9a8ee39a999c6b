from .atomic import atomic_write_text
from .file_store import NoteFileStore

__all__ = ["atomic_write_text", "NoteFileStore"]
