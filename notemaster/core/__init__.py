from .note import Note, NoteKind, kind_label
from .codec import note_to_record, note_from_record, encode_collection, decode_collection
from .errors import NoteMasterError, NoteFormatError, StorageWriteError

__all__ = ["Note",
           "NoteKind",
           "kind_label",
           "note_to_record",
           "note_from_record",
           "encode_collection",
           "decode_collection",
           "NoteMasterError",
           "NoteFormatError",
           "StorageWriteError",
           ]
