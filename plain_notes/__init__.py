from .core import (
    ImportFailed,
    Note,
    NoteError,
    ValidationError,
    export_note,
    format_dates,
    import_text,
)
from .core.store import NoteStore

__version__ = "0.1.0"

__all__ = [
    'ImportFailed',
    'Note',
    'NoteError',
    'ValidationError',
    'export_note',
    'format_dates',
    'import_text',
    'NoteStore',
]
