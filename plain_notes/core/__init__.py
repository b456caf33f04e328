from .errors import ImportFailed, NoteError, ValidationError
from .exchange import export_note, import_text, render_export
from .filenames import NOTE_EXTENSION, validate_title
from .models import Note, format_dates, format_timestamp

__all__ = [
    'ImportFailed',
    'NoteError',
    'ValidationError',
    'export_note',
    'import_text',
    'render_export',
    'NOTE_EXTENSION',
    'validate_title',
    'Note',
    'format_dates',
    'format_timestamp',
]
