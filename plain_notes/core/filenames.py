# plain_notes/core/filenames.py

from __future__ import annotations

import re
import unicodedata

from plain_notes.core.errors import ValidationError


NOTE_EXTENSION = ".txt"

WINDOWS_RESERVED_NAMES = {
    "con", "prn", "aux", "nul",
    *(f"com{i}" for i in range(1, 10)),
    *(f"lpt{i}" for i in range(1, 10)),
}

INVALID_CHARS_RE = re.compile(r'[<>:"/\\|?*\u0000-\u001f]')

MAX_TITLE_LENGTH = 120
# common limit for one path component on Linux, macOS and Windows
MAX_FILENAME_BYTES = 255


def validate_title(title: str | None, extension: str = NOTE_EXTENSION) -> str:
    """
    Check that a note title can be used verbatim as a filename.

    The title is the persistence key, so it is never rewritten: a title that
    would need escaping is rejected and the user picks another one.
    Returns the title with surrounding whitespace removed.
    """
    name = (title or "").strip()
    if not name:
        raise ValidationError("Please enter a title for the note.")

    bad = sorted(set(INVALID_CHARS_RE.findall(name)))
    if bad:
        shown = " ".join(repr(ch)[1:-1] for ch in bad)
        raise ValidationError(f"The title contains characters not allowed in a file name: {shown}")

    if any(unicodedata.category(ch)[0] == "C" for ch in name):
        raise ValidationError("The title contains control characters.")

    if name in (".", ".."):
        raise ValidationError("The title cannot be '.' or '..'.")

    # Windows: no trailing dot or space
    if name.endswith("."):
        raise ValidationError("The title cannot end with a dot.")

    base = name.split(".", 1)[0].strip().lower()
    if base in WINDOWS_RESERVED_NAMES:
        raise ValidationError(f"'{name}' is a reserved device name.")

    if len(name) > MAX_TITLE_LENGTH:
        raise ValidationError(f"The title is longer than {MAX_TITLE_LENGTH} characters.")

    if len(note_filename(name, extension).encode("utf-8")) > MAX_FILENAME_BYTES:
        raise ValidationError("The title is too long for a file name.")

    return name


def note_filename(title: str, extension: str = NOTE_EXTENSION) -> str:
    return f"{title}{extension}"


def title_from_filename(name: str, extension: str = NOTE_EXTENSION) -> str:
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name
