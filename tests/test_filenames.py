import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plain_notes.core.errors import ValidationError
from plain_notes.core.filenames import (
    MAX_FILENAME_BYTES,
    MAX_TITLE_LENGTH,
    note_filename,
    title_from_filename,
    validate_title,
)


def test_basic():
    assert validate_title("Hello World") == "Hello World"


def test_strips_whitespace():
    assert validate_title("  Groceries \n") == "Groceries"


def test_empty():
    with pytest.raises(ValidationError):
        validate_title("   ")
    with pytest.raises(ValidationError):
        validate_title(None)


def test_slashes():
    with pytest.raises(ValidationError) as err:
        validate_title("a/b\\c")
    assert "/" in str(err.value)


def test_reserved_windows():
    with pytest.raises(ValidationError):
        validate_title("CON")
    with pytest.raises(ValidationError):
        validate_title("lpt1.backup")


def test_dots():
    with pytest.raises(ValidationError):
        validate_title("..")
    with pytest.raises(ValidationError):
        validate_title("draft.")
    assert validate_title("v1.2 notes") == "v1.2 notes"


def test_control_characters():
    with pytest.raises(ValidationError):
        validate_title("tab\there")
    with pytest.raises(ValidationError):
        validate_title("zero\u200bwidth")


def test_length_limit():
    assert validate_title("x" * MAX_TITLE_LENGTH)
    with pytest.raises(ValidationError):
        validate_title("x" * (MAX_TITLE_LENGTH + 1))


def test_unicode_titles_allowed():
    assert validate_title("Заметка über café") == "Заметка über café"


def test_filename_mapping():
    assert note_filename("Groceries") == "Groceries.txt"
    assert title_from_filename("Groceries.txt") == "Groceries"
    assert title_from_filename("notes.txt.txt") == "notes.txt"
    assert note_filename("a", ".md") == "a.md"


def test_dot_prefixed_titles_allowed():
    assert validate_title(".plan") == ".plan"


def test_byte_length_limit_counts_extension():
    # 84 * 3 bytes + ".txt" = 256 bytes
    assert validate_title("日" * 83) == "日" * 83
    with pytest.raises(ValidationError):
        validate_title("日" * 84)
    assert validate_title("日" * 84, extension="") == "日" * 84
    assert MAX_FILENAME_BYTES == 255
