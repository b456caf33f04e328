import sys
import os
from datetime import datetime

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plain_notes.core.models import Note, format_dates, format_timestamp


def test_new_note_has_equal_timestamps():
    ts = datetime(2024, 1, 2, 3, 4, 5)
    note = Note.new("T", "c", now=ts)
    assert note.created == note.modified == ts


def test_revised_keeps_created():
    created = datetime(2024, 1, 1, 8, 0, 0)
    later = datetime(2024, 1, 3, 8, 0, 0)
    note = Note.new("T", "c", now=created).revised("T2", "c2", now=later)
    assert (note.title, note.content) == ("T2", "c2")
    assert note.created == created
    assert note.modified == later


def test_matches_title_or_content():
    note = Note.new("Shopping", "Work deadline")
    assert note.matches("shop")
    assert note.matches("WORK")
    assert not note.matches("holiday")


def test_format_dates():
    note = Note(
        title="T",
        content="",
        created=datetime(2024, 3, 9, 14, 5, 7),
        modified=datetime(2024, 3, 10, 9, 0, 0),
    )
    assert format_timestamp(note.created) == "2024-03-09 14:05:07"
    assert format_dates(note) == "Created: 2024-03-09 14:05:07 | Last Modified: 2024-03-10 09:00:00"
