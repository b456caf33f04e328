from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Note:
    """
    One saved note.

    The title doubles as the file name, so two notes with equal titles
    share a file. Timestamps are not stored in the file itself: a note
    read from disk gets its file's mtime for both of them.
    """
    title: str
    content: str
    created: datetime
    modified: datetime

    @classmethod
    def new(cls, title: str, content: str, *, now: datetime | None = None) -> "Note":
        ts = now or datetime.now()
        return cls(title=title, content=content, created=ts, modified=ts)

    def revised(self, title: str, content: str, *, now: datetime | None = None) -> "Note":
        """Same note after an edit: keeps `created`, bumps `modified`."""
        return replace(self, title=title, content=content, modified=now or datetime.now())

    def matches(self, query: str) -> bool:
        q = query.lower()
        return q in self.title.lower() or q in self.content.lower()


def format_timestamp(ts: datetime) -> str:
    return ts.strftime(TIMESTAMP_FORMAT)


def format_dates(note: Note) -> str:
    return (
        f"Created: {format_timestamp(note.created)}"
        f" | Last Modified: {format_timestamp(note.modified)}"
    )
