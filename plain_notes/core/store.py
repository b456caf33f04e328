from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from plain_notes.core.filenames import NOTE_EXTENSION, validate_title
from plain_notes.core.models import Note
from plain_notes.vault.repo import NoteRepository

log = logging.getLogger(__name__)


class NoteStore:
    """
    In-memory list of notes mirrored to one file per note.

    The UI addresses notes by their position in this list. Every method
    runs synchronously; errors from disk writes reach the caller before
    the list is changed.
    """

    def __init__(
        self,
        notes_dir: Path,
        *,
        extension: str = NOTE_EXTENSION,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.repo = NoteRepository(Path(notes_dir), extension=extension)
        self._clock = clock
        self._notes: list[Note] = []

    @property
    def notes_dir(self) -> Path:
        return self.repo.notes_dir

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def titles(self) -> list[str]:
        return [n.title for n in self._notes]

    def get(self, index: int) -> Note | None:
        if 0 <= index < len(self._notes):
            return self._notes[index]
        return None

    def index_of(self, note: Note) -> int | None:
        for i, n in enumerate(self._notes):
            if n is note:
                return i
        return None

    def _find_title(self, title: str) -> int | None:
        for i, n in enumerate(self._notes):
            if n.title == title:
                return i
        return None

    # ---------- Persistence ----------
    def load_all(self) -> list[Note]:
        """
        Rebuild the list from the storage directory.

        Files that cannot be read are logged and skipped. Sorted by title,
        since directory order differs between platforms.
        """
        self.repo.ensure()
        loaded: list[Note] = []
        for path in self.repo.iter_note_files():
            try:
                text = self.repo.read_path(path)
                ts = self.repo.mtime(path)
            except (OSError, UnicodeDecodeError):
                log.warning("Skipping unreadable note file %s", path, exc_info=True)
                continue
            loaded.append(Note(title=self.repo.title_of(path), content=text, created=ts, modified=ts))

        loaded.sort(key=lambda n: (n.title.casefold(), n.title))
        self._notes = loaded
        log.info("Loaded %d notes from %s", len(loaded), self.notes_dir)
        return list(loaded)

    def save(self, title: str, content: str, existing_index: int | None = None) -> Note:
        """
        Write the note to disk, then update the list.

        With a valid `existing_index` the entry at that position is replaced
        and keeps its creation time; a changed title also removes the old
        file. Without one, an entry with the same title is replaced rather
        than duplicated. Raises ValidationError for bad titles and OSError
        when the write fails; in both cases nothing changes in memory.
        """
        title = validate_title(title, self.repo.extension)
        content = content or ""
        now = self._clock()

        target: int | None = None
        if existing_index is not None and self.get(existing_index) is not None:
            target = existing_index
        else:
            target = self._find_title(title)

        previous = self._notes[target] if target is not None else None
        if previous is not None:
            note = previous.revised(title, content, now=now)
        else:
            note = Note.new(title, content, now=now)

        self.repo.ensure()
        path = self.repo.write(title, content)
        log.info("Saved note %r to %s", title, path)

        if target is None:
            self._notes.append(note)
            return note

        self._notes[target] = note
        # another entry with this title now points at the file just written
        for i in reversed(range(len(self._notes))):
            if i != target and self._notes[i].title == title:
                del self._notes[i]
                if i < target:
                    target -= 1

        if previous is not None and previous.title != title and self._find_title(previous.title) is None:
            self._remove_file(previous.title)
        return note

    def delete(self, index: int) -> None:
        """Remove the note at `index` and its file. Out-of-range indexes are ignored."""
        note = self.get(index)
        if note is None:
            log.debug("Delete ignored, no note at index %s", index)
            return
        del self._notes[index]
        if self._find_title(note.title) is None:
            self._remove_file(note.title)
        log.info("Deleted note %r", note.title)

    def _remove_file(self, title: str) -> None:
        try:
            if not self.repo.remove(title):
                log.info("No file to delete for note %r", title)
        except OSError:
            log.warning("Could not delete file for note %r", title, exc_info=True)

    # ---------- Search ----------
    def search(self, query: str) -> list[Note]:
        if not query:
            return list(self._notes)
        return [n for n in self._notes if n.matches(query)]

    def search_indexed(self, query: str) -> list[tuple[int, Note]]:
        """Like search(), paired with each note's position in the store."""
        if not query:
            return list(enumerate(self._notes))
        return [(i, n) for i, n in enumerate(self._notes) if n.matches(query)]
