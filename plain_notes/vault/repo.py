from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterator

from plain_notes.core.filenames import NOTE_EXTENSION, note_filename, title_from_filename
from plain_notes.vault.filesystem import atomic_write_text


@dataclass(frozen=True)
class NoteRepository:
    """Plain file access for one storage directory, one file per note."""
    notes_dir: Path
    extension: str = NOTE_EXTENSION
    encoding: str = "utf-8"

    def ensure(self) -> None:
        self.notes_dir.mkdir(parents=True, exist_ok=True)

    def note_path(self, title: str) -> Path:
        return self.notes_dir / note_filename(title, self.extension)

    def iter_note_files(self) -> Iterator[Path]:
        # top level only; temp files from atomic writes never carry the extension
        for path in self.notes_dir.iterdir():
            if path.name == self.extension or not path.name.endswith(self.extension):
                continue
            if path.is_file():
                yield path

    def title_of(self, path: Path) -> str:
        return title_from_filename(path.name, self.extension)

    def read_path(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)

    def mtime(self, path: Path) -> datetime:
        return datetime.fromtimestamp(path.stat().st_mtime)

    def write(self, title: str, text: str) -> Path:
        path = self.note_path(title)
        atomic_write_text(path, text, encoding=self.encoding)
        return path

    def remove(self, title: str) -> bool:
        """Delete the note file. Returns False if there was nothing to delete."""
        path = self.note_path(title)
        if not path.exists():
            return False
        path.unlink()
        return True
