from __future__ import annotations

import logging
from pathlib import Path

from plain_notes.core.errors import ImportFailed
from plain_notes.vault.filesystem import atomic_write_text

log = logging.getLogger(__name__)


def render_export(title: str, date_label: str, content: str) -> str:
    """
    Human-readable bundle for sharing a note outside the app:
    title line, date line, blank line, "Content:" label, body.
    """
    return f"Title: {title}\n{date_label}\n\nContent:\n{content}"


def export_note(path: Path, title: str, date_label: str, content: str) -> Path:
    """Write an export bundle to `path`. OSError propagates to the caller."""
    path = Path(path)
    atomic_write_text(path, render_export(title, date_label, content), encoding="utf-8")
    log.info("Exported note %r to %s", title, path)
    return path


def import_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a whole text file for the draft editor. Nothing is saved."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ImportFailed(path, f"not a {encoding} text file") from exc
    except OSError as exc:
        raise ImportFailed(path, exc.strerror or str(exc)) from exc
    log.info("Imported %d characters from %s", len(text), path)
    return text
