from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QSettings

from plain_notes.core.filenames import NOTE_EXTENSION

__all__ = [
    "APP_NAME", "ORG_NAME", "LOGGER_NAME", "LOG_DIR", "LOG_PATH",
    "NOTE_EXTENSION", "DEFAULT_NOTES_DIR", "SettingsKeys",
    "open_settings", "get_str", "get_int", "resolve_notes_dir",
]

APP_NAME = "plain-notes"
ORG_NAME = "plain-notes"
LOGGER_NAME = "plain_notes"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

DEFAULT_NOTES_DIR = Path.cwd() / "notes"


@dataclass(frozen=True)
class SettingsKeys:
    UI_THEME: str = "ui/theme"
    UI_GEOMETRY: str = "ui/geometry"
    UI_SPLITTER: str = "ui/splitter_sizes"
    UI_FONT_SIZE: str = "ui/font_size"
    NOTES_DIR: str = "notes/dir"
    LAST_IMPORT_DIR: str = "exchange/last_import_dir"
    LAST_EXPORT_DIR: str = "exchange/last_export_dir"


def open_settings() -> QSettings:
    return QSettings(ORG_NAME, APP_NAME)


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def get_int(settings: QSettings, key: str, default: int) -> int:
    try:
        return int(settings.value(key, default))
    except Exception:
        return default


def resolve_notes_dir(cli_value: Path | None, stored_value: str | None) -> Path:
    """
    Storage directory precedence: --notes-dir flag, then the directory
    remembered from the last session, then ./notes.
    """
    if cli_value is not None:
        return Path(cli_value).expanduser()
    stored = (stored_value or "").strip()
    if stored:
        return Path(stored).expanduser()
    return DEFAULT_NOTES_DIR
