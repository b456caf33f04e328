from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from plain_notes.core.store import NoteStore
from plain_notes.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from plain_notes.settings import (
    APP_NAME, ORG_NAME, SettingsKeys, get_int, get_str, open_settings, resolve_notes_dir,
)
from plain_notes.ui.main_window import NotesWindow
from plain_notes.ui.theme import UiConfig, clamp_font_size, normalize_theme


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Plain text note taking")
    p.add_argument(
        "--notes-dir",
        type=Path,
        default=None,
        help="Folder holding one .txt file per note (default: last used, or ./notes)",
    )
    p.add_argument(
        "--theme",
        choices=("light", "dark"),
        default=None,
        help="Color theme (default: last used)",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to the console",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging(verbose=args.verbose)
    install_global_exception_hooks(log)

    app = QApplication(sys.argv[:1])
    app.setOrganizationName(ORG_NAME)
    app.setApplicationName(APP_NAME)

    settings = open_settings()
    notes_dir = resolve_notes_dir(args.notes_dir, get_str(settings, SettingsKeys.NOTES_DIR, ""))
    theme = args.theme or normalize_theme(get_str(settings, SettingsKeys.UI_THEME, "light"))
    font_size = clamp_font_size(get_int(settings, SettingsKeys.UI_FONT_SIZE, UiConfig.font_size))
    settings.setValue(SettingsKeys.NOTES_DIR, str(notes_dir))

    win = NotesWindow(
        NoteStore(notes_dir),
        config=UiConfig(theme=theme, font_size=font_size),
        settings=settings,
        log=log,
    )
    win.show()
    log.info("Application started, notes_dir=%s SID=%s", notes_dir, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
