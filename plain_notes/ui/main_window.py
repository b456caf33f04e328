from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, QSettings, Slot
from PySide6.QtGui import QAction, QActionGroup, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QListWidget, QListWidgetItem, QPlainTextEdit, QLineEdit, QLabel,
    QPushButton, QSplitter,
)

from plain_notes.core.errors import NoteError, ValidationError
from plain_notes.core.exchange import export_note, import_text
from plain_notes.core.filenames import NOTE_EXTENSION
from plain_notes.core.models import Note, format_dates
from plain_notes.core.store import NoteStore
from plain_notes.settings import SettingsKeys, get_str
from plain_notes.ui import dialogs
from plain_notes.ui.qt_utils import blocked_signals, read_int_list, remember
from plain_notes.ui.theme import PALETTES, UiConfig, build_stylesheet, normalize_theme
from plain_notes.logging_setup import SessionAdapter

INDEX_ROLE = Qt.UserRole + 1
UNSAVED_LABEL = "Not saved yet"


class NotesWindow(QMainWindow):
    """
    Editor window. Holds the draft (title field + editor) and a list of
    titles; every change to saved notes goes through the NoteStore.
    """

    def __init__(self, store: NoteStore, *, config: UiConfig, settings: QSettings, log: SessionAdapter):
        super().__init__()
        self.store = store
        self.config = config
        self.settings = settings
        self.log = log

        self.setWindowTitle("Note Taking App")
        self.resize(config.window_width, config.window_height)

        # UI
        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Title")
        self.search = QLineEdit()
        self.search.setPlaceholderText("Search titles and text…")
        self.search.setClearButtonEnabled(True)
        self.listw = QListWidget()
        self.editor = QPlainTextEdit()
        self.date_label = QLabel()
        self.date_label.setObjectName("dateLabel")

        self.btn_new = QPushButton("New")
        self.btn_save = QPushButton("Save")
        self.btn_delete = QPushButton("Delete")

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        left_layout.addWidget(self.search)
        left_layout.addWidget(self.listw)

        buttons = QHBoxLayout()
        buttons.addWidget(self.btn_new)
        buttons.addWidget(self.btn_save)
        buttons.addWidget(self.btn_delete)
        buttons.addStretch(1)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(8, 8, 8, 8)
        right_layout.addWidget(self.title_edit)
        right_layout.addWidget(self.editor, 1)
        right_layout.addWidget(self.date_label)
        right_layout.addLayout(buttons)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)
        self.setCentralWidget(self.splitter)

        # Signals
        self.search.textChanged.connect(self.refresh_list)
        self.listw.itemSelectionChanged.connect(self._on_select_note)
        self.btn_new.clicked.connect(self.new_note)
        self.btn_save.clicked.connect(self.save_note)
        self.btn_delete.clicked.connect(self.delete_note)

        self._build_menu()
        self.apply_config(config)
        self._restore_geometry()

        self.reload_notes()

    # ---------- Setup ----------
    def _build_menu(self) -> None:
        menubar = self.menuBar()
        filem = menubar.addMenu("&File")

        act_new = QAction("New note", self)
        act_new.setShortcut(QKeySequence.New)
        act_new.triggered.connect(self.new_note)

        act_save = QAction("Save", self)
        act_save.setShortcut(QKeySequence.Save)
        act_save.triggered.connect(self.save_note)

        act_delete = QAction("Delete", self)
        act_delete.setShortcut(QKeySequence.Delete)
        act_delete.setShortcutContext(Qt.WidgetShortcut)
        self.listw.addAction(act_delete)
        act_delete.triggered.connect(self.delete_note)

        act_import = QAction("Import…", self)
        act_import.setShortcut("Ctrl+I")
        act_import.triggered.connect(self.import_file)

        act_export = QAction("Export…", self)
        act_export.setShortcut("Ctrl+E")
        act_export.triggered.connect(self.export_current)

        act_open_dir = QAction("Open notes folder…", self)
        act_open_dir.triggered.connect(self.choose_notes_dir)

        act_quit = QAction("Quit", self)
        act_quit.setShortcut(QKeySequence.Quit)
        act_quit.triggered.connect(self.close)

        for act in (act_new, act_save, act_delete):
            filem.addAction(act)
        filem.addSeparator()
        filem.addAction(act_import)
        filem.addAction(act_export)
        filem.addSeparator()
        filem.addAction(act_open_dir)
        filem.addSeparator()
        filem.addAction(act_quit)

        viewm = menubar.addMenu("&View")
        group = QActionGroup(self)
        group.setExclusive(True)
        self._theme_actions: dict[str, QAction] = {}
        for name in PALETTES:
            act = QAction(f"Theme: {name.capitalize()}", self, checkable=True)
            act.triggered.connect(lambda _checked=False, n=name: self.set_theme(n))
            group.addAction(act)
            viewm.addAction(act)
            self._theme_actions[name] = act

        act_bigger = QAction("Larger text", self)
        act_bigger.setShortcut(QKeySequence.ZoomIn)
        act_bigger.triggered.connect(lambda: self.change_font_size(1))
        act_smaller = QAction("Smaller text", self)
        act_smaller.setShortcut(QKeySequence.ZoomOut)
        act_smaller.triggered.connect(lambda: self.change_font_size(-1))
        viewm.addSeparator()
        viewm.addAction(act_bigger)
        viewm.addAction(act_smaller)

        act_find = QAction("Search", self)
        act_find.setShortcut(QKeySequence.Find)
        act_find.triggered.connect(lambda: self.search.setFocus())
        viewm.addSeparator()
        viewm.addAction(act_find)

    def apply_config(self, config: UiConfig) -> None:
        self.config = config
        self.setStyleSheet(build_stylesheet(config))
        act = self._theme_actions.get(normalize_theme(config.theme))
        if act is not None:
            act.setChecked(True)

    def _restore_geometry(self) -> None:
        try:
            geo = self.settings.value(SettingsKeys.UI_GEOMETRY)
            if geo:
                self.restoreGeometry(geo)
            sizes = read_int_list(self.settings, SettingsKeys.UI_SPLITTER)
            if sizes:
                self.splitter.setSizes(sizes)
        except Exception:
            self.log.exception("Failed to restore window geometry")

    def closeEvent(self, event):  # type: ignore[override]
        remember(self.settings, SettingsKeys.UI_GEOMETRY, self.saveGeometry())
        remember(self.settings, SettingsKeys.UI_SPLITTER, self.splitter.sizes())
        super().closeEvent(event)

    # ---------- List ----------
    def reload_notes(self) -> None:
        try:
            self.store.load_all()
        except OSError as exc:
            self.log.exception("Cannot open notes folder %s", self.store.notes_dir)
            dialogs.show_error(self, "Notes folder", f"Cannot open {self.store.notes_dir}:\n{exc}")
        self.setWindowTitle(f"Note Taking App - {self.store.notes_dir}")
        self.refresh_list()
        self.new_note()

    def refresh_list(self, *_args) -> None:
        """Show the notes matching the search box; rows carry store indexes."""
        selected = self._selected_note()
        with blocked_signals(self.listw):
            self.listw.clear()
            for index, note in self.store.search_indexed(self.search.text()):
                item = QListWidgetItem(note.title)
                item.setData(INDEX_ROLE, index)
                self.listw.addItem(item)
                if note is selected:
                    self.listw.setCurrentItem(item)

    def _selected_index(self) -> int | None:
        item = self.listw.currentItem()
        if item is None or not item.isSelected():
            return None
        return int(item.data(INDEX_ROLE))

    def _selected_note(self) -> Note | None:
        index = self._selected_index()
        return self.store.get(index) if index is not None else None

    def _select_store_index(self, index: int) -> None:
        with blocked_signals(self.listw):
            for row in range(self.listw.count()):
                item = self.listw.item(row)
                if int(item.data(INDEX_ROLE)) == index:
                    self.listw.setCurrentItem(item)
                    return
            self.listw.clearSelection()

    @Slot()
    def _on_select_note(self) -> None:
        note = self._selected_note()
        if note is None:
            return
        self._show_note(note)

    def _show_note(self, note: Note) -> None:
        with blocked_signals(self.title_edit, self.editor):
            self.title_edit.setText(note.title)
            self.editor.setPlainText(note.content)
        self.date_label.setText(format_dates(note))

    # ---------- Actions ----------
    @Slot()
    def new_note(self) -> None:
        with blocked_signals(self.listw):
            self.listw.clearSelection()
            self.listw.setCurrentRow(-1)
        self.title_edit.clear()
        self.editor.clear()
        self.date_label.setText(UNSAVED_LABEL)
        self.title_edit.setFocus()

    @Slot()
    def save_note(self) -> None:
        try:
            note = self.store.save(
                self.title_edit.text(),
                self.editor.toPlainText(),
                self._selected_index(),
            )
        except ValidationError as exc:
            dialogs.show_warning(self, "Save note", str(exc))
            return
        except OSError as exc:
            self.log.exception("Save failed: %s", self.title_edit.text())
            dialogs.show_error(self, "Save note", f"Could not write the note file:\n{exc}")
            return

        self.refresh_list()
        index = self.store.index_of(note)
        if index is not None:
            self._select_store_index(index)
        self._show_note(note)
        self.statusBar().showMessage(f"Saved '{note.title}'", 3000)

    @Slot()
    def delete_note(self) -> None:
        index = self._selected_index()
        note = self.store.get(index) if index is not None else None
        if note is None:
            return
        if not dialogs.confirm_delete(self, note.title):
            return
        self.store.delete(index)
        self.refresh_list()
        self.new_note()
        self.statusBar().showMessage(f"Deleted '{note.title}'", 3000)

    @Slot()
    def import_file(self) -> None:
        start = Path(get_str(self.settings, SettingsKeys.LAST_IMPORT_DIR, str(Path.home())))
        path = dialogs.ask_import_path(self, start)
        if path is None:
            return
        try:
            text = import_text(path)
        except NoteError as exc:
            self.log.warning("Import failed: %s", exc)
            dialogs.show_error(self, "Import", str(exc))
            return
        remember(self.settings, SettingsKeys.LAST_IMPORT_DIR, str(path.parent))
        self.editor.setPlainText(text)
        if not self.title_edit.text().strip():
            self.title_edit.setText(path.stem)

    @Slot()
    def export_current(self) -> None:
        title = self.title_edit.text().strip() or "Untitled"
        start = Path(get_str(self.settings, SettingsKeys.LAST_EXPORT_DIR, str(Path.home())))
        path = dialogs.ask_export_path(self, start, f"{title}{NOTE_EXTENSION}")
        if path is None:
            return
        try:
            export_note(path, title, self.date_label.text(), self.editor.toPlainText())
        except OSError as exc:
            self.log.exception("Export failed: %s", path)
            dialogs.show_error(self, "Export", f"Could not write {path}:\n{exc}")
            return
        remember(self.settings, SettingsKeys.LAST_EXPORT_DIR, str(path.parent))
        self.statusBar().showMessage(f"Exported to {path}", 3000)

    @Slot()
    def choose_notes_dir(self) -> None:
        path = dialogs.ask_notes_dir(self, self.store.notes_dir)
        if path is None:
            self.log.info("Notes folder selection cancelled, keeping %s", self.store.notes_dir)
            return
        self.store = NoteStore(path, extension=self.store.repo.extension)
        remember(self.settings, SettingsKeys.NOTES_DIR, str(path))
        self.log.info("Notes folder selected: %s", path)
        self.reload_notes()

    def set_theme(self, name: str) -> None:
        self.apply_config(self.config.with_theme(name))
        remember(self.settings, SettingsKeys.UI_THEME, self.config.theme)

    def change_font_size(self, step: int) -> None:
        self.apply_config(self.config.with_font_size(self.config.font_size + step))
        remember(self.settings, SettingsKeys.UI_FONT_SIZE, self.config.font_size)
