from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

TEXT_FILTER = "Text files (*.txt);;All files (*)"


def show_error(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.critical(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    QMessageBox.warning(parent, title, message)


def confirm_delete(parent: QWidget, title: str) -> bool:
    answer = QMessageBox.question(
        parent,
        "Delete note",
        f"Delete the note '{title}'? Its file will be removed.",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return answer == QMessageBox.Yes


def ask_import_path(parent: QWidget, start_dir: Path) -> Path | None:
    path, _ = QFileDialog.getOpenFileName(parent, "Import text file", str(start_dir), TEXT_FILTER)
    return Path(path) if path else None


def ask_export_path(parent: QWidget, start_dir: Path, suggested_name: str) -> Path | None:
    path, _ = QFileDialog.getSaveFileName(
        parent, "Export note", str(start_dir / suggested_name), TEXT_FILTER
    )
    return Path(path) if path else None


def ask_notes_dir(parent: QWidget, start_dir: Path) -> Path | None:
    path = QFileDialog.getExistingDirectory(parent, "Choose the notes folder", str(start_dir))
    return Path(path) if path else None
