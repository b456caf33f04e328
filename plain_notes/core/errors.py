from __future__ import annotations


class NoteError(Exception):
    """Base class for errors the UI reports to the user."""


class ValidationError(NoteError, ValueError):
    """Rejected input, raised before anything is written."""


class ImportFailed(NoteError):
    def __init__(self, path, reason: str):
        super().__init__(f"Cannot import {path}: {reason}")
        self.path = path
        self.reason = reason
