from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from PySide6.QtCore import QObject, QSettings

log = logging.getLogger(__name__)


@contextmanager
def blocked_signals(*widgets: QObject) -> Iterator[None]:
    """Fill widgets from the store without firing their change handlers."""
    previous = [(w, w.blockSignals(True)) for w in widgets if w is not None]
    try:
        yield
    finally:
        for w, was_blocked in reversed(previous):
            try:
                w.blockSignals(was_blocked)
            except RuntimeError:
                # widget deleted while blocked
                pass


def read_int_list(settings: QSettings, key: str) -> list[int]:
    """
    Splitter sizes come back as a list, a single value or a "200,600"
    string depending on the platform backend.
    """
    raw = settings.value(key)
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = raw.replace(",", " ").split()
    elif not isinstance(raw, (list, tuple)):
        raw = [raw]
    out: list[int] = []
    for value in raw:
        try:
            out.append(int(value))
        except (TypeError, ValueError):
            log.debug("Ignoring non-integer %r under %s", value, key)
    return out


def remember(settings: QSettings, key: str, value) -> None:
    """Store a UI preference; losing one is not worth interrupting the user."""
    try:
        settings.setValue(key, value)
    except Exception:
        log.warning("Could not store setting %s", key, exc_info=True)
