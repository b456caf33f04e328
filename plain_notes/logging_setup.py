from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from plain_notes.settings import LOG_PATH, LOGGER_NAME

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5


class EnsureSessionFilter(logging.Filter):
    """Stamp records from plain getLogger() callers with the session id."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def _file_handler(log_path: Path) -> logging.Handler | None:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError:
        return None


def setup_logging(*, verbose: bool = False, log_path: Path = LOG_PATH) -> SessionAdapter:
    """
    Attach handlers to the package logger once. Modules keep using
    logging.getLogger(__name__) and inherit them.

    The file always gets DEBUG; the console gets INFO, or DEBUG with
    `verbose`. An unwritable log directory leaves console logging only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    adapter = SessionAdapter(logger, {})

    if logger.handlers:
        return adapter

    formatter = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    console = logging.StreamHandler(sys.stdout or sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    handlers: list[logging.Handler] = [console]

    file_handler = _file_handler(Path(log_path))
    if file_handler is not None:
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(session_filter)
        logger.addHandler(handler)

    if file_handler is None:
        adapter.warning("Cannot open log file %s, logging to console only", log_path)
    else:
        adapter.info("Logging initialized. log_file=%s", log_path)
    return adapter


def _qt_levels() -> dict:
    from PySide6.QtCore import QtMsgType

    return {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }


def install_global_exception_hooks(log: logging.LoggerAdapter) -> None:
    """Send uncaught exceptions and Qt's own diagnostics to the log."""

    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler

        levels = _qt_levels()

        def _qt_message_handler(mode, context, message):
            where = f"{getattr(context, 'file', None) or '?'}:{getattr(context, 'line', 0)}"
            log.log(levels.get(mode, logging.WARNING), "Qt: %s | where=%s", message, where)

        qInstallMessageHandler(_qt_message_handler)
        log.debug("Qt message handler installed")
    except Exception:
        log.exception("Failed to install Qt message handler")
