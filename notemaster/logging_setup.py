from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler

from notemaster.settings import APP_NAME, LOG_DIR, LOG_PATH, NOTES_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"
LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 5

# QtMsgType -> logging level
_QT_LEVELS = {
    0: logging.DEBUG,     # QtDebugMsg
    1: logging.WARNING,   # QtWarningMsg
    2: logging.ERROR,     # QtCriticalMsg
    3: logging.CRITICAL,  # QtFatalMsg
    4: logging.INFO,      # QtInfoMsg
}


class EnsureSessionFilter(logging.Filter):
    """Records from notemaster.storage / notemaster.repository carry no session; add it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).setdefault("session", SESSION_ID)
        return msg, kwargs


def _handlers() -> list[logging.Handler]:
    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    fh = RotatingFileHandler(LOG_PATH, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    ch = logging.StreamHandler(sys.stdout or sys.stderr)
    ch.setLevel(logging.INFO)

    for h in (fh, ch):
        h.setFormatter(fmt)
        h.addFilter(session_filter)
    return [fh, ch]


def setup_logging() -> logging.Logger:
    """
    Configure the `notemaster` logger once per process.

    Library modules only create child loggers and never touch handlers, so
    tests that don't import this module keep plain root logging.
    """
    logger = logging.getLogger(APP_NAME)
    if logger.handlers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for h in _handlers():
        logger.addHandler(h)

    logger.info("Logging initialized. log_file=%s notes_file=%s", LOG_PATH, NOTES_PATH,
                extra={"session": SESSION_ID})
    return logger


log = SessionAdapter(setup_logging(), {})


def _excepthook(exc_type, exc, tb):
    log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
    sys.__excepthook__(exc_type, exc, tb)


def _qt_message_handler(mode, context, message):
    file = getattr(context, "file", None)
    line = getattr(context, "line", None)
    where = f"{file}:{line}" if file or line else "unknown"
    try:
        level = _QT_LEVELS.get(int(mode), logging.WARNING)
    except (TypeError, ValueError):
        level = logging.WARNING
    log.log(level, "Qt: %s | where=%s", message, where)


def install_global_exception_hooks() -> None:
    """Route uncaught Python exceptions and Qt's own messages into the app log."""
    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import qInstallMessageHandler
        qInstallMessageHandler(_qt_message_handler)
    except ImportError:
        log.exception("Failed to install Qt message handler")
        return
    log.info("Qt message handler installed")
