"""Levelled, key/value style logging to standard error."""

from __future__ import annotations

import enum
import logging
import sys
from typing import Any, NoReturn

_LABEL_WIDTH = 7

_COLORS = {
    logging.DEBUG: (0x5F, 0x5F, 0xFF),
    logging.INFO: (0x00, 0x80, 0x00),
    logging.WARNING: (0xFF, 0x88, 0x00),
    logging.ERROR: (0xFF, 0x00, 0x00),
}


class Level(enum.IntEnum):
    """Severity levels understood by :func:`set_level`."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    def __str__(self) -> str:
        return self.name.lower()


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _format_value(value: Any) -> str:
    text = str(value)
    if not text or any(ch.isspace() or ch in '"=' for ch in text):
        return _quote(text)
    return text


class _Formatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        level_name = str(Level(record.levelno)).upper()
        label = f" {level_name:<{_LABEL_WIDTH - 2}} "
        if sys.stderr.isatty():
            r, g, b = _COLORS[record.levelno]
            label = f"\x1b[1;38;2;{r};{g};{b}m{label}\x1b[0m"
        parts = [label, str(record.msg)]
        fields: dict[str, Any] = getattr(record, "fields", {})
        parts.extend(f"{key}={_format_value(value)}" for key, value in fields.items())
        return " ".join(parts)


class _StderrHandler(logging.Handler):
    """Writes to whatever ``sys.stderr`` currently is."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            sys.stderr.write(self.format(record) + "\n")
            sys.stderr.flush()
        except Exception:
            self.handleError(record)


def _build_logger() -> logging.Logger:
    log = logging.getLogger("dotx")
    log.propagate = False
    log.handlers.clear()
    handler = _StderrHandler()
    handler.setFormatter(_Formatter())
    log.addHandler(handler)
    log.setLevel(Level.INFO)
    return log


_log = _build_logger()


def debug(msg: Any, **kwargs: Any) -> None:
    """Log a debug message with optional key/value fields."""
    _log.debug(msg, extra={"fields": kwargs})


def info(msg: Any, **kwargs: Any) -> None:
    """Log an informational message with optional key/value fields."""
    _log.info(msg, extra={"fields": kwargs})


def warn(msg: Any, **kwargs: Any) -> None:
    """Log a warning with optional key/value fields."""
    _log.warning(msg, extra={"fields": kwargs})


def error(msg: Any, **kwargs: Any) -> NoReturn:
    """Log an error and terminate with exit status 1."""
    _log.error(msg, extra={"fields": kwargs})
    sys.exit(1)


def set_level(level: Level) -> None:
    """Set the lowest level that is written."""
    _log.setLevel(int(Level(level)))