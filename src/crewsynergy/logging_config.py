"""Logging setup for crewsynergy.

LOG_LEVEL picks the level (DEBUG, INFO, WARNING, ERROR; default INFO) and
LOG_FORMAT picks the output ('text' or 'json'; default text). The CLI calls
configure_logging() once; library modules only use logging.getLogger(__name__).

Structured context travels through ``extra=``, e.g. the narrative service
attaches ``fallback_reason`` and ``narrative`` to every fallback warning. JSON
output nests those fields under "context"; text output appends them as
key=value pairs.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import IO, Any, ClassVar

NAMESPACE = "crewsynergy"

LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}
FORMATS = ("text", "json")

# Attributes every LogRecord carries; anything else arrived through extra=.
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Fields attached to a record with ``extra=``, sorted by name."""
    return {key: record.__dict__[key] for key in sorted(record.__dict__.keys() - _STANDARD_ATTRS)}


def _wants_source(record: logging.LogRecord) -> bool:
    return record.levelno == logging.DEBUG or record.levelno >= logging.ERROR


def _short_name(name: str) -> str:
    prefix = f"{NAMESPACE}."
    return name[len(prefix) :] if name.startswith(prefix) else name


class JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Keys: timestamp, level, logger, message, plus "context" for extra fields,
    "source" (path:line) for DEBUG and ERROR+ records, and "exception".
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = record_context(record)
        if context:
            payload["context"] = context
        if _wants_source(record):
            payload["source"] = f"{record.pathname}:{record.lineno}"
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Readable lines: ``TIME LEVEL [logger] message key=value (file:line)``.

    Logger names lose the package prefix, so ``crewsynergy.engine.matcher``
    prints as ``engine.matcher``.
    """

    COLORS: ClassVar[dict[int, str]] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET: ClassVar[str] = "\033[0m"

    def __init__(self, use_colors: bool = True, stream: IO[str] | None = None) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        target = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and target.isatty()

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        if self.use_colors:
            level = f"{self.COLORS.get(record.levelno, '')}{level}{self.RESET}"

        line = (
            f"{self.formatTime(record, self.datefmt)} {level} "
            f"[{_short_name(record.name)}] {record.getMessage()}"
        )
        context = record_context(record)
        if context:
            line += " " + " ".join(f"{key}={value}" for key, value in context.items())
        if _wants_source(record):
            line += f" ({record.filename}:{record.lineno})"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_log_level() -> int:
    """Level named by LOG_LEVEL; INFO when unset or unknown."""
    return LEVELS.get(os.environ.get("LOG_LEVEL", "").upper(), logging.INFO)


def get_log_format() -> str:
    """Format named by LOG_FORMAT; 'text' when unset or unknown."""
    name = os.environ.get("LOG_FORMAT", "").lower()
    return name if name in FORMATS else "text"


def configure_logging(
    level: int | None = None,
    format_type: str | None = None,
    use_colors: bool = True,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Install a single handler on the crewsynergy logger.

    Repeated calls replace the previous handler. The package logger stops
    propagating so records are not printed twice by a root handler.

    Args:
        level: Log level; defaults to LOG_LEVEL.
        format_type: 'text' or 'json'; defaults to LOG_FORMAT.
        use_colors: Color text output when the stream is a terminal.
        stream: Destination; defaults to stderr.

    Returns:
        The installed handler.
    """
    level = get_log_level() if level is None else level
    format_type = get_log_format() if format_type is None else format_type

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if format_type == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter(use_colors=use_colors, stream=handler.stream))

    package_logger = logging.getLogger(NAMESPACE)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    package_logger.debug(
        "Logging configured",
        extra={"log_level": logging.getLevelName(level), "log_format": format_type},
    )
    return handler
