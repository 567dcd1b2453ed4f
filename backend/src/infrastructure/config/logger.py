"""Logging configuration for the booking backend."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

APP_LOGGER_NAME = "labormatch"
CONTEXT_ATTR = "context"


def log_context(**fields: Any) -> dict[str, Any]:
    """
    Build the ``extra`` argument that attaches booking fields to a record.

    Example:
        logger.info("Application refused", extra=log_context(job_id=job.id))
    """
    return {CONTEXT_ATTR: {key: value for key, value in fields.items() if value is not None}}


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    context = getattr(record, CONTEXT_ATTR, None)
    return context if isinstance(context, dict) else {}


class JSONFormatter(logging.Formatter):
    """One JSON object per line; booking context goes under "context"."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": _record_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        context = _record_context(record)
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # UUIDs, Decimals and dates in the context are written as strings
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Single-line text for development, colored when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color:
            color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
            reset = self.COLORS["RESET"]
        else:
            color = reset = ""

        timestamp = _record_time(record).strftime("%Y-%m-%d %H:%M:%S")
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8s}{reset} - "
            f"{record.name} - {record.getMessage()}"
        )

        context = _record_context(record)
        if context:
            log_message += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logger(
    name: str = APP_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Install the single stdout handler on the application logger.

    Module loggers from get_logger() are children of this logger, so they
    share the handler. Calling it again replaces the handler.

    Args:
        name: Logger name
        level: Log level name
        log_format: "json" or "text"
        stream: Output stream, stdout by default

    Returns:
        Configured logger instance

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = _parse_level(level)
    stream = stream or sys.stdout

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)

    if log_format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter(use_color=stream.isatty())

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """
    Get logger instance.

    Names are nested under the application logger so the handler
    installed by setup_logger() applies to them.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if name == APP_LOGGER_NAME or name.startswith(f"{APP_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
