"""Logging configuration helpers for the mood journal."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict


_COLOR_CODES = {
    "red": "\033[31m",
    "yellow": "\033[33m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "magenta": "\033[35m",
}

_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename", "module",
    "exc_info", "exc_text", "stack_info", "lineno", "funcName", "created",
    "msecs", "relativeCreated", "thread", "threadName", "processName", "process",
    "taskName", "name",
}


def _environment() -> str:
    return os.getenv("MOODLOG_ENVIRONMENT", "dev").lower()


def color_enabled() -> bool:
    flag = os.getenv("MOODLOG_LOG_COLOR", "")
    if not flag:
        return _environment() in {"local", "dev", "test"}
    return flag == "1"


def colorize(text: str, color: str = "red") -> str:
    if not color_enabled():
        return text
    prefix = _COLOR_CODES.get(color, "")
    suffix = "\033[0m" if prefix else ""
    return f"{prefix}{text}{suffix}"


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter that respects extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class JournalContextFilter(logging.Filter):
    """Stamp every record with the service name and deployment environment.

    Fields passed through ``extra=`` win over these defaults.
    """

    def __init__(self, service: str = "moodlog", environment: str | None = None) -> None:
        super().__init__()
        self.service = service
        self.environment = environment or _environment()

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = self.service
        if not hasattr(record, "environment"):
            record.environment = self.environment
        return True


class ColorTextFormatter(logging.Formatter):
    """Formatter that colorizes log output for human-friendly console viewing."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if record.levelno >= logging.ERROR:
            return colorize(formatted, "red")
        if record.levelno >= logging.WARNING:
            return colorize(formatted, "yellow")
        return formatted


def configure_logging() -> None:
    """Configure global logging from environment."""

    environment = _environment()
    default_level = "DEBUG" if environment in {"local", "dev", "test"} else "INFO"
    log_level = os.getenv("MOODLOG_LOG_LEVEL", default_level).upper()
    log_format = os.getenv("MOODLOG_LOG_FORMAT", "json").lower()

    formatter_name = "json" if log_format == "json" else "text"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonFormatter,
                },
                "text": {
                    "()": ColorTextFormatter,
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                },
            },
            "filters": {
                "journal_context": {
                    "()": JournalContextFilter,
                    "service": os.getenv("MOODLOG_SERVICE_NAME", "moodlog"),
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "filters": ["journal_context"],
                    "level": log_level,
                }
            },
            "root": {
                "handlers": ["console"],
                "level": log_level,
            },
            "loggers": {
                # httpx logs every request at INFO; keep it out of the journal's own log stream.
                "httpx": {"level": "WARNING"},
            },
        }
    )


__all__ = ["ColorTextFormatter", "JournalContextFilter", "JsonFormatter", "colorize", "configure_logging"]
