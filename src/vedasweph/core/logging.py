"""
vedasweph Structured JSON Logging

Provides structured logging with JSON output for production environments.
"""

import json
import logging
import re
import sys

from typing import Any

# Attributes every LogRecord carries; anything else came from extra={...}
_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "getMessage",
    "exc_info",
    "exc_text",
    "stack_info",
    "message",
}

_TOKEN_RE = re.compile(r"(?i)(token=)[^&\s\"]+")
_AUTH_RE = re.compile(r"(?i)(authorization:\s*bearer\s+)[^\s\"]+")


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging output"""

    def _redact(self, text: str) -> str:
        """Redact token query params and bearer credentials."""
        text = _TOKEN_RE.sub(r"\1[REDACTED]", text)
        return _AUTH_RE.sub(r"\1[REDACTED]", text)

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record as JSON

        Args:
            record: Python logging record

        Returns:
            JSON-formatted log string
        """
        base = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": self._redact(record.getMessage()),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in base:
                base[key] = value

        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO", format_json: bool = True) -> None:
    """
    Setup structured logging for vedasweph

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Whether to use JSON formatting
    """
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if format_json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(
    name: str, extra_fields: dict[str, Any] | None = None
) -> logging.Logger | logging.LoggerAdapter:
    """
    Get logger with optional extra fields

    Args:
        name: Logger name (usually __name__)
        extra_fields: Additional fields to include in all log messages

    Returns:
        Logger, or a LoggerAdapter carrying extra_fields
    """
    logger = logging.getLogger(name)

    if extra_fields:
        return logging.LoggerAdapter(logger, extra_fields)

    return logger


def get_engine_logger(platform: str) -> logging.LoggerAdapter:
    """Get logger for EngineAdapter implementations"""
    return get_logger(
        f"vedasweph.engine.{platform}",
        {"layer": "engine", "platform": platform},
    )


def get_api_logger(endpoint: str) -> logging.LoggerAdapter:
    """Get logger for API endpoints"""
    return get_logger(f"vedasweph.api.{endpoint}", {"layer": "api", "type": "endpoint"})
