"""
Logging configuration for applications embedding the clinic gateway client.

This module provides:
- JSON-formatted log output (single line per record) for log shippers
- A correlation id propagated via contextvars into every JSON log line
- A human-readable text format for local development

The library itself never configures logging on import; applications call
setup_logging() once at startup.

Log Structure (JSON):
{
    "timestamp": "2024-01-15T10:30:00.000Z",
    "level": "WARNING",
    "logger": "clinic_client.clients.api_client",
    "message": "Session expired or invalid",
    "correlation_id": "abc-123",
    "extra": {"status": 401, "path": "/patients"}
}

Usage:
    from clinic_client.core.logging_config import setup_logging, set_correlation_id

    setup_logging(level="DEBUG", json_format=True)
    set_correlation_id("checkout-42")
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from clinic_client.config import settings

# =============================================================================
# CORRELATION ID CONTEXT
# =============================================================================
# ContextVar keeps the id coroutine-safe when several calls run concurrently.

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get the correlation id of the current context."""
    return correlation_id_var.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation id for the current context/coroutine."""
    correlation_id_var.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation id."""
    correlation_id_var.set(None)


# =============================================================================
# JSON FORMATTER
# =============================================================================

# Attributes every LogRecord has; anything else came in through extra={...}
_STANDARD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class JSONFormatter(logging.Formatter):
    """Single-line JSON formatter with UTC timestamps."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_entry["correlation_id"] = correlation_id

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        }
        if extra:
            log_entry["extra"] = extra

        return json.dumps(log_entry, default=str, ensure_ascii=False)


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> None:
    """
    Configure logging for an application using clinic_client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.log_level (env LOG_LEVEL).
        json_format: If True, use JSON format; if False, use human-readable format.
            Defaults to settings.log_format == "json" (env LOG_FORMAT).
    """
    level = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.log_format.lower() == "json"

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    client_logger = logging.getLogger("clinic_client")
    client_logger.setLevel(level)
    client_logger.handlers = []  # Inherit from root
    client_logger.propagate = True

    # httpx logs every request at INFO; keep it quiet unless debugging
    logging.getLogger("httpx").setLevel(logging.DEBUG if level == "DEBUG" else logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"level": level, "format": "json" if json_format else "text"}
    )
