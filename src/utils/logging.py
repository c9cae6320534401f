"""Structured JSON logging for the API and scripts.

Every record becomes one JSON line. Fields passed via ``extra={...}`` are
copied onto the line, except credentials (passwords, hashes, tokens), whose
values are replaced with ``[REDACTED]``.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Any

REDACTED = "[REDACTED]"

# Compared case-insensitively with underscores removed
_SENSITIVE_KEYS = {'password', 'passwordhash', 'token', 'accesstoken', 'authorization', 'secret'}


def _is_sensitive(key: str) -> bool:
    return key.replace('_', '').lower() in _SENSITIVE_KEYS


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname',
        'process', 'processName', 'relativeCreated', 'thread', 'threadName',
        'exc_info', 'exc_text', 'stack_info', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"userId": "123"}) puts userId on record.__dict__
        for key, value in record.__dict__.items():
            if key in self._STANDARD_ATTRS or callable(value):
                continue
            log_data[key] = REDACTED if _is_sensitive(key) else value

        # default=str keeps Decimal/datetime extras from breaking the log line
        return json.dumps(log_data, default=str)


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_structured_logging(level: int | str | None = None):
    """Configure structured JSON logging for the application.

    Args:
        level: Root log level; falls back to the LOG_LEVEL env var, then INFO.
            Unknown level names also fall back to INFO.

    Also routes uvicorn access logs through the same handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers = [handler]

    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)  # Only warnings/errors from access log
