"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields
- Context binding support
- Dual output (stdout + optional file logging) via configure_logging()

Configuration:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from pgchain.utils.logging import configure_logging, get_logger
    >>> configure_logging()  # optional, once at application startup
    >>> logger = get_logger(__name__)
    >>> logger.info("sql.statement.executed", rowcount=3)
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping, Optional

import structlog
from structlog.types import EventDict, Processor

from pgchain.config import get_settings

# Sensitive key patterns for sanitization
SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
    re.compile(r"^dsn$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

LOGGER_NAMESPACE = "pgchain"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Example:
        >>> sanitize_for_logging({"password": "secret123", "user": "admin"})
        {'password': '[REDACTED]', 'user': 'admin'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings, falling back to the environment."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Settings validation failures must not break logging setup
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled via environment."""
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: pgchain-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"pgchain-{date_str}.log"


def _build_processors() -> list[Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


_PROCESSORS = _build_processors()

# Handlers installed by configure_logging(), replaced on each call
_installed_handlers: list[logging.Handler] = []


def configure_logging(level: Optional[int] = None) -> None:
    """Attach stdout (and optional file) handlers to the ``pgchain`` logger.

    Importing pgchain installs no handlers; applications that do not
    configure stdlib logging themselves call this once at startup.
    Repeated calls replace the handlers from the previous call.

    Args:
        level: Log level; defaults to the LOG_LEVEL setting
    """
    level = level if level is not None else _get_log_level()
    package_logger = logging.getLogger(LOGGER_NAMESPACE)

    for handler in _installed_handlers:
        package_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Add stdout handler (always enabled)
    stdout_handler = logging.StreamHandler()
    _installed_handlers.append(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(level)
        package_logger.addHandler(handler)
    package_logger.setLevel(level)


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    The logger wraps ``logging.getLogger(name)`` with pgchain's processor
    chain without touching the global structlog configuration.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(table="users", operation="insert")
        >>> logger.info("sql.statement.executed", rowcount=1)
    """
    return get_logger(LOGGER_NAMESPACE).bind(**kwargs)
