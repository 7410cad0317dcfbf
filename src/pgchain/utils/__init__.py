"""Shared utilities for pgchain."""

from .logging import (
    bind_context,
    configure_logging,
    get_logger,
    sanitize_for_logging,
)

__all__ = [
    "bind_context",
    "configure_logging",
    "get_logger",
    "sanitize_for_logging",
]
