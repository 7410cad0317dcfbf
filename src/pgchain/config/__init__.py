"""Configuration management for pgchain.

Usage:
    >>> from pgchain.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.LOG_LEVEL)
"""

from pgchain.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
