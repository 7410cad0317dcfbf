"""Connection helper backed by the configured DATABASE_URL."""

from typing import Any, Optional

import psycopg

from pgchain.config import get_settings
from pgchain.exceptions import ConfigurationError
from pgchain.utils.logging import get_logger

logger = get_logger(__name__)


def connect(url: Optional[str] = None, **kwargs: Any) -> psycopg.Connection:
    """
    Open a psycopg connection in autocommit mode.

    Pass ``autocommit=False`` to get psycopg's implicit-transaction behaviour.

    Args:
        url: Connection string; defaults to the configured DATABASE_URL
        **kwargs: Extra keyword arguments forwarded to ``psycopg.connect``

    Raises:
        ConfigurationError: If no URL is given and none is configured
        psycopg.OperationalError: If the server cannot be reached
    """
    settings = get_settings()
    conninfo = url or settings.get_database_connection_string()
    if not conninfo:
        raise ConfigurationError(
            "DATABASE_URL is not configured and no connection URL was given"
        )

    kwargs.setdefault("connect_timeout", settings.CONNECT_TIMEOUT)
    # Statements outside begin() commit immediately
    kwargs.setdefault("autocommit", True)
    connection = psycopg.connect(conninfo, **kwargs)
    logger.info("database.connection.opened", dsn=conninfo)
    return connection
