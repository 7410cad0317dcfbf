"""
psycopg execution helpers shared by prepared statements and raw queries.

Statements are run through ``psycopg.RawCursor``, which sends PostgreSQL's
native ``$1, $2, ...`` placeholders to the server unchanged. Driver errors
propagate unmodified.
"""

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from psycopg import RawCursor

from pgchain.config import get_settings
from pgchain.exceptions import StatementError
from pgchain.utils.logging import get_logger

if TYPE_CHECKING:
    from pgchain.io.transaction import Transaction

logger = get_logger(__name__)


@dataclass
class ExecResult:
    """Outcome of a statement executed for its side effects."""

    rowcount: int
    status: Optional[str] = None


def resolve_connection(
    connection: Any, transaction: Optional["Transaction"]
) -> Any:
    """
    Pick the connection a statement runs on.

    An attached transaction takes precedence over a plain connection.

    Raises:
        StatementError: If neither is available
    """
    if transaction is not None:
        return transaction.connection
    if connection is None:
        raise StatementError(
            "No connection or transaction available to execute the statement"
        )
    return connection


def _log_fields(sql: str, args: Sequence[Any]) -> dict:
    settings = get_settings()
    fields: dict = {"arg_count": len(args)}
    if settings.log_statements:
        fields["sql"] = sql
    if settings.log_arguments:
        fields["args"] = list(args)
    return fields


def _run(connection: Any, sql: str, args: Sequence[Any], fetch: str) -> Any:
    started = time.perf_counter()
    try:
        with RawCursor(connection) as cursor:
            cursor.execute(sql, list(args) if args else None)
            # description is None when the statement produced no result set
            if fetch == "all":
                result: Any = (
                    cursor.fetchall() if cursor.description is not None else []
                )
            elif fetch == "one":
                result = cursor.fetchone() if cursor.description is not None else None
            else:
                result = ExecResult(
                    rowcount=cursor.rowcount, status=cursor.statusmessage
                )
    except Exception as e:
        logger.error(
            "sql.statement.failed",
            error_type=type(e).__name__,
            error=str(e),
            **_log_fields(sql, args),
        )
        raise

    logger.debug(
        "sql.statement.executed",
        fetch=fetch,
        duration_ms=round((time.perf_counter() - started) * 1000, 3),
        **_log_fields(sql, args),
    )
    return result


def fetch_all(connection: Any, sql: str, args: Sequence[Any]) -> List[Any]:
    """Execute ``sql`` and return every row."""
    rows = _run(connection, sql, args, "all")
    return rows if rows else []


def fetch_one(connection: Any, sql: str, args: Sequence[Any]) -> Optional[Any]:
    """Execute ``sql`` and return the first row, or None when there is none."""
    return _run(connection, sql, args, "one")


def execute(connection: Any, sql: str, args: Sequence[Any]) -> ExecResult:
    """Execute ``sql`` for its side effects."""
    return _run(connection, sql, args, "exec")
