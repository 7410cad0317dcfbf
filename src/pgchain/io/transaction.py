"""
Transaction handles for psycopg connections.

``begin()`` switches the connection to transactional mode, applying any
isolation level / read-only options; the transaction opens with the first
statement run through it and ends with ``commit()`` or ``rollback()``, after
which the connection's previous settings are restored.
"""

from dataclasses import dataclass
from typing import Any, Optional

from psycopg import IsolationLevel

from pgchain.exceptions import TransactionError
from pgchain.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class TransactionOptions:
    """Options for starting a new transaction."""

    isolation: Optional[IsolationLevel] = None
    read_only: bool = False


class Transaction:
    """
    A database transaction on a single psycopg connection.

    Usable as a context manager: commits on clean exit and rolls back when the
    block raises.

    Example:
        >>> with begin(conn) as tx:
        ...     QueryBuilder().with_transaction(tx).update("accounts") \\
        ...         .set({"balance": 0}).where("id = ?", 7).prepare().exec()
    """

    def __init__(self, connection: Any, options: Optional[TransactionOptions] = None):
        self.connection = connection
        self.options = options
        self.done = False
        self._previous = (
            connection.autocommit,
            connection.isolation_level,
            connection.read_only,
        )

    def _apply_options(self) -> None:
        self.connection.autocommit = False
        if self.options is not None:
            if self.options.isolation is not None:
                self.connection.isolation_level = self.options.isolation
            self.connection.read_only = self.options.read_only

    def _restore(self) -> None:
        autocommit, isolation_level, read_only = self._previous
        self.connection.isolation_level = isolation_level
        self.connection.read_only = read_only
        self.connection.autocommit = autocommit

    def commit(self) -> None:
        """
        Commit the transaction.

        Raises:
            TransactionError: If already finished or the commit fails
        """
        if self.done:
            raise TransactionError("commit", "transaction already committed")

        try:
            self.connection.commit()
        except Exception as e:
            raise TransactionError(
                "commit", f"failed to commit transaction: {e}", original_error=e
            ) from e

        self.done = True
        self._restore()
        logger.info("sql.transaction.committed")

    def rollback(self) -> None:
        """
        Roll back the transaction.

        Raises:
            TransactionError: If already finished or the rollback fails
        """
        if self.done:
            raise TransactionError("rollback", "transaction already rolled back")

        try:
            self.connection.rollback()
        except Exception as e:
            raise TransactionError(
                "rollback", f"failed to rollback transaction: {e}", original_error=e
            ) from e

        self.done = True
        self._restore()
        logger.info("sql.transaction.rolled_back")

    def __enter__(self) -> "Transaction":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.done:
            return
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    def __repr__(self) -> str:
        state = "done" if self.done else "active"
        return f"Transaction({state})"


def begin_tx(
    connection: Any, options: Optional[TransactionOptions] = None
) -> Transaction:
    """
    Start a new transaction with options.

    Args:
        connection: psycopg connection
        options: Isolation level and read-only flag

    Raises:
        TransactionError: If the connection cannot enter a new transaction
    """
    try:
        tx = Transaction(connection, options)
        tx._apply_options()
    except Exception as e:
        error = TransactionError(
            "begin", f"failed to begin transaction: {e}", original_error=e
        )
        logger.error("sql.transaction.begin_failed", **error.to_dict())
        raise error from e

    logger.info(
        "sql.transaction.started",
        isolation=options.isolation.name if options and options.isolation else None,
        read_only=bool(options and options.read_only),
    )
    return tx


def begin(connection: Any) -> Transaction:
    """Start a new transaction with default options."""
    return begin_tx(connection, None)
