"""Prepared statements produced by ``QueryBuilder.prepare()``."""

from typing import TYPE_CHECKING, Any, List, Optional

from pgchain.io import executor
from pgchain.io.executor import ExecResult

if TYPE_CHECKING:
    from pgchain.io.transaction import Transaction


class Statement:
    """
    A rendered statement bound to a connection or a transaction.

    The SQL text and arguments are snapshotted at preparation time; later
    changes to the builder do not affect the statement.

    Example:
        >>> stmt = QueryBuilder().select("id").from_("users").where("id = ?", 1).prepare(conn)
        >>> stmt.query_row()
        (1,)
    """

    def __init__(
        self,
        sql: str,
        args: List[Any],
        connection: Any = None,
        transaction: Optional["Transaction"] = None,
    ):
        self._sql = sql
        self._args = list(args)
        self._connection = connection
        self._tx = transaction

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def args(self) -> List[Any]:
        return list(self._args)

    def _target(self) -> Any:
        return executor.resolve_connection(self._connection, self._tx)

    def query(self) -> List[Any]:
        """Execute the statement and return all rows."""
        return executor.fetch_all(self._target(), self._sql, self._args)

    def query_row(self) -> Optional[Any]:
        """Execute the statement and return a single row (None if no rows)."""
        return executor.fetch_one(self._target(), self._sql, self._args)

    def exec(self) -> ExecResult:
        """Execute the statement and return the affected row count."""
        return executor.execute(self._target(), self._sql, self._args)

    def __str__(self) -> str:
        return self._sql

    def __repr__(self) -> str:
        return f"Statement(sql={self._sql!r}, args={self._args!r})"
