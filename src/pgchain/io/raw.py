"""Pass-through queries that skip the builder entirely."""

from typing import TYPE_CHECKING, Any, List, Optional

from pgchain.io import executor
from pgchain.io.executor import ExecResult

if TYPE_CHECKING:
    from pgchain.io.transaction import Transaction


class RawQuery:
    """
    Hand-written SQL with its arguments, stored verbatim.

    No placeholder rewriting happens here: write ``$1``-style placeholders
    directly.

    Example:
        >>> rows = (
        ...     QueryBuilder()
        ...     .raw("SELECT id FROM users WHERE email = $1", "a@example.com")
        ...     .with_db(conn)
        ...     .query()
        ... )
    """

    def __init__(self, sql: str, args: Optional[List[Any]] = None):
        self._sql = sql
        self._args = list(args or [])
        self._connection: Any = None
        self._tx: Optional["Transaction"] = None

    def with_db(self, connection: Any) -> "RawQuery":
        """Set the connection used for execution."""
        self._connection = connection
        return self

    def with_tx(self, tx: "Transaction") -> "RawQuery":
        """Set the transaction used for execution (takes precedence)."""
        self._tx = tx
        return self

    @property
    def args(self) -> List[Any]:
        return list(self._args)

    def query(self) -> List[Any]:
        target = executor.resolve_connection(self._connection, self._tx)
        return executor.fetch_all(target, self._sql, self._args)

    def query_row(self) -> Optional[Any]:
        target = executor.resolve_connection(self._connection, self._tx)
        return executor.fetch_one(target, self._sql, self._args)

    def exec(self) -> ExecResult:
        target = executor.resolve_connection(self._connection, self._tx)
        return executor.execute(target, self._sql, self._args)

    def __str__(self) -> str:
        return self._sql

    def __repr__(self) -> str:
        return f"RawQuery(sql={self._sql!r}, args={self._args!r})"
