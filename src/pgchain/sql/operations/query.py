"""
Fluent SQL statement builder.

Accumulates clause fragments in call order, rewrites ``?`` markers into
numbered PostgreSQL placeholders and keeps the bound arguments in the same
order, so placeholder ``$N`` always refers to ``args[N - 1]``.
"""

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from ..core.binding import derive_table_name, extract_columns
from ..core.expressions import is_sql_expression
from ..core.placeholders import allocate_placeholders, rewrite_placeholders
from ..dialects.postgresql import PostgreSQLDialect

if TYPE_CHECKING:
    from pgchain.io.raw import RawQuery
    from pgchain.io.statement import Statement
    from pgchain.io.transaction import Transaction

Assignments = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


class QueryBuilder:
    """
    Chainable builder for SELECT/INSERT/UPDATE/DELETE statements.

    Every clause method appends a fragment and returns the same builder.
    Rendering (``to_sql()`` / ``str()``) only joins the fragments, so it can be
    repeated without side effects.

    A builder is single-owner mutable state and is not safe for concurrent
    mutation.

    Example:
        >>> qb = (
        ...     QueryBuilder()
        ...     .select("*")
        ...     .from_("users")
        ...     .where("age > ?", 18)
        ...     .and_where("status = ?", "active")
        ...     .order_by("created_at DESC")
        ... )
        >>> qb.to_sql()
        'SELECT * FROM users WHERE age > $1 AND status = $2 ORDER BY created_at DESC'
        >>> qb.args
        [18, 'active']
    """

    def __init__(self, dialect: Optional[PostgreSQLDialect] = None):
        """
        Initialize an empty builder.

        Args:
            dialect: SQL dialect producing clause fragments (PostgreSQL by default)
        """
        self.dialect = dialect or PostgreSQLDialect()
        self._parts: List[str] = []
        self._args: List[Any] = []
        self._arg_index = 0
        self._where_open = False
        self._table: Optional[str] = None
        self._tx: Optional["Transaction"] = None

    # ------------------------------------------------------------------ state

    @property
    def args(self) -> List[Any]:
        """Bound arguments in placeholder order (a copy)."""
        return list(self._args)

    @property
    def placeholder_count(self) -> int:
        """Number of numbered placeholders generated so far."""
        return self._arg_index

    @property
    def table(self) -> Optional[str]:
        """Table associated with the statement, if any."""
        return self._table

    @property
    def transaction(self) -> Optional["Transaction"]:
        return self._tx

    def with_transaction(self, tx: "Transaction") -> "QueryBuilder":
        """Attach a transaction used when the statement is executed."""
        self._tx = tx
        return self

    # --------------------------------------------------------------- helpers

    def _start_statement(self, fragment: str) -> None:
        self._where_open = False
        self._parts.append(fragment)

    def _append_condition(self, condition: str, args: Tuple[Any, ...]) -> None:
        rewritten, self._arg_index = rewrite_placeholders(condition, self._arg_index)
        self._parts.append(rewritten)
        self._args.extend(args)

    # ---------------------------------------------------------------- SELECT

    def select(self, *columns: str) -> "QueryBuilder":
        self._start_statement(self.dialect.select_clause(columns))
        return self

    def from_(self, table: str) -> "QueryBuilder":
        self._table = table
        self._parts.append(self.dialect.from_clause(table))
        return self

    def where(self, condition: str, *args: Any) -> "QueryBuilder":
        """
        Add a condition, opening the WHERE clause on first use.

        Further ``where()`` calls on the same statement are joined with AND.
        """
        if self._where_open:
            self._parts.append("AND")
        elif self._parts:
            self._parts.append("WHERE")
        self._where_open = True
        self._append_condition(condition, args)
        return self

    def and_where(self, condition: str, *args: Any) -> "QueryBuilder":
        """Add an AND condition. The caller is responsible for an open WHERE."""
        self._parts.append("AND")
        self._append_condition(condition, args)
        return self

    def or_where(self, condition: str, *args: Any) -> "QueryBuilder":
        """Add an OR condition. The caller is responsible for an open WHERE."""
        self._parts.append("OR")
        self._append_condition(condition, args)
        return self

    def order_by(self, *columns: str) -> "QueryBuilder":
        self._parts.append(self.dialect.order_by_clause(columns))
        return self

    # ---------------------------------------------------------------- UPDATE

    def update(self, table: str) -> "QueryBuilder":
        self._table = table
        self._start_statement(self.dialect.update_clause(table))
        return self

    def set(self, assignments: Assignments) -> "QueryBuilder":
        """
        Add a SET clause.

        Values implementing ``sql()`` (e.g. ``RawExpr``) are embedded verbatim
        and take no placeholder; every other value is bound. Assignments are
        emitted in the caller's order.

        Args:
            assignments: Mapping or iterable of ``(column, value)`` pairs
        """
        items = assignments.items() if isinstance(assignments, Mapping) else assignments

        rendered: List[Tuple[str, str]] = []
        for column, value in items:
            if is_sql_expression(value):
                rendered.append((column, value.sql()))
            else:
                self._arg_index += 1
                rendered.append((column, self.dialect.placeholder(self._arg_index)))
                self._args.append(value)

        self._parts.append(self.dialect.set_clause(rendered))
        return self

    # ---------------------------------------------------------------- INSERT

    def insert(self, table: str, *columns: str) -> "QueryBuilder":
        self._table = table
        self._start_statement(self.dialect.insert_clause(table, columns))
        return self

    def values(self, *values: Any) -> "QueryBuilder":
        placeholders, self._arg_index = allocate_placeholders(len(values), self._arg_index)
        self._parts.append(self.dialect.values_clause(placeholders))
        self._args.extend(values)
        return self

    # ---------------------------------------------------------------- DELETE

    def delete(self, table: str) -> "QueryBuilder":
        self._table = table
        self._start_statement(self.dialect.delete_clause(table))
        return self

    def delete_from(self, table: str) -> "QueryBuilder":
        """Alias for :meth:`delete`."""
        return self.delete(table)

    def returning(self, *columns: str) -> "QueryBuilder":
        if columns:
            self._parts.append("RETURNING")
            self._parts.append(self.dialect.returning_columns(columns))
        return self

    # ---------------------------------------------------------------- render

    def to_sql(self) -> str:
        """Render the statement text."""
        return " ".join(self._parts)

    def build(self) -> Tuple[str, List[Any]]:
        """Render the statement text together with its arguments."""
        return self.to_sql(), self.args

    def __str__(self) -> str:
        return self.to_sql()

    def __repr__(self) -> str:
        return f"QueryBuilder(sql={self.to_sql()!r}, args={self._args!r})"

    # --------------------------------------------------------------- binding

    def bind(self, record: Any) -> Dict[str, Any]:
        """
        Map a tagged record to ``{column: value}``.

        Assigns the lower-cased type name as table when none is set yet.
        Classes (rather than instances) bind to nothing and leave the table
        unset.

        Example:
            >>> from dataclasses import dataclass
            >>> from pgchain.sql.core.binding import db_column
            >>> @dataclass
            ... class User:
            ...     name: str = db_column("name")
            >>> qb = QueryBuilder()
            >>> qb.bind(User(name="ada"))
            {'name': 'ada'}
            >>> qb.table
            'user'
        """
        columns = extract_columns(record)
        if not self._table and not isinstance(record, type):
            self._table = derive_table_name(record)
        return columns

    # ------------------------------------------------------------- execution

    def prepare(self, connection: Any = None) -> "Statement":
        """
        Snapshot the rendered statement for execution.

        Args:
            connection: psycopg connection; optional when a transaction is attached

        Returns:
            Statement bound to the connection or the attached transaction
        """
        from pgchain.io.statement import Statement

        return Statement(
            sql=self.to_sql(),
            args=self.args,
            connection=connection,
            transaction=self._tx,
        )

    def raw(self, sql: str, *args: Any) -> "RawQuery":
        """Wrap hand-written SQL; no placeholder rewriting is applied."""
        from pgchain.io.raw import RawQuery

        return RawQuery(sql, list(args))
