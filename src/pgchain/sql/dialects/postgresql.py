"""
PostgreSQL-specific SQL dialect implementation.

Provides the clause fragments the query builder assembles, using
PostgreSQL's numbered placeholder style.
"""

from typing import List, Sequence, Tuple

from ..core.placeholders import format_placeholder


class PostgreSQLDialect:
    """PostgreSQL SQL dialect implementation."""

    name = "postgresql"

    def placeholder(self, index: int) -> str:
        """Render the placeholder for the 1-based argument ``index``."""
        return format_placeholder(index)

    def select_clause(self, columns: Sequence[str]) -> str:
        return f"SELECT {', '.join(columns)}"

    def from_clause(self, table: str) -> str:
        return f"FROM {table}"

    def order_by_clause(self, columns: Sequence[str]) -> str:
        return f"ORDER BY {', '.join(columns)}"

    def update_clause(self, table: str) -> str:
        return f"UPDATE {table}"

    def set_clause(self, assignments: List[Tuple[str, str]]) -> str:
        """
        Build a SET clause from ``(column, rendered value)`` pairs.

        Args:
            assignments: Column names paired with a placeholder or literal SQL

        Returns:
            SET clause text

        Examples:
            >>> PostgreSQLDialect().set_clause([("name", "$1"), ("hits", "hits + 1")])
            'SET name = $1, hits = hits + 1'
        """
        rendered = ", ".join(f"{column} = {value}" for column, value in assignments)
        return f"SET {rendered}"

    def insert_clause(self, table: str, columns: Sequence[str]) -> str:
        return f"INSERT INTO {table} ({', '.join(columns)})"

    def values_clause(self, placeholders: Sequence[str]) -> str:
        return f"VALUES ({', '.join(placeholders)})"

    def delete_clause(self, table: str) -> str:
        return f"DELETE FROM {table}"

    def returning_columns(self, columns: Sequence[str]) -> str:
        return ", ".join(columns)
