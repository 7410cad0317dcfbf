"""Core SQL utilities package."""

from .binding import db_column, derive_table_name, extract_columns
from .expressions import RawExpr, SQLExpression, is_sql_expression
from .placeholders import (
    allocate_placeholders,
    format_placeholder,
    rewrite_placeholders,
)

__all__ = [
    "db_column",
    "derive_table_name",
    "extract_columns",
    "RawExpr",
    "SQLExpression",
    "is_sql_expression",
    "allocate_placeholders",
    "format_placeholder",
    "rewrite_placeholders",
]
