"""
SQL module for fluent statement building.

This module provides the chainable query builder, placeholder rewriting,
raw SQL expressions, and record-to-column binding for PostgreSQL's
numbered placeholder style.
"""

from .core.binding import db_column, extract_columns
from .core.expressions import RawExpr, SQLExpression
from .core.placeholders import rewrite_placeholders
from .dialects.postgresql import PostgreSQLDialect
from .operations.query import QueryBuilder

__all__ = [
    "db_column",
    "extract_columns",
    "RawExpr",
    "SQLExpression",
    "rewrite_placeholders",
    "PostgreSQLDialect",
    "QueryBuilder",
]
