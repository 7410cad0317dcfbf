"""
pgchain - fluent SQL statement building for PostgreSQL

Code is organized in layers
- sql/ builds statement text and the ordered argument list (no I/O)
- io/ executes statements through psycopg and manages transactions
- config/ and utils/ carry settings and structured logging
"""

from pgchain.exceptions import (
    ConfigurationError,
    PgChainError,
    StatementError,
    TransactionError,
)
from pgchain.io import (
    ExecResult,
    RawQuery,
    Statement,
    Transaction,
    TransactionOptions,
    begin,
    begin_tx,
    connect,
)
from pgchain.sql import (
    PostgreSQLDialect,
    QueryBuilder,
    RawExpr,
    SQLExpression,
    db_column,
)
from pgchain.utils.logging import configure_logging

__version__ = "0.1.0"
__all__ = [
    # Building
    "QueryBuilder",
    "RawExpr",
    "SQLExpression",
    "PostgreSQLDialect",
    "db_column",
    # Execution
    "Statement",
    "RawQuery",
    "ExecResult",
    "Transaction",
    "TransactionOptions",
    "begin",
    "begin_tx",
    "connect",
    # Logging
    "configure_logging",
    # Errors
    "PgChainError",
    "ConfigurationError",
    "StatementError",
    "TransactionError",
]
