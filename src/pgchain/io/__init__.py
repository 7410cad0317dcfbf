"""
PostgreSQL execution layer for pgchain.

Runs rendered statements through psycopg with native ``$N`` placeholders,
and manages transactions and connections.
"""

from .connection import connect
from .executor import ExecResult
from .raw import RawQuery
from .statement import Statement
from .transaction import Transaction, TransactionOptions, begin, begin_tx

__all__ = [
    "connect",
    "ExecResult",
    "RawQuery",
    "Statement",
    "Transaction",
    "TransactionOptions",
    "begin",
    "begin_tx",
]
