"""Exceptions raised by the pgchain execution layer.

Statement building itself never raises; these cover execution targets,
transaction lifecycle and configuration.
"""

from typing import Dict, Literal, Optional


class PgChainError(Exception):
    """Base class for pgchain errors."""


class ConfigurationError(PgChainError):
    """Raised when required configuration (e.g. DATABASE_URL) is missing."""


class StatementError(PgChainError):
    """Raised when a statement has neither a connection nor a transaction."""


class TransactionError(PgChainError):
    """Structured error for transaction lifecycle failures."""

    def __init__(
        self,
        operation: Literal["begin", "commit", "rollback"],
        message: str,
        original_error: Optional[Exception] = None,
    ):
        self.operation = operation
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "TransactionError",
            "operation": self.operation,
            "message": str(self),
            "original_error_type": (
                type(self.original_error).__name__ if self.original_error else None
            ),
            "original_error_message": (
                str(self.original_error) if self.original_error else None
            ),
        }
