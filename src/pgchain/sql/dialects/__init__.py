"""SQL dialects package."""

from .postgresql import PostgreSQLDialect

__all__ = ["PostgreSQLDialect"]
