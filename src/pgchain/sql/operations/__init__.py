"""Statement builders package."""

from .query import QueryBuilder

__all__ = ["QueryBuilder"]
