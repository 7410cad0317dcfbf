"""Raw SQL expressions that bypass parameter binding."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SQLExpression(Protocol):
    """Anything that renders itself to a literal SQL fragment."""

    def sql(self) -> str: ...


class RawExpr:
    """
    Literal SQL embedded verbatim in an assignment list.

    Example:
        >>> RawExpr("count + 1").sql()
        'count + 1'
    """

    __slots__ = ("_text",)

    def __init__(self, text: str):
        self._text = text

    def sql(self) -> str:
        return self._text

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, RawExpr):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"RawExpr({self._text!r})"


def is_sql_expression(value: Any) -> bool:
    """Return True when ``value`` should be embedded rather than bound."""
    # Classes define sql() too; only instances count as expressions.
    # The protocol check alone also matches plain ``sql`` data attributes.
    if isinstance(value, type):
        return False
    return callable(getattr(value, "sql", None))
