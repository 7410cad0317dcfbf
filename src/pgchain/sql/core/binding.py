"""
Object-to-column binding.

Extracts a ``{column: value}`` mapping from a record object using declared
column tags, for feeding parameterized INSERT/UPDATE statements.

Supported record shapes:
- dataclasses whose fields carry ``metadata={"db": "<column>"}``
  (see :func:`db_column`)
- pydantic models whose fields carry ``json_schema_extra={"db": "<column>"}``
- any object exposing ``__db_columns__()`` that returns the mapping itself

Only top-level fields are inspected; nested records are bound as plain values.
"""

import dataclasses
from typing import Any, Dict

from pydantic import BaseModel

DB_TAG = "db"


def db_column(name: str, **kwargs: Any) -> Any:
    """
    Declare a dataclass field bound to column ``name``.

    Example:
        >>> @dataclasses.dataclass
        ... class User:
        ...     id: int = db_column("id")
        ...     email: str = db_column("email_address", default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[DB_TAG] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _dataclass_columns(record: Any) -> Dict[str, Any]:
    columns: Dict[str, Any] = {}
    for field in dataclasses.fields(record):
        column = field.metadata.get(DB_TAG)
        if column:
            columns[column] = getattr(record, field.name)
    return columns


def _pydantic_columns(record: BaseModel) -> Dict[str, Any]:
    columns: Dict[str, Any] = {}
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict):
            continue
        column = extra.get(DB_TAG)
        if column:
            columns[str(column)] = getattr(record, name)
    return columns


def extract_columns(record: Any) -> Dict[str, Any]:
    """
    Build the column mapping for ``record``.

    Returns an empty mapping for untagged or unsupported shapes instead of
    raising.

    Examples:
        >>> @dataclasses.dataclass
        ... class Account:
        ...     id: int = db_column("id")
        ...     note: str = ""
        >>> extract_columns(Account(id=7, note="x"))
        {'id': 7}
        >>> extract_columns(42)
        {}
    """
    if isinstance(record, type):
        return {}

    provider = getattr(record, "__db_columns__", None)
    if callable(provider):
        return dict(provider())

    if isinstance(record, BaseModel):
        return _pydantic_columns(record)

    if dataclasses.is_dataclass(record):
        return _dataclass_columns(record)

    return {}


def derive_table_name(record: Any) -> str:
    """
    Derive a table name from the record's type name, lower-cased.

    Examples:
        >>> class Invoice: ...
        >>> derive_table_name(Invoice())
        'invoice'
    """
    return type(record).__name__.lower()
