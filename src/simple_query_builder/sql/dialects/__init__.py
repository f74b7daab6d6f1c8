"""Escaping dialects and lookup by name."""

from typing import Dict, Type

from ..exceptions import QueryBuilderError
from .base import Dialect
from .mysql import MySQLDialect
from .passthrough import IdentityDialect
from .postgresql import PostgreSQLDialect

DIALECTS: Dict[str, Type[Dialect]] = {
    IdentityDialect.name: IdentityDialect,
    PostgreSQLDialect.name: PostgreSQLDialect,
    MySQLDialect.name: MySQLDialect,
}


def get_dialect(name: str) -> Dialect:
    """
    Instantiate a dialect by its registered name.

    Raises:
        QueryBuilderError: If no dialect is registered under ``name``
    """
    try:
        dialect_cls = DIALECTS[name.lower()]
    except KeyError:
        raise QueryBuilderError(
            f"Unknown escape dialect: {name}. Must be one of {sorted(DIALECTS)}"
        ) from None
    return dialect_cls()


__all__ = [
    "DIALECTS",
    "Dialect",
    "IdentityDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "get_dialect",
]
