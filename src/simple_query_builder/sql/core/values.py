"""
SQL literal rendering for inlined values.

Every value that reaches a statement is first classified into a SqlValue
variant, then rendered as literal text. Supported variants are string,
integer, boolean and null; anything else is rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..dialects.base import Dialect
from ..exceptions import TypeMismatchError


class ValueKind(Enum):
    """Value variants that have a SQL literal form."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class SqlValue:
    """A classified value ready for literal rendering.

    Attributes:
        kind: Variant of the value
        raw: Python value as passed in (None for NULL)
    """

    kind: ValueKind
    raw: Any = None

    @classmethod
    def of(cls, value: Any) -> "SqlValue":
        """
        Classify a Python value.

        ``bool`` is checked before ``int`` since it is an int subclass.

        Raises:
            TypeMismatchError: If the value is not str, int, bool or None
        """
        if isinstance(value, SqlValue):
            return value
        if value is None:
            return cls(ValueKind.NULL)
        if isinstance(value, bool):
            return cls(ValueKind.BOOLEAN, value)
        if isinstance(value, int):
            return cls(ValueKind.INTEGER, value)
        if isinstance(value, str):
            return cls(ValueKind.STRING, value)
        raise TypeMismatchError(
            f"Unsupported value type for SQL literal: {type(value).__name__}"
        )

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL


def literalize(value: Any, dialect: Dialect) -> str:
    """
    Render a value as SQL literal text.

    Args:
        value: str, int, bool, None or an already classified SqlValue
        dialect: Escaping dialect applied to string content

    Returns:
        Literal text: quoted escaped string, decimal integer,
        TRUE/FALSE or NULL

    Raises:
        TypeMismatchError: If the value has no literal form

    Examples:
        >>> from simple_query_builder.sql.dialects import IdentityDialect
        >>> literalize("abc", IdentityDialect())
        "'abc'"
        >>> literalize(True, IdentityDialect())
        'TRUE'
    """
    sql_value = SqlValue.of(value)
    if sql_value.kind is ValueKind.STRING:
        return "'" + dialect.escape_string(sql_value.raw) + "'"
    if sql_value.kind is ValueKind.INTEGER:
        # Python ints are unbounded; range checks are left to the database
        return str(sql_value.raw)
    if sql_value.kind is ValueKind.BOOLEAN:
        return "TRUE" if sql_value.raw else "FALSE"
    return "NULL"
