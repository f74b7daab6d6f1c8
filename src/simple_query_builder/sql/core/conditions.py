"""
WHERE condition construction.

A condition node is either one comparison (``col = 'x'``) or a
parenthesized group built from an array value, whose elements are compared
individually and joined with an array operator (OR by default).
"""

from typing import Any, List

from ..dialects.base import Dialect
from ..exceptions import QueryValidationError
from .clauses import join_conditions
from .values import SqlValue, literalize

ARRAY_TYPES = (list, tuple)

# Operators rewritten when compared against NULL
_NULL_OPERATORS = {
    "=": "IS",
    "!=": "IS NOT",
    "<>": "IS NOT",
}


def is_empty_value(value: Any) -> bool:
    """
    Check whether a condition value counts as empty.

    Empty values are ``""``, ``None``, empty list/tuple, ``False`` and
    integer zero. Non-empty strings such as ``"0"`` are not empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, ARRAY_TYPES):
        return len(value) == 0
    if isinstance(value, int):
        return value == 0
    return False


def make_condition(column: str, operator: str, value: Any, dialect: Dialect) -> str:
    """
    Build a single comparison between a column and a scalar value.

    Against NULL, ``=`` becomes ``IS`` and ``!=``/``<>`` become ``IS NOT``;
    other operators are kept.

    Raises:
        TypeMismatchError: If the value has no literal form

    Examples:
        >>> from simple_query_builder.sql.dialects import IdentityDialect
        >>> make_condition("deleted_at", "=", None, IdentityDialect())
        'deleted_at IS NULL'
    """
    sql_value = SqlValue.of(value)
    if sql_value.is_null:
        operator = _NULL_OPERATORS.get(operator, operator)
    return f"{column} {operator} {literalize(sql_value, dialect)}"


def make_condition_node(
    column: str,
    operator: str,
    value: Any,
    dialect: Dialect,
    arrays_operator: str = "OR",
) -> str:
    """
    Build one condition node, expanding array values into a group.

    Args:
        column: Column expression
        operator: Comparison operator
        value: Scalar value, or list/tuple of scalar values
        dialect: Escaping dialect for string literals
        arrays_operator: Connective between the comparisons of an array value

    Returns:
        A single comparison, or ``"(\\n...)"`` wrapping the joined comparisons

    Raises:
        QueryValidationError: If an array value contains another array
        TypeMismatchError: If any element has no literal form
    """
    if not isinstance(value, ARRAY_TYPES):
        return make_condition(column, operator, value, dialect)

    conditions: List[str] = []
    for element in value:
        if isinstance(element, ARRAY_TYPES):
            raise QueryValidationError(
                f"Nested array values are not supported in condition on {column}"
            )
        conditions.append(make_condition(column, operator, element, dialect))
    return "(\n" + join_conditions(conditions, arrays_operator) + ")"
