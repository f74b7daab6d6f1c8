"""
Clause fragment assembly.

Each helper returns either an empty string or a fragment terminated by a
newline, so callers can concatenate fragments unconditionally.
"""

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class JoinSpec:
    """A registered JOIN: join type plus its condition text."""

    join_type: str
    condition: str


def join_conditions(conditions: Sequence[str], operator: str = "AND") -> str:
    """
    Join condition nodes with a logical operator.

    Args:
        conditions: Condition fragments in evaluation order
        operator: Connective placed between fragments

    Returns:
        Fragments joined by ``" {operator}\\n"`` with a trailing newline,
        or an empty string when there are no conditions

    Examples:
        >>> join_conditions(["a = 1", "b = 2"])
        'a = 1 AND\\nb = 2\\n'
    """
    if not conditions:
        return ""
    return f" {operator}\n".join(conditions) + "\n"


def order_fragment(column: str, direction: str = "") -> str:
    """Format one ORDER BY entry; an empty direction is kept verbatim."""
    return f"{column} {direction}"


def join_orders(orders: Sequence[str]) -> str:
    if not orders:
        return ""
    return ", ".join(orders) + "\n"


def join_joins(joins: Sequence[JoinSpec]) -> str:
    """Render JOIN entries, one per line."""
    if not joins:
        return ""
    return "\n".join(f"JOIN {join.join_type} {join.condition}" for join in joins) + "\n"


def render_limit(limit: Optional[int]) -> str:
    if limit is None:
        return ""
    return f"LIMIT {limit}\n"


def render_offset(offset: Optional[int]) -> str:
    if offset is None:
        return ""
    return f"OFFSET {offset}\n"
