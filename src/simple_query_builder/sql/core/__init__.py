"""Core SQL assembly package."""

from .clauses import (
    JoinSpec,
    join_conditions,
    join_joins,
    join_orders,
    order_fragment,
    render_limit,
    render_offset,
)
from .conditions import is_empty_value, make_condition, make_condition_node
from .payloads import (
    DeletePayload,
    InsertPayload,
    SelectPayload,
    StatementMode,
    UpdatePayload,
    mode_of,
)
from .values import SqlValue, ValueKind, literalize

__all__ = [
    "JoinSpec",
    "join_conditions",
    "join_joins",
    "join_orders",
    "order_fragment",
    "render_limit",
    "render_offset",
    "is_empty_value",
    "make_condition",
    "make_condition_node",
    "DeletePayload",
    "InsertPayload",
    "SelectPayload",
    "StatementMode",
    "UpdatePayload",
    "mode_of",
    "SqlValue",
    "ValueKind",
    "literalize",
]
