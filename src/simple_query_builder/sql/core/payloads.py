"""
Per-mode statement payloads.

A builder holds at most one payload at a time; its type determines the
statement kind that is rendered.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class StatementMode(Enum):
    EMPTY = "empty"
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass
class SelectPayload:
    columns: List[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.columns


@dataclass
class InsertPayload:
    """Column names plus rows of already-literalized values."""

    columns: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.columns or not self.rows


@dataclass
class UpdatePayload:
    """Ordered column -> literal text assignments."""

    assignments: Dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.assignments


@dataclass
class DeletePayload:
    """Marker for DELETE mode; the target is the builder's table name."""

    def is_empty(self) -> bool:
        return False


Payload = Union[SelectPayload, InsertPayload, UpdatePayload, DeletePayload]

_PAYLOAD_MODES = {
    SelectPayload: StatementMode.SELECT,
    InsertPayload: StatementMode.INSERT,
    UpdatePayload: StatementMode.UPDATE,
    DeletePayload: StatementMode.DELETE,
}


def mode_of(payload: Optional[Payload]) -> StatementMode:
    if payload is None:
        return StatementMode.EMPTY
    return _PAYLOAD_MODES[type(payload)]
