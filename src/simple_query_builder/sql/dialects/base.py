"""
Escaping capability shared by all dialects.

A dialect turns raw string content into text that is safe to place between
single quotes in a statement. Quoting itself is done by the caller.
"""

from typing import Protocol


class Dialect(Protocol):
    """Protocol for SQL escaping dialects."""

    name: str

    def escape_string(self, raw: str) -> str: ...
