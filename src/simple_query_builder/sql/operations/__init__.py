"""Statement builders."""

from .statement import NOT_GIVEN, StatementBuilder

__all__ = ["NOT_GIVEN", "StatementBuilder"]
