"""
SQL module for fluent statement assembly.

This module builds SELECT/INSERT/UPDATE/DELETE text with inlined literals,
pluggable string escaping and a pluggable executor.
"""

from .core.payloads import StatementMode
from .core.values import SqlValue, ValueKind, literalize
from .dialects import IdentityDialect, MySQLDialect, PostgreSQLDialect, get_dialect
from .exceptions import QueryBuilderError, QueryValidationError, TypeMismatchError
from .executors import DatabaseExecutor, NullExecutor, SqlAlchemyExecutor
from .operations.statement import NOT_GIVEN, StatementBuilder

__all__ = [
    "StatementBuilder",
    "StatementMode",
    "NOT_GIVEN",
    "SqlValue",
    "ValueKind",
    "literalize",
    "IdentityDialect",
    "MySQLDialect",
    "PostgreSQLDialect",
    "get_dialect",
    "QueryBuilderError",
    "QueryValidationError",
    "TypeMismatchError",
    "DatabaseExecutor",
    "NullExecutor",
    "SqlAlchemyExecutor",
]
