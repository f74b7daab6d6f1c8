"""Exceptions raised while assembling SQL statements."""


class QueryBuilderError(Exception):
    """Base error for the query builder."""


class QueryValidationError(QueryBuilderError, ValueError):
    """Raised when builder state cannot produce a complete statement.

    Covers a missing table name, no active statement payload, column/value
    arity mismatches, nested array conditions and invalid LIMIT/OFFSET.
    """


class TypeMismatchError(QueryBuilderError, TypeError):
    """Raised when a value has no SQL literal form."""
