"""
Unit tests for SQL literal rendering.
"""

import pytest

from simple_query_builder.sql.core.values import SqlValue, ValueKind, literalize
from simple_query_builder.sql.dialects import IdentityDialect, PostgreSQLDialect
from simple_query_builder.sql.exceptions import TypeMismatchError


class TestSqlValue:
    """Tests for value classification."""

    def test_classifies_supported_types(self):
        assert SqlValue.of("a").kind is ValueKind.STRING
        assert SqlValue.of(3).kind is ValueKind.INTEGER
        assert SqlValue.of(None).kind is ValueKind.NULL

    def test_bool_is_not_integer(self):
        """bool must not be classified as int even though it subclasses it."""
        assert SqlValue.of(True).kind is ValueKind.BOOLEAN
        assert SqlValue.of(False).kind is ValueKind.BOOLEAN

    def test_classified_value_passes_through(self):
        value = SqlValue.of("x")
        assert SqlValue.of(value) is value

    @pytest.mark.parametrize("value", [1.5, b"bytes", {"a": 1}, object()])
    def test_unsupported_types_rejected(self, value):
        with pytest.raises(TypeMismatchError):
            SqlValue.of(value)


class TestLiteralize:
    """Tests for literalize function."""

    @pytest.fixture
    def dialect(self):
        return IdentityDialect()

    def test_string_is_quoted(self, dialect):
        assert literalize("bob", dialect) == "'bob'"

    def test_empty_string(self, dialect):
        assert literalize("", dialect) == "''"

    def test_string_goes_through_dialect(self):
        assert literalize("O'Brien", PostgreSQLDialect()) == "'O''Brien'"

    def test_integer(self, dialect):
        assert literalize(42, dialect) == "42"
        assert literalize(-7, dialect) == "-7"

    def test_large_integer_is_not_truncated(self, dialect):
        """Values beyond 32-bit range render in full."""
        assert literalize(2147483648, dialect) == "2147483648"

    def test_booleans_unquoted(self, dialect):
        assert literalize(True, dialect) == "TRUE"
        assert literalize(False, dialect) == "FALSE"

    def test_null(self, dialect):
        assert literalize(None, dialect) == "NULL"

    def test_float_fails_loudly(self, dialect):
        with pytest.raises(TypeMismatchError, match="float"):
            literalize(1.0, dialect)
