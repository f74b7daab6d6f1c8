"""
Unit tests for WHERE condition construction.
"""

import pytest

from simple_query_builder.sql.core.conditions import (
    is_empty_value,
    make_condition,
    make_condition_node,
)
from simple_query_builder.sql.dialects import IdentityDialect, MySQLDialect
from simple_query_builder.sql.exceptions import QueryValidationError, TypeMismatchError


@pytest.fixture
def dialect():
    return IdentityDialect()


class TestIsEmptyValue:
    """Tests for is_empty_value function."""

    @pytest.mark.parametrize("value", ["", None, [], (), False, 0])
    def test_empty_values(self, value):
        assert is_empty_value(value) is True

    @pytest.mark.parametrize("value", ["0", "a", [0], 1, -1, True])
    def test_non_empty_values(self, value):
        assert is_empty_value(value) is False


class TestMakeCondition:
    """Tests for make_condition function."""

    def test_string_value(self, dialect):
        assert make_condition("name", "=", "bob", dialect) == "name = 'bob'"

    def test_integer_value(self, dialect):
        assert make_condition("age", ">=", 20, dialect) == "age >= 20"

    def test_boolean_value_unquoted(self, dialect):
        assert make_condition("active", "=", True, dialect) == "active = TRUE"

    def test_null_equals_becomes_is(self, dialect):
        assert make_condition("deleted_at", "=", None, dialect) == "deleted_at IS NULL"

    @pytest.mark.parametrize("operator", ["!=", "<>"])
    def test_null_not_equals_becomes_is_not(self, dialect, operator):
        assert make_condition("deleted_at", operator, None, dialect) == "deleted_at IS NOT NULL"

    def test_null_other_operator_unchanged(self, dialect):
        assert make_condition("a", "IS", None, dialect) == "a IS NULL"
        assert make_condition("a", ">", None, dialect) == "a > NULL"

    def test_string_escaped_by_dialect(self):
        assert make_condition("name", "=", "it's", MySQLDialect()) == "name = 'it\\'s'"

    def test_unsupported_value(self, dialect):
        with pytest.raises(TypeMismatchError):
            make_condition("price", "=", 9.99, dialect)


class TestMakeConditionNode:
    """Tests for array expansion into condition groups."""

    def test_scalar_is_single_condition(self, dialect):
        assert make_condition_node("id", "=", 1, dialect) == "id = 1"

    def test_array_expands_to_or_group(self, dialect):
        node = make_condition_node("id", "=", [1, 2, 3], dialect)
        assert node == "(\nid = 1 OR\nid = 2 OR\nid = 3\n)"

    def test_tuple_expands_like_list(self, dialect):
        assert make_condition_node("id", "=", (1, 2), dialect) == "(\nid = 1 OR\nid = 2\n)"

    def test_custom_arrays_operator(self, dialect):
        node = make_condition_node("name", "LIKE", ["a%", "%b"], dialect, "AND")
        assert node == "(\nname LIKE 'a%' AND\nname LIKE '%b'\n)"

    def test_each_element_literalized_independently(self, dialect):
        node = make_condition_node("v", "=", ["x", 1, None, False], dialect)
        assert node == "(\nv = 'x' OR\nv = 1 OR\nv IS NULL OR\nv = FALSE\n)"

    def test_nested_array_rejected(self, dialect):
        with pytest.raises(QueryValidationError, match="Nested"):
            make_condition_node("id", "=", [1, [2, 3]], dialect)
