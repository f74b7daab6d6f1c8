"""
Fluent builder for SELECT/INSERT/UPDATE/DELETE statements.

Provides a chainable facade that collects a table name, one active
statement payload and the shared clauses (JOIN, WHERE, ORDER BY, LIMIT,
OFFSET), then renders them as one SQL string with values inlined.

Example:
    >>> from simple_query_builder.sql import StatementBuilder
    >>> sql = (
    ...     StatementBuilder()
    ...     .select(["id", "name"])
    ...     .from_("users")
    ...     .where("status", "=", ["active", "pending"])
    ...     .and_where("deleted_at", "=", None, refuse_empty=False)
    ...     .order("id", "DESC")
    ...     .limit(10)
    ...     .build()
    ... )
"""

from typing import Any, List, Optional, Sequence, Union

from simple_query_builder.config import get_settings
from simple_query_builder.utils.logging import get_logger

from ..core.clauses import (
    JoinSpec,
    join_conditions,
    join_joins,
    join_orders,
    order_fragment,
    render_limit,
    render_offset,
)
from ..core.conditions import ARRAY_TYPES, is_empty_value, make_condition_node
from ..core.payloads import (
    DeletePayload,
    InsertPayload,
    Payload,
    SelectPayload,
    StatementMode,
    UpdatePayload,
    mode_of,
)
from ..core.values import literalize
from ..dialects import get_dialect
from ..dialects.base import Dialect
from ..exceptions import QueryValidationError, TypeMismatchError
from ..executors import DatabaseExecutor, NullExecutor, Row

logger = get_logger(__name__)


class _NotGiven:
    """Marker for an omitted constructor value; None means SQL NULL."""

    def __repr__(self) -> str:
        return "NOT_GIVEN"


NOT_GIVEN: Any = _NotGiven()


class StatementBuilder:
    """
    Builder for a single SQL statement.

    Exactly one statement kind is active at a time. Calling ``select``,
    ``insert``, ``update`` or ``delete`` replaces whatever payload a previous
    mode call registered. WHERE conditions, joins, ordering and limits are
    kept across mode changes.

    ORDER BY, LIMIT and OFFSET are accepted in every mode but only rendered
    for SELECT. Joins are rendered for SELECT, UPDATE and DELETE.
    """

    def __init__(
        self,
        column: Optional[str] = None,
        operator: Optional[str] = None,
        value: Any = NOT_GIVEN,
        *,
        dialect: Optional[Dialect] = None,
        executor: Optional[DatabaseExecutor] = None,
        refuse_empty: bool = True,
        arrays_operator: str = "OR",
    ) -> None:
        """
        Initialize the builder, optionally registering one WHERE condition.

        Args:
            column: Column of the initial condition
            operator: Operator of the initial condition
            value: Value of the initial condition; the condition is only
                registered when a value is given
            dialect: Escaping dialect; defaults to the configured one
            executor: Executor used by execute()/fetch(); defaults to a stub
            refuse_empty: Passed to where(); False registers a given None
                or 0 instead of skipping it
            arrays_operator: Passed to where() for array values
        """
        self.dialect: Dialect = dialect or get_dialect(get_settings().escape_dialect)
        self.executor: DatabaseExecutor = executor or NullExecutor()

        self.table_name: str = ""
        self._payload: Optional[Payload] = None
        self.joins: List[JoinSpec] = []
        self.wheres: List[str] = []
        self.orders: List[str] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

        if column is not None and operator is not None and value is not NOT_GIVEN:
            self.where(column, operator, value, refuse_empty, arrays_operator)

    @property
    def mode(self) -> StatementMode:
        """Currently active statement kind."""
        return mode_of(self._payload)

    @property
    def payload(self) -> Optional[Payload]:
        return self._payload

    def from_(self, table_name: str) -> "StatementBuilder":
        """Set the table a SELECT reads from."""
        self.table_name = table_name
        return self

    def join(self, join_type: str, condition: str) -> "StatementBuilder":
        self.joins.append(JoinSpec(join_type, condition))
        return self

    def where(
        self,
        column: str,
        operator: str,
        value: Any,
        refuse_empty: bool = True,
        arrays_operator: str = "OR",
    ) -> "StatementBuilder":
        """
        Replace all WHERE conditions with a single condition.

        A list or tuple value is expanded into a parenthesized group whose
        comparisons are joined by ``arrays_operator``.

        Args:
            column: Column expression
            operator: Comparison operator
            value: str, int, bool, None, or a list/tuple of those
            refuse_empty: If True, an empty value ("", None, [], False, 0)
                leaves the builder untouched
            arrays_operator: Connective used inside an array group

        Returns:
            Self for method chaining
        """
        if refuse_empty and is_empty_value(value):
            logger.debug("statement_builder.empty_condition_skipped", column=column)
            return self
        node = make_condition_node(column, operator, value, self.dialect, arrays_operator)
        self.wheres = [node]
        return self

    def and_where(
        self,
        column: str,
        operator: str,
        value: Any,
        refuse_empty: bool = True,
        arrays_operator: str = "OR",
    ) -> "StatementBuilder":
        """
        Append a WHERE condition; conditions are AND-combined at build time.

        Takes the same arguments as ``where``.

        Raises:
            QueryValidationError: If an array value contains nested arrays
            TypeMismatchError: If a value has no SQL literal form
        """
        if refuse_empty and is_empty_value(value):
            logger.debug("statement_builder.empty_condition_skipped", column=column)
            return self
        self.wheres.append(
            make_condition_node(column, operator, value, self.dialect, arrays_operator)
        )
        return self

    def order(self, column: str, direction: str = "") -> "StatementBuilder":
        self.orders.append(order_fragment(column, direction))
        return self

    def limit(self, limit: int) -> "StatementBuilder":
        self._limit = self._non_negative("limit", limit)
        return self

    def offset(self, offset: int) -> "StatementBuilder":
        self._offset = self._non_negative("offset", offset)
        return self

    def select(self, columns: Union[str, Sequence[str]]) -> "StatementBuilder":
        """
        Enter SELECT mode with the given column expressions.

        Args:
            columns: A single column expression or a sequence of them

        Returns:
            Self for method chaining
        """
        if isinstance(columns, str):
            self._payload = SelectPayload([columns])
        else:
            self._payload = SelectPayload(list(columns))
        return self

    def insert(
        self,
        table_name: str,
        columns: Union[str, Sequence[str]],
        *rows: Sequence[Any],
    ) -> "StatementBuilder":
        """
        Enter INSERT mode with one or more value rows.

        Args:
            table_name: Target table
            columns: Column name or sequence of column names
            *rows: Value rows, each with one value per column

        Returns:
            Self for method chaining

        Raises:
            QueryValidationError: If any row's length differs from the
                number of columns
            TypeMismatchError: If a value has no SQL literal form
        """
        column_list = [columns] if isinstance(columns, str) else list(columns)

        mismatched = [
            index
            for index, row in enumerate(rows)
            if not isinstance(row, ARRAY_TYPES) or len(row) != len(column_list)
        ]
        if mismatched:
            raise self._validation_error(
                f"Insert rows {mismatched} do not match {len(column_list)} columns",
                table=table_name,
                rows=mismatched,
            )

        literal_rows = [[literalize(value, self.dialect) for value in row] for row in rows]
        self.table_name = table_name
        self._payload = InsertPayload(column_list, literal_rows)
        return self

    def update(
        self,
        table_name: str,
        columns: Union[str, Sequence[str]],
        values: Any,
        cast_and_escape: bool = True,
    ) -> "StatementBuilder":
        """
        Enter UPDATE mode with column assignments.

        Args:
            table_name: Target table
            columns: Column name or sequence of column names
            values: Value or sequence of values matching ``columns``
            cast_and_escape: If True, values are rendered as literals. If
                False, every value must be pre-escaped SQL text, e.g.
                ``"counter + 1"``, and is inserted verbatim

        Returns:
            Self for method chaining

        Raises:
            QueryValidationError: If columns and values differ in length
            TypeMismatchError: If a value cannot be rendered, or is not a
                string while ``cast_and_escape`` is False
        """
        if isinstance(columns, str):
            columns = [columns]
            if not isinstance(values, ARRAY_TYPES):
                values = [values]
        if not isinstance(values, ARRAY_TYPES) or len(columns) != len(values):
            raise self._validation_error(
                "Update columns and values must have the same length",
                table=table_name,
            )

        assignments = {}
        for column, value in zip(columns, values):
            if cast_and_escape:
                assignments[str(column)] = literalize(value, self.dialect)
            elif isinstance(value, str):
                assignments[str(column)] = value
            else:
                raise TypeMismatchError(
                    f"Value for {column} must be pre-escaped text when "
                    f"cast_and_escape is False, got {type(value).__name__}"
                )

        self.table_name = table_name
        self._payload = UpdatePayload(assignments)
        return self

    def delete(self, table_name: str) -> "StatementBuilder":
        self.table_name = table_name
        self._payload = DeletePayload()
        return self

    def build(self) -> str:
        """
        Render the statement.

        Returns:
            SQL text terminated with ``;``

        Raises:
            QueryValidationError: If no table name is set or no statement
                payload is active
        """
        if not self.table_name:
            raise self._validation_error("Table name is not specified")
        if self._payload is None or self._payload.is_empty():
            raise self._validation_error(
                "No columns specified for the statement", table=self.table_name
            )

        payload = self._payload
        if isinstance(payload, SelectPayload):
            sql = self._build_select(payload)
        elif isinstance(payload, UpdatePayload):
            sql = self._build_update(payload)
        elif isinstance(payload, InsertPayload):
            sql = self._build_insert(payload)
        else:
            sql = self._build_delete()

        logger.debug(
            "statement_builder.built",
            mode=self.mode.value,
            table=self.table_name,
            conditions=len(self.wheres),
        )
        return sql

    def execute(self) -> List[Row]:
        """
        Build the statement and run it on the executor.

        Returns:
            Rows produced by the executor

        Raises:
            QueryValidationError: If the statement cannot be built; nothing
                is sent to the executor
        """
        sql = self.build()
        logger.info(
            "statement_builder.executing", mode=self.mode.value, table=self.table_name
        )
        return self.executor.execute(sql)

    def fetch(self) -> List[Row]:
        """Run the statement and return its rows as a list of mappings."""
        return list(self.execute())

    def _build_where(self) -> str:
        if not self.wheres:
            return ""
        return "WHERE\n" + join_conditions(self.wheres)

    def _build_select(self, payload: SelectPayload) -> str:
        sql = "SELECT\n" + ",\n".join(payload.columns) + f"\nFROM {self.table_name}\n"
        sql += join_joins(self.joins)
        sql += self._build_where()
        if self.orders:
            sql += "ORDER BY " + join_orders(self.orders)
        sql += render_limit(self._limit)
        sql += render_offset(self._offset)
        return sql + ";"

    def _build_update(self, payload: UpdatePayload) -> str:
        sql = f"UPDATE {self.table_name}\n"
        sql += join_joins(self.joins)
        sql += "SET\n"
        sql += ",\n".join(
            f"{column} = {value}" for column, value in payload.assignments.items()
        )
        sql += "\n"
        sql += self._build_where()
        return sql + ";"

    def _build_insert(self, payload: InsertPayload) -> str:
        sql = f"INSERT INTO {self.table_name} ({', '.join(payload.columns)})\n"
        sql += "VALUES\n"
        sql += ",\n".join("(" + ", ".join(row) + ")" for row in payload.rows)
        return sql + "\n;"

    def _build_delete(self) -> str:
        sql = f"DELETE FROM {self.table_name}\n"
        sql += join_joins(self.joins)
        sql += self._build_where()
        return sql + ";"

    def _non_negative(self, name: str, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self._validation_error(
                f"{name.upper()} must be a non-negative integer, got {value!r}"
            )
        return value

    @staticmethod
    def _validation_error(message: str, **context: Any) -> QueryValidationError:
        logger.warning("statement_builder.validation_failed", reason=message, **context)
        return QueryValidationError(message)
