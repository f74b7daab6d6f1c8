"""
Statement executors.

The builder hands finished SQL text to an executor and returns whatever rows
it produces. Executors receive fully inlined statements, never parameters.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Union

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

from simple_query_builder.config import Settings, get_settings
from simple_query_builder.utils.logging import get_logger

from .exceptions import QueryBuilderError

logger = get_logger(__name__)

Row = Dict[str, Any]


class DatabaseExecutor(Protocol):
    """Protocol for objects that run SQL text and return rows."""

    def execute(self, sql: str) -> List[Row]: ...


class NullExecutor:
    """Executor stub that runs nothing and returns no rows."""

    def execute(self, sql: str) -> List[Row]:
        logger.debug("null_executor.skipped", statement_length=len(sql))
        return []


class SqlAlchemyExecutor:
    """
    Run statements through SQLAlchemy.

    With an Engine, each statement runs in its own transaction that commits
    on success. With a Connection, the caller owns the transaction.

    Statements go through ``exec_driver_sql`` so that colons inside inlined
    literals are not parsed as bind parameters.
    """

    def __init__(self, bind: Union[Engine, Connection]) -> None:
        self.bind = bind

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SqlAlchemyExecutor":
        """
        Create an executor bound to a new engine for DATABASE_URL.

        Raises:
            QueryBuilderError: If DATABASE_URL is not configured
        """
        settings = settings or get_settings()
        if not settings.DATABASE_URL:
            raise QueryBuilderError("DATABASE_URL is not configured")
        logger.info("sqlalchemy_executor.engine_created", DATABASE_URL=settings.DATABASE_URL)
        return cls(create_engine(settings.DATABASE_URL))

    def execute(self, sql: str) -> List[Row]:
        try:
            if isinstance(self.bind, Engine):
                with self.bind.begin() as connection:
                    return self._run(connection, sql)
            return self._run(self.bind, sql)
        except Exception as e:
            logger.error("sqlalchemy_executor.execute_failed", error=str(e))
            raise

    @staticmethod
    def _run(connection: Connection, sql: str) -> List[Row]:
        result = connection.exec_driver_sql(sql)
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings()]
