"""Unit tests for structured logging framework.

Tests cover:
- get_logger returns a structlog logger with JSON output
- Sanitization guards sensitive fields
- Context binding
- Builder events are emitted through the framework
"""

import json
import logging

import pytest
import structlog

from simple_query_builder.sql import QueryValidationError, StatementBuilder
from simple_query_builder.utils.logging import (
    bind_context,
    get_logger,
    sanitize_for_logging,
)


@pytest.mark.unit
def test_get_logger_name_preserved(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event")

    assert len(caplog.records) >= 1
    log_data = json.loads(caplog.records[-1].message)
    assert log_data.get("logger") == "my_test_logger"


@pytest.mark.unit
def test_json_output_structure(caplog: pytest.LogCaptureFixture) -> None:
    """JSON output contains timestamp, level, logger and event."""
    caplog.set_level(logging.INFO)

    logger = get_logger("test_logger")
    logger.info("test_event", table="users")

    log_data = json.loads(caplog.records[-1].message)

    assert "T" in log_data["timestamp"]
    assert log_data["event"] == "test_event"
    assert log_data["level"] == "info"
    assert log_data["logger"] == "test_logger"
    assert log_data["table"] == "users"


@pytest.mark.unit
@pytest.mark.parametrize(
    "key", ["password", "access_token", "api_key", "client_secret", "DATABASE_URL"]
)
def test_sanitize_for_logging_redacts(key: str) -> None:
    sanitized = sanitize_for_logging({key: "value", "user": "admin"})

    assert sanitized[key] == "[REDACTED]"
    assert sanitized["user"] == "admin"


@pytest.mark.unit
def test_sanitize_for_logging_handles_nested_dicts() -> None:
    data = {"user": "admin", "auth": {"PASSWORD": "secret123", "Token": "abc"}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["user"] == "admin"
    assert sanitized["auth"]["PASSWORD"] == "[REDACTED]"
    assert sanitized["auth"]["Token"] == "[REDACTED]"


@pytest.mark.unit
def test_sanitization_in_logged_output(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    get_logger("test_logger").info("connect", user="admin", password="secret123")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["password"] == "[REDACTED]"
    assert log_data["user"] == "admin"


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    logger = bind_context(table="users", mode="select")
    logger.info("first_event")
    logger.info("second_event")

    assert len(caplog.records) >= 2
    for record in caplog.records[-2:]:
        log_data = json.loads(record.message)
        assert log_data["table"] == "users"
        assert log_data["mode"] == "select"


@pytest.mark.unit
def test_bind_context_returns_bound_logger() -> None:
    logger = bind_context(table="users")
    assert isinstance(logger, structlog.stdlib.BoundLogger)


@pytest.mark.unit
def test_validation_failure_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)

    with pytest.raises(QueryValidationError):
        StatementBuilder().select("*").build()

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "statement_builder.validation_failed"
    assert log_data["level"] == "warning"
    assert "Table name" in log_data["reason"]


@pytest.mark.unit
def test_build_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    StatementBuilder().update("users", "name", "bob").where("id", "=", 1).build()

    events = [
        json.loads(r.message)
        for r in caplog.records
        if r.name.startswith("simple_query_builder")
    ]
    built = [e for e in events if e["event"] == "statement_builder.built"]
    assert built[-1]["mode"] == "update"
    assert built[-1]["table"] == "users"
    assert built[-1]["conditions"] == 1
