"""Pytest configuration shared by all suites."""

from __future__ import annotations

from typing import Generator

import pytest

from simple_query_builder.config import get_settings
from simple_query_builder.sql import IdentityDialect, StatementBuilder


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Generator[None, None, None]:
    """Settings are cached per process; drop the cache around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> StatementBuilder:
    return StatementBuilder(dialect=IdentityDialect())
