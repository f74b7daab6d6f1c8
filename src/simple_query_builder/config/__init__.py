"""Configuration management for SimpleQueryBuilder.

Usage:
    >>> from simple_query_builder.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.escape_dialect)
"""

from simple_query_builder.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
