"""
Configuration management for SimpleQueryBuilder.

This module provides environment-based configuration using Pydantic
BaseSettings. Values come from the process environment and an optional
``.env`` file at the project root.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQB_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the SQB_ prefix. For example,
    SQB_ESCAPE_DIALECT overrides the escape_dialect setting.

    Unprefixed fields (uppercase names):
    - LOG_LEVEL: Logging level
    - DATABASE_URL: SQLAlchemy URL used by SqlAlchemyExecutor.from_settings
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    DATABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="Database connection URL for statement execution",
    )

    escape_dialect: Literal["identity", "postgresql", "mysql"] = Field(
        default="identity",
        description="Dialect used to escape string literals by default",
    )

    log_to_file: bool = Field(default=False, description="Enable file logging")
    log_file_dir: str = Field(
        default="logs", description="Directory for rotated log files"
    )

    model_config = SettingsConfigDict(
        env_prefix="SQB_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Tests that change the environment should call ``get_settings.cache_clear()``.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
