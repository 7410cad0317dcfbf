"""
Configuration management for pgchain.

This module provides environment-based configuration using Pydantic BaseSettings.
Connection and logging settings are read from environment variables or a
``.env`` file next to the project root.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("PGCHAIN_ENV_FILE")
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

    Unprefixed fields (uppercase names):
    - DATABASE_URL: PostgreSQL connection string used by ``connect()``
    - ENVIRONMENT: Deployment environment (dev, staging, prod)
    - LOG_LEVEL: Logging level (uppercase)
    - CONNECT_TIMEOUT: Connection timeout in seconds

    Prefixed fields use PGCHAIN_, e.g. PGCHAIN_LOG_STATEMENTS=false.
    """

    DATABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="PostgreSQL connection string",
    )
    ENVIRONMENT: Literal["dev", "staging", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    CONNECT_TIMEOUT: int = Field(
        default=5,
        validation_alias="CONNECT_TIMEOUT",
        description="Connection timeout in seconds",
    )

    log_statements: bool = Field(
        default=True, description="Log SQL text when statements execute"
    )
    log_arguments: bool = Field(
        default=False,
        description="Include bound argument values in execution logs",
    )

    def get_database_connection_string(self) -> Optional[str]:
        """Get the PostgreSQL connection string.

        Automatically corrects the deprecated 'postgres://' scheme to
        'postgresql://'.
        """
        url = self.DATABASE_URL
        if url and url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @model_validator(mode="after")
    def validate_production_database_url(self) -> "Settings":
        """Validate that production environment uses PostgreSQL.

        Raises:
            ValueError: If ENVIRONMENT is 'prod' and a non-PostgreSQL URL is set
        """
        db_url = self.get_database_connection_string()

        if (
            self.ENVIRONMENT == "prod"
            and db_url
            and not db_url.startswith("postgresql://")
        ):
            raise ValueError(
                "Production environment requires PostgreSQL database. "
                f"Database URL must start with 'postgresql://', "
                f"got: {db_url[:20]}..."
            )

        return self

    model_config = SettingsConfigDict(
        env_prefix="PGCHAIN_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
