"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "purchase-orders API"
    VERSION: str = "0.1.0"

    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    LOG_LEVEL: LogLevel | None = None

    # Persistence
    ORDER_REPOSITORY: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite:///:memory:"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def strip_database_url(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def validate_order_repository(self) -> "Settings":
        """The SQL repository needs somewhere to connect to."""
        if self.ORDER_REPOSITORY == "sql" and not self.DATABASE_URL:
            msg = "DATABASE_URL is required when ORDER_REPOSITORY is 'sql'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Route structlog through stdlib logging on stdout.

    Production renders one JSON object per line; other environments get
    the colored console renderer. Without an explicit ``level``,
    development logs DEBUG and everything else INFO.
    """
    if level is None:
        level = "DEBUG" if environment == "development" else "INFO"
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if environment == "production"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
