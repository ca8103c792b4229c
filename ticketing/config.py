"""Configuration loading for the ticket service.

Settings come from environment variables (prefixed ``TICKET_SERVICE_``)
and an optional .env file, validated by pydantic. Ticket prices and the
per-purchase ticket limit are business rules, not settings.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(name)-24s | %(levelname)-5s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class Settings(BaseSettings):
    """Application configuration loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TICKET_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level",
    )
    api_host: str = Field(
        default="127.0.0.1",
        description="Host the HTTP API binds to",
    )
    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the HTTP API binds to",
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an entry point."""
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
