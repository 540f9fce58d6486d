"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///./learnhub.db"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Authoring limits
    MAX_AUTHORS_PER_GUIDE: int = 5
    MAX_AUTHORS_PER_COURSE: int = 5

    # Messaging
    GUIDE_CHALLENGE_ADDED_TOPIC: str = "guides.challenge.added.v1"
    EVENT_BROKER_URL: str | None = None
    EVENT_BROKER_TIMEOUT_SECONDS: float = 2.0

    @field_validator("MAX_AUTHORS_PER_GUIDE", "MAX_AUTHORS_PER_COURSE", mode="after")
    @classmethod
    def validate_author_limit(cls, value: int) -> int:
        """Author limits must allow at least one author."""
        if value < 1:
            msg = "Author limits must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("EVENT_BROKER_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def validate_broker_timeout(cls, value: float) -> float:
        if value <= 0:
            msg = "Event broker timeout must be positive"
            raise ValueError(msg)
        return value

    @field_validator("GUIDE_CHALLENGE_ADDED_TOPIC", mode="after")
    @classmethod
    def validate_topic_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "Event topic name cannot be blank"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # JSON output in production, console output otherwise
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
