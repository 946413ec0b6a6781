"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flashdeck.domain.learning.scheduling_config import SchedulingConfig


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./flashdeck.db"

    SECRET_KEY: str = ""

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15

    # Study sessions
    STUDY_SESSION_MAX_CARDS: int = 30
    STUDY_SESSION_MAX_NEW_CARDS: int = 10
    SCHEDULER_TIMEZONE: str | None = None

    @field_validator("SCHEDULER_TIMEZONE", mode="after")
    @classmethod
    def validate_timezone(cls, value: str | None) -> str | None:
        """Reject zone names the tz database does not know."""
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Unknown SCHEDULER_TIMEZONE '{value}'"
            raise ValueError(msg) from e
        return value.strip()

    @model_validator(mode="after")
    def validate_session_caps(self) -> "Settings":
        """Validate study session caps and the signing key."""
        if self.ENVIRONMENT == "production" and not self.SECRET_KEY:
            msg = "SECRET_KEY is required in production"
            raise ValueError(msg)
        if self.STUDY_SESSION_MAX_CARDS <= 0 or self.STUDY_SESSION_MAX_NEW_CARDS <= 0:
            msg = "STUDY_SESSION_MAX_CARDS and STUDY_SESSION_MAX_NEW_CARDS must be positive"
            raise ValueError(msg)
        if self.STUDY_SESSION_MAX_NEW_CARDS > self.STUDY_SESSION_MAX_CARDS:
            msg = "STUDY_SESSION_MAX_NEW_CARDS cannot exceed STUDY_SESSION_MAX_CARDS"
            raise ValueError(msg)
        return self

    def scheduling_config(self) -> SchedulingConfig:
        """Build the immutable configuration handed to the scheduling services."""
        return SchedulingConfig(
            max_total=self.STUDY_SESSION_MAX_CARDS,
            max_new=self.STUDY_SESSION_MAX_NEW_CARDS,
            timezone=ZoneInfo(self.SCHEDULER_TIMEZONE) if self.SCHEDULER_TIMEZONE else None,
        )


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
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
