"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="Asia/Jerusalem",
        description="Reference timezone used to compute business dates and report times",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level applied when the application starts",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5174"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
