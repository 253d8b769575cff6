"""Environment-based configuration using pydantic-settings.

Example:
    >>> from argresult.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # ARGRESULT_DEBUG=true
    # ARGRESULT_LOG_LEVEL=INFO
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ARGRESULT_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ArgResultSettings(BaseSettings):
    """Root settings for argresult.

    Example environment variables:
        ARGRESULT_DEBUG=true
        ARGRESULT_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="ARGRESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Force DEBUG log level")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> LogLevel:
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> ArgResultSettings:
    """Get the global settings instance (cached)."""
    return ArgResultSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
