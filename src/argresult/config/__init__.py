"""Configuration management using pydantic-settings."""

from .settings import (
    ArgResultSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ArgResultSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
