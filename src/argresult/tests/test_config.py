"""Tests for settings and logging configuration."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest
from pydantic import ValidationError

from argresult.config import ArgResultSettings, LoggingSettings, clear_settings_cache, get_settings
from argresult.observability import JsonFormatter, configure_logging, get_logger


# ═════════════════════════════════════════════════════════════════════════════
# Settings
# ═════════════════════════════════════════════════════════════════════════════


def test_defaults() -> None:
    """Settings default to WARNING text logging with debug off."""
    settings = ArgResultSettings()

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"
    assert settings.effective_log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """ARGRESULT_* variables override defaults; level is case-insensitive."""
    monkeypatch.setenv("ARGRESULT_DEBUG", "1")
    monkeypatch.setenv("ARGRESULT_LOG_LEVEL", "info")
    monkeypatch.setenv("ARGRESULT_LOG_FORMAT", "json")

    settings = ArgResultSettings()

    assert settings.debug is True
    assert settings.effective_log_level == "DEBUG"
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "json"


def test_debug_forces_debug_level() -> None:
    """debug=True overrides the configured level."""
    settings = ArgResultSettings(debug=True, logging=LoggingSettings(level="ERROR"))
    assert settings.effective_log_level == "DEBUG"


def test_invalid_level_rejected() -> None:
    """Unknown level names fail validation."""
    with pytest.raises(ValidationError):
        LoggingSettings(level="LOUD")


def test_get_settings_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings is cached until clear_settings_cache."""
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("ARGRESULT_DEBUG", "true")
    assert get_settings().debug is False

    clear_settings_cache()
    assert get_settings().debug is True


# ═════════════════════════════════════════════════════════════════════════════
# Logging
# ═════════════════════════════════════════════════════════════════════════════


def test_get_logger_namespace() -> None:
    """Loggers live under the argresult namespace."""
    assert get_logger("combinators").name == "argresult.combinators"


def test_configure_text_logging() -> None:
    """Text format renders level, logger and message; level filters."""
    stream = io.StringIO()
    logger = configure_logging(ArgResultSettings(logging=LoggingSettings(level="INFO")), output=stream)

    get_logger("test").info("hello %s", "world")
    get_logger("test").debug("hidden")

    assert logger.level == logging.INFO
    out = stream.getvalue()
    assert "[INFO] argresult.test: hello world" in out
    assert "hidden" not in out


def test_configure_json_logging() -> None:
    """JSON format emits one object per record with extra fields inlined."""
    stream = io.StringIO()
    settings = ArgResultSettings(logging=LoggingSettings(level="DEBUG", format="json"))
    configure_logging(settings, output=stream)

    get_logger("test").warning("dispatch", extra={"verb": "commit"})

    record = json.loads(stream.getvalue().strip())
    assert record["level"] == "warning"
    assert record["logger"] == "argresult.test"
    assert record["event"] == "dispatch"
    assert record["verb"] == "commit"
    assert "timestamp" in record


def test_configure_logging_is_idempotent() -> None:
    """Repeated configuration replaces the handler instead of stacking."""
    configure_logging(ArgResultSettings(), output=io.StringIO())
    configure_logging(ArgResultSettings(), output=io.StringIO())

    handlers = logging.getLogger("argresult").handlers
    assert len(handlers) == 1


def test_json_formatter_includes_exception() -> None:
    """Exception info is rendered into the JSON record."""
    formatter = JsonFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("argresult.x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())

    data = json.loads(formatter.format(record))
    assert data["event"] == "failed"
    assert "RuntimeError: boom" in data["exc_info"]
