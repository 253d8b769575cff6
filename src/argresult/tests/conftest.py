"""Shared fixtures for argresult tests."""

from __future__ import annotations

import logging

import pytest

from argresult.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_state() -> object:
    """Reset cached settings and argresult logger state around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
    logger = logging.getLogger("argresult")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
