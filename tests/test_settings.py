"""Tests for the settings loader and logger factory.

These tests verify three guarantees:
1) Importing the module-level `settings` yields a `Settings` instance.
2) Environment variables override defaults after clearing the loader cache.
3) `get_logger()` respects the configured LOG_LEVEL when constructing loggers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest

from histocat.core.settings import (
    Settings,
    get_logger,
    load_settings,
    settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Rebuild the cached settings around each test."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_settings_instance_type() -> None:
    """`settings` should be an instance of the typed `Settings` model."""
    assert isinstance(settings, Settings)


def test_defaults(monkeypatch: Any) -> None:
    """Without overrides, plain-text rendering and French are the defaults."""
    monkeypatch.delenv("HISTOCAT_FORMAT_TEXT", raising=False)
    monkeypatch.delenv("HISTOCAT_LANGUAGE", raising=False)
    s = load_settings()
    assert s.format_text is None
    assert s.default_language == "fr"


def test_env_overrides_with_cache_clear(monkeypatch: Any) -> None:
    """Changing env vars should take effect after `load_settings.cache_clear()`."""
    monkeypatch.setenv("HISTOCAT_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("HISTOCAT_FORMAT_TEXT", "markdown")
    monkeypatch.setenv("HISTOCAT_LANGUAGE", "fr-CA")

    s = load_settings()

    assert s.environment == "test"
    assert s.log_level == "DEBUG"
    assert s.format_text == "markdown"
    assert s.default_language == "fr-CA"
    assert not s.is_dev


def test_get_logger_respects_level(monkeypatch: Any) -> None:
    """`get_logger()` applies the numeric level derived from `LOG_LEVEL`."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logger = get_logger("histocat.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.handlers, "Expected at least one StreamHandler to be attached."
