"""Tests for environment-based settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from jobrail.config import JobrailSettings, clear_settings_cache, get_settings


def test_defaults() -> None:
    settings = get_settings()
    
    assert settings.conversion.rate == 0.91
    assert settings.conversion.pair == "USD/EUR"
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.effective_log_level == "INFO"


def test_cached_until_cleared(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("JOBRAIL_CONVERSION_RATE", "1.5")
    
    assert get_settings() is first
    
    clear_settings_cache()
    assert get_settings().conversion.rate == 1.5


def test_nested_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBRAIL_LOG_LEVEL", "debug")
    monkeypatch.setenv("JOBRAIL_LOG_FORMAT", "json")
    monkeypatch.setenv("JOBRAIL_CONVERSION_TARGET_CURRENCY", "gbp")
    
    settings = JobrailSettings()
    
    assert settings.logging.level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.conversion.pair == "USD/GBP"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBRAIL_DEBUG", "true")
    assert JobrailSettings().effective_log_level == "DEBUG"


def test_negative_rate_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBRAIL_CONVERSION_RATE", "-1")
    with pytest.raises(ValidationError):
        JobrailSettings()


def test_unknown_log_format_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBRAIL_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        JobrailSettings()
