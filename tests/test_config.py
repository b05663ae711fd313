"""Settings: defaults, environment overrides and validation."""

import pytest
from pydantic import ValidationError

from debugvault.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.search_debounce_ms == 300
    assert settings.recent_sessions_limit == 5
    assert settings.log_level == "INFO"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("DEBUGVAULT_SEARCH_DEBOUNCE_MS", "150")
    assert get_settings().search_debounce_ms == 150


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        Settings(search_debounce_ms=-1)
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
