import pytest
from pydantic import ValidationError

from config.settings import AppSettings, get_settings


def test_defaults(monkeypatch):
    for name in ("INSIGHTS_LOG_LEVEL", "INSIGHTS_INSIGHTS_PER_CATEGORY", "INSIGHTS_FALLBACK_FOR_EMPTY_PROFILE"):
        monkeypatch.delenv(name, raising=False)
    settings = AppSettings()
    assert settings.log_level == "INFO"
    assert settings.api_prefix == "/api/v1"
    assert settings.insights_per_category == 3
    assert settings.fallback_for_empty_profile is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("INSIGHTS_LOG_LEVEL", "debug")
    monkeypatch.setenv("INSIGHTS_INSIGHTS_PER_CATEGORY", "2")
    monkeypatch.setenv("INSIGHTS_FALLBACK_FOR_EMPTY_PROFILE", "false")
    monkeypatch.setenv("INSIGHTS_JSON_LOGS", "0")

    settings = AppSettings()
    assert settings.log_level == "DEBUG"
    assert settings.insights_per_category == 2
    assert settings.fallback_for_empty_profile is False
    assert settings.json_logs is False


@pytest.mark.parametrize("name, value", [
    ("INSIGHTS_LOG_LEVEL", "chatty"),
    ("INSIGHTS_INSIGHTS_PER_CATEGORY", "4"),
    ("INSIGHTS_INSIGHTS_PER_CATEGORY", "0"),
])
def test_invalid_settings_are_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        AppSettings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
