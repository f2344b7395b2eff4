import dataclasses

import pytest

from codejudge.core.config import DEFAULT_JUDGE0_API_URL, Settings, get_settings


def test_from_env_defaults(monkeypatch):
    for name in ("RAPIDAPI_KEY", "JUDGE0_API_URL", "JUDGE0_HOST", "JUDGE0_TIMEOUT_S", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.rapidapi_key == ""
    assert settings.has_api_key is False
    assert settings.judge0_api_url == DEFAULT_JUDGE0_API_URL
    assert settings.judge0_host == "judge029.p.rapidapi.com"
    assert settings.judge0_timeout_s == 10.0
    assert settings.log_level == "INFO"


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("RAPIDAPI_KEY", "secret")
    monkeypatch.setenv("JUDGE0_API_URL", "https://judge0.internal:2358/")
    monkeypatch.setenv("JUDGE0_HOST", "judge0-ce.p.rapidapi.com")
    monkeypatch.setenv("JUDGE0_TIMEOUT_S", "4.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.has_api_key is True
    assert settings.judge0_api_url == "https://judge0.internal:2358"
    assert settings.judge0_host == "judge0-ce.p.rapidapi.com"
    assert settings.judge0_timeout_s == 4.5
    assert settings.log_level == "DEBUG"


def test_invalid_timeout_names_variable(monkeypatch):
    monkeypatch.setenv("JUDGE0_TIMEOUT_S", "soon")
    with pytest.raises(ValueError, match="JUDGE0_TIMEOUT_S"):
        Settings.from_env()


def test_blank_key_is_not_configured():
    assert Settings(rapidapi_key="   ").has_api_key is False


def test_settings_are_immutable():
    settings = Settings(rapidapi_key="k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.rapidapi_key = "other"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
