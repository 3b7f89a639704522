"""Configuration Tests."""

import pytest
from pydantic import ValidationError

from amap_config.settings import Settings


def test_settings_load_defaults(monkeypatch):
    """Test settings load with defaults."""
    monkeypatch.delenv("AMAP_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.AMAP_API_KEY == ""
    assert settings.AMAP_BASE_URL == "https://restapi.amap.com"
    assert settings.AMAP_TIMEOUT_SECONDS is None
    assert settings.AMAP_ENFORCE_ENUMS is True
    assert settings.LOG_FORMAT == "json"


def test_settings_read_environment(monkeypatch):
    """Test API key and policy flags come from the environment."""
    monkeypatch.setenv("AMAP_API_KEY", "env-key")
    monkeypatch.setenv("amap_enforce_enums", "false")
    monkeypatch.setenv("AMAP_TIMEOUT_SECONDS", "2.5")

    settings = Settings(_env_file=None)

    assert settings.AMAP_API_KEY == "env-key"
    assert settings.AMAP_ENFORCE_ENUMS is False
    assert settings.AMAP_TIMEOUT_SECONDS == 2.5


def test_settings_reject_bad_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
