"""Tests for application configuration."""

import logging

import pytest

from src.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove TAS_ variables so defaults are tested."""
    for name in ("TAS_IGNORE_INVALID_FLOATS", "TAS_DEBUG", "TAS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_ignore_invalid_floats_by_default(self):
        """Invalid floats should be tolerated by default."""
        settings = Settings(_env_file=None)
        assert settings.ignore_invalid_floats is True

    def test_debug_off_by_default(self):
        """Debug mode should be off by default."""
        settings = Settings(_env_file=None)
        assert settings.debug is False
        assert settings.log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for environment overrides."""

    def test_ignore_invalid_floats_override(self, monkeypatch):
        """TAS_IGNORE_INVALID_FLOATS should switch strict validation on."""
        monkeypatch.setenv("TAS_IGNORE_INVALID_FLOATS", "false")
        settings = Settings(_env_file=None)
        assert settings.ignore_invalid_floats is False

    def test_case_insensitive(self, monkeypatch):
        """Environment variable names should be case-insensitive."""
        monkeypatch.setenv("tas_debug", "true")
        settings = Settings(_env_file=None)
        assert settings.debug is True


class TestEffectiveLogLevel:
    """Tests for the logging level property."""

    def test_log_level(self):
        """Configured level should be used when not debugging."""
        settings = Settings(_env_file=None, log_level="INFO")
        assert settings.effective_log_level == logging.INFO

    def test_debug_overrides_level(self):
        """Debug mode should force DEBUG."""
        settings = Settings(_env_file=None, debug=True, log_level="ERROR")
        assert settings.effective_log_level == logging.DEBUG


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_cached(self):
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()
