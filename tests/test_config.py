"""Tests for environment-based settings."""
import dataclasses

import pytest

from src.core.config import get_settings
from src.llm.catalog import PREFERRED_MODEL


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear the settings cache around a test that edits the environment."""
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, fresh_settings) -> None:
        for key in ("APP_ENV", "PORT", "DEFAULT_MODEL", "CORS_ORIGINS", "LOG_DIR"):
            fresh_settings.delenv(key, raising=False)

        settings = get_settings()

        assert settings.port == 3000
        assert settings.default_model == PREFERRED_MODEL
        assert settings.cors_origins == ("*",)
        assert settings.log_dir is None
        assert settings.is_production()
        assert not settings.is_development()

    def test_development_mode(self, fresh_settings) -> None:
        fresh_settings.setenv("APP_ENV", "Development")

        assert get_settings().is_development()

    def test_missing_api_key(self, fresh_settings) -> None:
        fresh_settings.delenv("GEMINI_API_KEY", raising=False)

        with pytest.raises(ValueError, match="GEMINI_API_KEY"):
            get_settings()

    def test_default_model_must_be_in_catalog(self, fresh_settings) -> None:
        fresh_settings.setenv("DEFAULT_MODEL", "gpt-4")

        with pytest.raises(ValueError, match="DEFAULT_MODEL"):
            get_settings()

    def test_cors_origins_parsed(self, fresh_settings) -> None:
        fresh_settings.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

        assert get_settings().cors_origins == ("http://a.test", "http://b.test")

    def test_settings_are_immutable(self, fresh_settings) -> None:
        settings = get_settings()

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.port = 1

    def test_log_dir(self, fresh_settings) -> None:
        fresh_settings.setenv("LOG_DIR", "/var/log/gateway")

        assert get_settings().log_dir == "/var/log/gateway"
