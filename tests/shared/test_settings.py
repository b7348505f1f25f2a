"""
Tests for environment-based settings.
"""

import pytest
from pydantic import ValidationError

from todoscan.shared.infrastructure.config import Settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without TODOSCAN_* variables or a .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_ENV", "LOG_LEVEL", "CHARSET", "TODO_TYPES", "OUTPUT"):
        monkeypatch.delenv(f"TODOSCAN_{name}", raising=False)


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings()

        assert settings.charset == "utf-8"
        assert settings.output == "default"
        assert settings.log_level == "WARNING"
        assert settings.type_list == []
        assert settings.is_development

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("TODOSCAN_TODO_TYPES", "TODO, NOTE,")
        monkeypatch.setenv("TODOSCAN_OUTPUT", "json")
        monkeypatch.setenv("TODOSCAN_APP_ENV", "production")

        settings = Settings()

        assert settings.type_list == ["TODO", "NOTE"]
        assert settings.output == "json"
        assert not settings.is_development

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("TODOSCAN_CHARSET=detect\n")

        assert Settings().charset == "detect"

    def test_log_level_normalised(self, clean_env, monkeypatch):
        monkeypatch.setenv("TODOSCAN_LOG_LEVEL", "debug")

        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self, clean_env, monkeypatch):
        monkeypatch.setenv("TODOSCAN_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()
