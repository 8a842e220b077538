"""Unit tests for core/config.py -- Settings loading and validation."""

import pytest
from pydantic import ValidationError

from core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        s = Settings(_env_file=None)
        assert s.github_repo == "Adiksuu/validauth"
        assert s.github_api_url == "https://api.github.com"
        assert s.request_timeout == 10.0
        assert s.log_level == "WARNING"
        assert s.docs_dir is None

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("VALIDAUTH_GITHUB_REPO", "acme/validators")
        monkeypatch.setenv("VALIDAUTH_LOG_LEVEL", "info")
        s = Settings(_env_file=None)
        assert s.github_repo == "acme/validators"
        assert s.log_level == "INFO"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("VALIDAUTH_DEBUG", "true")
        monkeypatch.setenv("VALIDAUTH_LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_trailing_slash_removed_from_api_url(self):
        s = Settings(_env_file=None, github_api_url="https://api.github.com///")
        assert s.github_api_url == "https://api.github.com"

    @pytest.mark.parametrize(
        "field, value",
        [("log_level", "LOUD"), ("request_timeout", 0), ("request_timeout", -1), ("github_repo", "validauth")],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

    def test_missing_docs_dir_warns(self, tmp_path, caplog):
        Settings(_env_file=None, docs_dir=tmp_path / "missing")
        assert "is not a directory" in caplog.text


class TestGetSettings:
    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_cache_clear_picks_up_env(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("VALIDAUTH_GITHUB_REPO", "acme/other")
        get_settings.cache_clear()
        second = get_settings()
        assert second is not first
        assert second.github_repo == "acme/other"
