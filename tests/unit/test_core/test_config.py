#!/usr/bin/env python3
"""Tests for environment-based configuration."""

from pathlib import Path

import pytest

from expend.core.config import Config, Environment, get_config, reload_config


class TestConfigFromEnvironment:
    def test_test_environment(self, tmp_path):
        config = Config.from_environment()

        assert config.environment == Environment.TEST
        assert config.context_dir == tmp_path / "contexts"
        assert config.expensify.base_url == "https://integrations.expensify.com"
        assert config.expensify.timeout == 30
        assert config.rates_file is None

    def test_credentials_and_overrides(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_USER_ID", "partner-id")
        monkeypatch.setenv("EXPENSIFY_USER_SECRET", "partner-secret")
        monkeypatch.setenv("EXPENSIFY_BASE_URL", "http://localhost:1234")
        monkeypatch.setenv("EXPENSIFY_TIMEOUT", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = Config.from_environment()

        assert config.expensify.user_id == "partner-id"
        assert config.expensify.user_secret == "partner-secret"
        assert config.expensify.base_url == "http://localhost:1234"
        assert config.expensify.timeout == 5
        assert config.log_level == "DEBUG"

    def test_invalid_environment(self, monkeypatch):
        monkeypatch.setenv("EXPEND_ENV", "staging")
        with pytest.raises(ValueError):
            Config.from_environment()


class TestConfigValidation:
    def test_valid_by_default(self):
        assert Config.from_environment().validate() == []

    def test_user_id_without_secret(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_USER_ID", "partner-id")
        errors = Config.from_environment().validate()
        assert any("EXPENSIFY_USER_SECRET" in e for e in errors)

    def test_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_TIMEOUT", "0")
        errors = Config.from_environment().validate()
        assert "Expensify timeout must be positive" in errors

    def test_missing_rates_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EXPEND_RATES_FILE", str(tmp_path / "missing.yaml"))
        errors = Config.from_environment().validate()
        assert any("rates_file" in e for e in errors)

    def test_get_config_raises_on_invalid(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_USER_SECRET", "partner-secret")
        with pytest.raises(ValueError, match="Configuration validation failed"):
            get_config()


class TestConfigCaching:
    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_picks_up_changes(self, monkeypatch):
        get_config()
        monkeypatch.setenv("EXPENSIFY_TIMEOUT", "7")
        assert reload_config().expensify.timeout == 7


class TestConfigToDict:
    def test_secret_is_redacted(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_USER_ID", "partner-id")
        monkeypatch.setenv("EXPENSIFY_USER_SECRET", "partner-secret")
        data = Config.from_environment().to_dict()

        assert data["expensify"]["user_id"] == "partner-id"
        assert data["expensify"]["user_secret"] == "***REDACTED***"
        assert data["environment"] == "test"
        assert isinstance(data["context_dir"], str)

    def test_include_sensitive(self, monkeypatch):
        monkeypatch.setenv("EXPENSIFY_USER_ID", "partner-id")
        monkeypatch.setenv("EXPENSIFY_USER_SECRET", "partner-secret")
        data = Config.from_environment().to_dict(include_sensitive=True)
        assert data["expensify"]["user_secret"] == "partner-secret"

    def test_unset_secret_is_not_redacted(self):
        data = Config.from_environment().to_dict()
        assert data["expensify"]["user_secret"] is None
        assert Path(data["context_dir"]).name == "contexts"
