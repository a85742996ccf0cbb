"""
Unit tests for configuration management.
"""

import datetime as dt
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from worklog.config.settings import (
    WorklogConfig,
    get_config,
    load_config,
    reload_config,
)


class TestWorklogConfig:
    """Test cases for WorklogConfig."""

    def test_config_with_valid_env_vars(self, test_config):
        """Test configuration loads correctly with valid environment variables."""
        assert test_config.environment == "testing"
        assert test_config.debug is True
        assert test_config.log_level == "DEBUG"
        assert test_config.timezone == "Asia/Bangkok"
        assert test_config.work_hours_target == 8.0
        assert test_config.include_empty_days is False

    def test_default_values(self, monkeypatch):
        """Test defaults when nothing is set."""
        for key in (
            "ENVIRONMENT",
            "DEBUG",
            "LOG_LEVEL",
            "TIMEZONE",
            "WORK_HOURS_TARGET",
            "INCLUDE_EMPTY_DAYS",
        ):
            monkeypatch.delenv(key, raising=False)

        config = WorklogConfig(_env_file=None)

        assert config.environment == "development"
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.timezone == "UTC"
        assert config.work_hours_target == 8.0
        assert config.include_empty_days is False

    def test_log_level_normalized(self, mock_env):
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}):
            assert WorklogConfig().log_level == "WARNING"

    def test_invalid_log_level(self, mock_env):
        """Test validation of an unknown log level."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}):
            with pytest.raises(ValidationError) as exc_info:
                WorklogConfig()
        assert "Log level must be one of" in str(exc_info.value)

    def test_invalid_environment(self, mock_env):
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}):
            with pytest.raises(ValidationError):
                WorklogConfig()

    def test_invalid_timezone(self, mock_env):
        with patch.dict(os.environ, {"TIMEZONE": "Mars/Olympus_Mons"}):
            with pytest.raises(ValidationError) as exc_info:
                WorklogConfig()
        assert "Unknown timezone" in str(exc_info.value)

    def test_work_hours_target_must_be_positive(self, mock_env):
        with patch.dict(os.environ, {"WORK_HOURS_TARGET": "0"}):
            with pytest.raises(ValidationError):
                WorklogConfig()

    def test_include_empty_days_from_env(self, mock_env):
        with patch.dict(os.environ, {"INCLUDE_EMPTY_DAYS": "true"}):
            assert WorklogConfig().include_empty_days is True

    def test_populate_by_field_name(self, mock_env):
        config = WorklogConfig(work_hours_target=6)
        assert config.work_hours_target == 6.0

    def test_now_uses_configured_timezone(self, test_config):
        now = test_config.now()
        assert now.tzinfo is not None
        assert now.utcoffset() == dt.timedelta(hours=7)


class TestConfigFunctions:
    """Test cases for configuration functions."""

    def test_get_config_singleton(self, mock_env):
        """Test that get_config returns the same instance."""
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self, mock_env):
        first = get_config()
        second = reload_config()
        assert first is not second
        assert get_config() is second

    def test_load_config_with_env_file(self, mock_env, tmp_path, monkeypatch):
        monkeypatch.delenv("WORK_HOURS_TARGET", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("WORK_HOURS_TARGET=7.5\n", encoding="utf-8")

        config = load_config(str(env_file))

        assert config.work_hours_target == 7.5
