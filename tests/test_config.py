"""Tests for AccessConfig."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from menuaccess import AccessConfig, LogLevel, load_access_config_from_env


class TestAccessConfig:
    """Tests for AccessConfig model."""

    def test_create_default_config(self) -> None:
        """Test creating an AccessConfig with defaults."""
        config = AccessConfig()
        assert config.log_level == LogLevel.INFO
        assert config.log_json is False
        assert config.service_name is None
        assert config.strict_menu_validation is True
        assert config.landing_fallback_route_key is None
        assert config.seed_demo_policies is False

    def test_create_custom_config(self) -> None:
        """Test creating an AccessConfig with custom values."""
        config = AccessConfig(
            log_level=LogLevel.DEBUG,
            log_json=True,
            service_name="admin-console",
            strict_menu_validation=False,
            landing_fallback_route_key="help.main",
            seed_demo_policies=True,
        )
        assert config.log_level == LogLevel.DEBUG
        assert config.log_json is True
        assert config.service_name == "admin-console"
        assert config.strict_menu_validation is False
        assert config.landing_fallback_route_key == "help.main"
        assert config.seed_demo_policies is True

    def test_log_level_from_string(self) -> None:
        """Test creating config with log level as string."""
        config = AccessConfig(log_level="DEBUG")
        assert config.log_level == LogLevel.DEBUG

    def test_log_level_case_insensitive(self) -> None:
        """Test log level parsing ignores case."""
        config = AccessConfig(log_level="warning")
        assert config.log_level == LogLevel.WARNING

    def test_log_level_invalid(self) -> None:
        """Test creating config with invalid log level."""
        with pytest.raises(ValueError, match="Invalid log level"):
            AccessConfig(log_level="INVALID")

    def test_blank_fallback_is_none(self) -> None:
        """Test that a blank fallback route key means no fallback."""
        config = AccessConfig(landing_fallback_route_key="   ")
        assert config.landing_fallback_route_key is None

    def test_extra_fields_forbidden(self) -> None:
        """Test that unknown settings are rejected."""
        with pytest.raises(ValidationError):
            AccessConfig(cache_ttl_seconds=60)


class TestLoadAccessConfigFromEnv:
    """Tests for load_access_config_from_env function."""

    def test_load_defaults(self) -> None:
        """Test loading config with no environment variables."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_access_config_from_env()
            assert config.log_level == LogLevel.INFO
            assert config.log_json is False
            assert config.strict_menu_validation is True
            assert config.landing_fallback_route_key is None
            assert config.seed_demo_policies is False

    def test_load_from_env(self) -> None:
        """Test loading config from environment variables."""
        env = {
            "LOG_LEVEL": "DEBUG",
            "LOG_JSON": "true",
            "SERVICE_NAME": "admin-console",
            "MENU_STRICT_VALIDATION": "false",
            "MENU_LANDING_FALLBACK": "help.main",
            "MENU_SEED_DEMO_POLICIES": "yes",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_access_config_from_env()
            assert config.log_level == LogLevel.DEBUG
            assert config.log_json is True
            assert config.service_name == "admin-console"
            assert config.strict_menu_validation is False
            assert config.landing_fallback_route_key == "help.main"
            assert config.seed_demo_policies is True

    def test_load_invalid_log_level(self) -> None:
        """Test that an invalid LOG_LEVEL fails validation."""
        with patch.dict(os.environ, {"LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValueError, match="Invalid log level"):
                load_access_config_from_env()
