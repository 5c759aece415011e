"""
Unit tests for configuration management.
"""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pagekit.config.settings import ConfigManager, Settings, get_config, get_settings


class TestSettings:
    """Tests for Settings model."""

    def test_default_settings(self):
        """Test default settings values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.test_env == "qa"
        assert settings.wait_timeout_seconds == 5
        assert settings.wait_polling_ms == 100
        assert settings.visibility_timeout_seconds == 30
        assert settings.extended_timeout_seconds == 60
        assert settings.certificate_timeout_seconds == 20
        assert settings.list_click_timeout_seconds == 30
        assert settings.browser_headless is True
        assert settings.certificate_error_title == "Certificate Error: Navigation Blocked"
        assert settings.certificate_override_selector == "#overridelink"
        assert settings.device_cookie_names == ["MacId", "NetID"]
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_settings_from_env(self):
        """Test loading settings from environment variables."""
        with patch.dict(os.environ, {
            "TEST_ENV": " UAT ",
            "WAIT_TIMEOUT_SECONDS": "2.5",
            "BROWSER_HEADLESS": "false",
            "DEVICE_COOKIE_NAMES": "MacId, NetID, Host",
            "LOG_LEVEL": "debug",
        }):
            settings = Settings(_env_file=None)

            assert settings.test_env == "uat"
            assert settings.wait_timeout_seconds == 2.5
            assert settings.browser_headless is False
            assert settings.device_cookie_names == ["MacId", "NetID", "Host"]
            assert settings.log_level == "DEBUG"

    def test_cookie_names_from_list(self):
        """Blank cookie names are dropped."""
        settings = Settings(device_cookie_names=["MacId", " ", "Host "])
        assert settings.device_cookie_names == ["MacId", "Host"]

    def test_log_level_validation(self):
        """Test log level validation."""
        settings = Settings(log_level="warning")
        assert settings.log_level == "WARNING"

        with pytest.raises(ValueError, match="Invalid log level"):
            Settings(log_level="LOUD")

    def test_log_format_validation(self):
        """Test log format validation."""
        assert Settings(log_format="json").log_format == "json"
        assert Settings(log_format="text").log_format == "text"

        with pytest.raises(ValueError, match="Invalid log format"):
            Settings(log_format="xml")

    def test_numeric_validation(self):
        """Test numeric field validation."""
        settings = Settings(wait_timeout_seconds=0.2, wait_polling_ms=50)
        assert settings.wait_timeout_seconds == 0.2
        assert settings.wait_polling_ms == 50

        with pytest.raises(ValueError):
            Settings(wait_timeout_seconds=0)

        with pytest.raises(ValueError):
            Settings(wait_polling_ms=5)  # < 10

        with pytest.raises(ValueError):
            Settings(browser_viewport_width=100)  # < 320

    def test_create_directories(self, tmp_path):
        """Test directory creation."""
        settings = Settings(screenshots_dir=tmp_path / "shots")
        assert not (tmp_path / "shots").exists()

        settings.create_directories()

        assert (tmp_path / "shots").is_dir()
        assert isinstance(settings.screenshots_dir, Path)


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_get_existing_key(self):
        """Test getting an existing configuration key."""
        config = ConfigManager(Settings(test_env="prod"))

        assert config.get("test_env") == "prod"
        assert config.get("browser_headless") is True

    def test_get_missing_key(self):
        """Test getting a missing configuration key."""
        config = ConfigManager(Settings())

        assert config.get("non_existent_key") is None
        assert config.get("non_existent_key", "default") == "default"

    def test_get_required_missing(self):
        """Test getting a required missing key."""
        config = ConfigManager(Settings())

        assert config.get_required("wait_polling_ms") == Settings().wait_polling_ms
        with pytest.raises(KeyError, match="Required configuration key not found"):
            config.get_required("non_existent_key")

    def test_get_all(self):
        """Test getting all configuration values."""
        config = ConfigManager(Settings(log_level="DEBUG"))

        all_config = config.get_all()

        assert all_config["log_level"] == "DEBUG"
        assert "device_cookie_names" in all_config
        assert "extended_timeout_seconds" in all_config


class TestGetSettings:
    """Tests for get_settings function."""

    def setup_method(self):
        get_settings.cache_clear()

    def teardown_method(self):
        get_settings.cache_clear()

    @patch("pagekit.config.settings.load_dotenv")
    @patch("pagekit.config.settings.Path")
    def test_get_settings_loads_env(self, mock_path_class, mock_load_dotenv):
        """get_settings loads a .env file when present."""
        mock_path_instance = MagicMock()
        mock_path_instance.exists.return_value = True
        mock_path_class.return_value = mock_path_instance

        settings = get_settings()

        assert isinstance(settings, Settings)
        mock_load_dotenv.assert_called_once_with(mock_path_instance)

    def test_get_settings_is_cached(self):
        """Repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_get_config_wraps_settings(self):
        """get_config exposes the cached settings."""
        assert get_config().settings is get_settings()
