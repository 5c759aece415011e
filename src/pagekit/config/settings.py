"""Configuration management for pagekit."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from pagekit.core.interfaces import ConfigProvider


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Test Environment
    test_env: str = Field(
        default="qa", description="Name of the environment under test"
    )

    # Wait Configuration
    wait_timeout_seconds: float = Field(
        default=5, gt=0, description="Default explicit wait timeout (s)"
    )
    wait_polling_ms: int = Field(
        default=100, ge=10, description="Polling interval for explicit waits (ms)"
    )
    visibility_timeout_seconds: float = Field(
        default=30, gt=0, description="Visibility wait before clicks and typing (s)"
    )
    extended_timeout_seconds: float = Field(
        default=60, gt=0, description="Visibility wait for slow elements (s)"
    )
    certificate_timeout_seconds: float = Field(
        default=20, gt=0, description="Wait for the certificate override link (s)"
    )
    list_click_timeout_seconds: float = Field(
        default=30, gt=0, description="Clickable wait when picking from a list (s)"
    )

    # Browser Configuration
    browser_headless: bool = Field(
        default=True, description="Run browser in headless mode"
    )
    browser_timeout: int = Field(
        default=30000, ge=1000, description="Default navigation timeout (ms)"
    )
    browser_viewport_width: int = Field(
        default=1366, ge=320, description="Initial browser viewport width"
    )
    browser_viewport_height: int = Field(
        default=768, ge=240, description="Initial browser viewport height"
    )
    browser_screen_width: int = Field(
        default=1920, ge=320, description="Viewport width of a maximized window"
    )
    browser_screen_height: int = Field(
        default=1080, ge=240, description="Viewport height of a maximized window"
    )

    # Certificate Interstitial
    certificate_error_title: str = Field(
        default="Certificate Error: Navigation Blocked",
        description="Title of the browser certificate error page",
    )
    certificate_override_selector: str = Field(
        default="#overridelink",
        description="Selector of the 'continue to website' link",
    )

    # Device Identity
    device_cookie_names: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["MacId", "NetID"],
        description="Cookies that carry the device MAC id",
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="text",
        description="Log format (json or text)",
    )
    log_file: Optional[str] = Field(
        default=None, description="Log file path"
    )

    # Storage Configuration
    screenshots_dir: Path = Field(
        default=Path("data/screenshots"), description="Screenshots directory"
    )

    @field_validator("test_env")
    def normalize_test_env(cls, v: str) -> str:
        """Environment names are compared lower-case."""
        return v.strip().lower()

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ["json", "text"]:
            raise ValueError(f"Invalid log format: {v}")
        return v

    @field_validator("device_cookie_names", mode="before")
    @classmethod
    def coerce_cookie_names(cls, raw: Any) -> List[str]:
        """Normalize list inputs (list, tuple, comma-separated string)."""
        if raw is None:
            return []
        if isinstance(raw, str):
            return [item.strip() for item in raw.split(",") if item.strip()]
        if isinstance(raw, (list, tuple, set)):
            return [str(item).strip() for item in raw if item is not None and str(item).strip()]
        raise ValueError(f"Invalid cookie name list: {raw!r}")

    def create_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)


class ConfigManager(ConfigProvider):
    """Configuration manager implementation."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """
        Initialize config manager.

        Args:
            settings: Optional settings instance
        """
        self.settings = settings or get_settings()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            return getattr(self.settings, key)
        except AttributeError:
            return default

    def get_required(self, key: str) -> Any:
        """Get required configuration value."""
        try:
            return getattr(self.settings, key)
        except AttributeError:
            raise KeyError(f"Required configuration key not found: {key}")

    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        return self.settings.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    # Load .env file if it exists
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)

    return Settings()


def get_config() -> ConfigManager:
    """Get configuration manager instance."""
    return ConfigManager(get_settings())
