"""
Core interfaces and abstract base classes for pagekit.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict


class BrowserDriver(ABC):
    """Abstract interface for a browser session owner."""

    @abstractmethod
    async def start(self) -> None:
        """Launch the browser and open a page."""
        pass

    @abstractmethod
    async def stop(self) -> None:
        """Close the page and browser."""
        pass

    @abstractmethod
    async def navigate(self, url: str) -> None:
        """Navigate to a URL."""
        pass

    @abstractmethod
    async def get_page_title(self) -> str:
        """Get the current page title."""
        pass

    @abstractmethod
    async def get_page_url(self) -> str:
        """Get the current page URL."""
        pass

    @abstractmethod
    async def save_screenshot(self, path: Path) -> None:
        """Save a screenshot of the current page."""
        pass


class ConfigProvider(ABC):
    """Abstract interface for configuration management."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        pass

    @abstractmethod
    def get_required(self, key: str) -> Any:
        """Get required configuration value, raise if missing."""
        pass

    @abstractmethod
    def get_all(self) -> Dict[str, Any]:
        """Get all configuration values."""
        pass
