"""
Shared fixtures: Playwright objects faked with spec'd mocks.

Mocks built with ``spec=Locator``/``spec=Page`` expose Playwright's async
methods as AsyncMock and its sync methods as MagicMock.
"""

from unittest.mock import MagicMock

import pytest
from playwright.async_api import BrowserContext, Locator, Page

from pagekit.config.settings import Settings


def make_locator(
    text: str = "",
    visible: bool = True,
    enabled: bool = True,
    count: int = 1,
) -> MagicMock:
    """Create a fake locator whose ``first`` is itself."""
    locator = MagicMock(spec=Locator)
    locator.first = locator
    locator.is_visible.return_value = visible
    locator.is_enabled.return_value = enabled
    locator.inner_text.return_value = text
    locator.count.return_value = count
    return locator


@pytest.fixture
def settings() -> Settings:
    """Settings with short waits so timeouts resolve quickly."""
    return Settings(
        test_env="QA",
        wait_timeout_seconds=0.5,
        wait_polling_ms=10,
        visibility_timeout_seconds=0.25,
        extended_timeout_seconds=0.75,
        certificate_timeout_seconds=0.5,
        list_click_timeout_seconds=0.5,
        browser_screen_width=1920,
        browser_screen_height=1080,
    )


@pytest.fixture
def locator() -> MagicMock:
    """Fake single-element locator."""
    return make_locator(text="Submit")


@pytest.fixture
def page(locator: MagicMock) -> MagicMock:
    """Fake page that resolves every selector to ``locator``."""
    page = MagicMock(spec=Page)
    page.url = "https://app.example.com/login"
    page.locator.return_value = locator
    page.title.return_value = "Login"

    context = MagicMock(spec=BrowserContext)
    context.pages = [page]
    page.context = context
    return page


@pytest.fixture
def locator_factory():
    """Factory for additional fake locators."""
    return make_locator
