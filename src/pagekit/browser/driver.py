"""
Playwright browser session used to obtain pages for page objects.
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from pagekit.config.settings import get_settings
from pagekit.core.interfaces import BrowserDriver
from pagekit.error_handling.exceptions import BrowserError
from pagekit.monitoring.logger import get_logger, log_performance_metric


class PlaywrightDriver(BrowserDriver):
    """Playwright-based browser session."""

    def __init__(
        self,
        headless: Optional[bool] = None,
        viewport_width: Optional[int] = None,
        viewport_height: Optional[int] = None,
        timeout: Optional[int] = None,
    ) -> None:
        """
        Initialize the Playwright driver.

        Args:
            headless: Run browser in headless mode
            viewport_width: Browser viewport width
            viewport_height: Browser viewport height
            timeout: Default timeout in milliseconds
        """
        settings = get_settings()
        self.headless = headless if headless is not None else settings.browser_headless
        self.viewport_width = viewport_width or settings.browser_viewport_width
        self.viewport_height = viewport_height or settings.browser_viewport_height
        self.timeout = timeout or settings.browser_timeout

        self.logger = get_logger("pagekit.browser.driver")
        self._playwright = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def start(self) -> None:
        """Start the browser and create a page."""
        if self._playwright is None:
            self._playwright = await async_playwright().start()

        if self._browser is None:
            self.logger.info(
                "Starting browser",
                extra={
                    "headless": self.headless,
                    "viewport": f"{self.viewport_width}x{self.viewport_height}",
                },
            )
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=["--no-sandbox", "--disable-dev-shm-usage"],
                env=os.environ,
            )

        if self._context is None:
            self._context = await self._browser.new_context(
                viewport={
                    "width": self.viewport_width,
                    "height": self.viewport_height,
                },
            )
            self._context.set_default_timeout(self.timeout)

        if self._page is None:
            self._page = await self._context.new_page()

    async def stop(self) -> None:
        """Stop the browser and cleanup resources."""
        if self._page:
            await self._page.close()
            self._page = None

        if self._context:
            await self._context.close()
            self._context = None

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        self.logger.info("Browser stopped")

    def _require_page(self) -> Page:
        if not self._page:
            raise BrowserError(
                "Browser not started. Call start() first.", action="require_page"
            )
        return self._page

    async def navigate(self, url: str) -> None:
        """Navigate to a URL."""
        if not self._page:
            await self.start()

        self.logger.info("Navigating to URL", extra={"url": url})
        start_time = asyncio.get_running_loop().time()

        await self._page.goto(url, wait_until="load")

        elapsed_ms = (asyncio.get_running_loop().time() - start_time) * 1000
        log_performance_metric("page_navigation", elapsed_ms, context={"url": url})

    async def get_page_title(self) -> str:
        """Get the current page title."""
        return await self._require_page().title()

    async def get_page_url(self) -> str:
        """Get the current page URL."""
        return self._require_page().url

    async def save_screenshot(self, path: Path) -> None:
        """
        Save a screenshot to file.

        Args:
            path: Path to save the screenshot
        """
        page = self._require_page()
        path.parent.mkdir(parents=True, exist_ok=True)

        self.logger.info("Saving screenshot", extra={"path": str(path)})
        await page.screenshot(path=str(path), type="png", full_page=False)

    @property
    def page(self) -> Page:
        """Get the current page object."""
        return self._require_page()

    @property
    def context(self) -> BrowserContext:
        """Get the current browser context."""
        self._require_page()
        return self._context

    async def __aenter__(self) -> "PlaywrightDriver":
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.stop()
