"""
Base class for page objects.

Wraps a Playwright page with wait-then-act helpers. Preparatory waits log
and swallow timeouts and driver errors so the following action reports the real
failure; explicit ``wait_for_element_*`` calls raise WaitTimeoutError.
"""

import asyncio
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union
from urllib.parse import urlparse

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page

from pagekit.browser import waits
from pagekit.config.settings import Settings, get_settings
from pagekit.core.device import get_mac_id
from pagekit.error_handling.exceptions import (
    BrowserError,
    DeviceIdentityError,
    PageKitError,
    WaitTimeoutError,
)
from pagekit.monitoring.logger import (
    get_logger,
    log_page_event,
    log_performance_metric,
)

Target = Union[str, Locator]
Targets = Union[str, Locator, Sequence[Locator]]


class BasePage:
    """Wait-then-act helpers around a Playwright page."""

    def __init__(self, page: Page, settings: Optional[Settings] = None) -> None:
        """
        Initialize the page object.

        Args:
            page: Playwright page to drive
            settings: Optional settings (defaults to cached settings)
        """
        self.settings = settings or get_settings()
        self.page = page
        self.test_env = self.settings.test_env
        self.timeout_s = self.settings.wait_timeout_seconds
        self.polling_ms = self.settings.wait_polling_ms

        self.logger = get_logger(
            "pagekit.browser.base_page",
            page_object=type(self).__name__,
            test_env=self.test_env,
        )

        # Lazily resolved elements fail after the short wait timeout
        self.page.set_default_timeout(self.timeout_s * 1000)

    # Element resolution

    def _locator(self, target: Target) -> Locator:
        if isinstance(target, str):
            return self.page.locator(target)
        return target

    def _element(self, target: Target) -> Locator:
        return self._locator(target).first

    async def _perform(
        self,
        action: str,
        element: Union[Locator, Page],
        operation: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Run a driver action, wrapping Playwright failures in BrowserError."""
        try:
            return await operation()
        except PlaywrightError as exc:
            subject = "page" if element is self.page else "element"
            raise BrowserError(
                f"Failed to {action} {subject}: {exc}",
                url=self.page.url,
                selector=waits.describe(element),
                action=action,
                cause=exc,
            ) from exc

    # Explicit waits

    async def wait_for_element_to_appear(self, target: Target) -> None:
        """Wait for the element to become visible, raising on timeout."""
        await waits.wait_for_visible(self._locator(target), self.timeout_s)

    async def wait_for_element_to_disappear(self, target: Target) -> None:
        """Wait for the element to be hidden or removed, raising on timeout."""
        await waits.wait_for_hidden(self._locator(target), self.timeout_s)

    async def wait_for_text_to_disappear(self, target: Target, text: str) -> None:
        """Wait until the element's text is no longer ``text``, raising on timeout."""
        await waits.wait_for_text_change(
            self._locator(target), text, self.timeout_s, self.polling_ms
        )

    # Navigation

    async def navigate_to(self, url: str) -> None:
        """
        Navigate to a URL and maximize the window.

        Args:
            url: The destination URL
        """
        self.logger.info("Navigating to URL", extra={"url": url})
        start_time = asyncio.get_running_loop().time()

        await self._perform("navigate", self.page, lambda: self.page.goto(url))
        await self.maximize_window()

        elapsed_ms = (asyncio.get_running_loop().time() - start_time) * 1000
        log_performance_metric("page_navigation", elapsed_ms, context={"url": url})

    async def maximize_window(self) -> None:
        """Resize the viewport to the configured screen size."""
        size = {
            "width": self.settings.browser_screen_width,
            "height": self.settings.browser_screen_height,
        }
        await self._perform(
            "maximize", self.page, lambda: self.page.set_viewport_size(size)
        )

    async def verify_certificate(self) -> bool:
        """
        Click through the browser's certificate error page if it is showing.

        Returns:
            True if the override link was clicked
        """
        title = await self._perform("get_title", self.page, self.page.title)
        if title.lower() != self.settings.certificate_error_title.lower():
            return False

        selector = self.settings.certificate_override_selector
        log_page_event(
            "certificate_override", type(self).__name__, selector=selector
        )
        return await self.wait_and_click(
            selector, self.settings.certificate_timeout_seconds
        )

    async def switch_to_parent_window(self) -> Page:
        """Bring the first page of the browser context to front and drive it."""
        parent = self.page.context.pages[0]
        await parent.bring_to_front()
        self.page = parent
        return parent

    # State checks

    async def is_displayed(self, target: Target, seconds: float) -> bool:
        """
        Check whether the element is displayed within ``seconds``.

        Errors are logged and reported as not displayed.
        """
        element = self._element(target)
        try:
            await self.wait_for(element, seconds)
            return await element.is_visible()
        except (PlaywrightError, PageKitError) as exc:
            self.logger.info(f"Exception in wait for visible: {exc}")
            return False

    async def is_enabled(self, target: Target, seconds: float) -> bool:
        """
        Check whether the element is enabled within ``seconds``.

        Errors are logged and reported as not enabled.
        """
        element = self._element(target)
        try:
            await self.wait_for(element, seconds)
            return await element.is_enabled()
        except (PlaywrightError, PageKitError) as exc:
            self.logger.info(f"Exception in wait for visible: {exc}")
            return False

    # Preparatory waits

    async def wait_for(self, target: Target, seconds: Optional[float] = None) -> bool:
        """
        Wait for the element to become visible, logging instead of raising.

        Args:
            target: Selector or locator
            seconds: Timeout (defaults to the extended timeout)

        Returns:
            True if the element became visible
        """
        if seconds is None:
            seconds = self.settings.extended_timeout_seconds

        locator = self._locator(target)
        try:
            await waits.wait_for_visible(locator, seconds)
            return True
        except (WaitTimeoutError, PlaywrightError) as exc:
            self.logger.info(
                f"Exception in wait for visible: {exc}",
                extra={"selector": waits.describe(locator)},
            )
            return False

    async def wait_for_click(self, target: Target, seconds: float) -> bool:
        """
        Wait for the element to be clickable, logging instead of raising.

        Returns:
            True if the element became visible and enabled
        """
        locator = self._locator(target)
        try:
            await waits.wait_for_clickable(locator, seconds, self.polling_ms)
            return True
        except (WaitTimeoutError, PlaywrightError) as exc:
            self.logger.info(
                f"Exception in wait for clickable: {exc}",
                extra={"selector": waits.describe(locator)},
            )
            return False

    # Actions

    async def click(self, target: Target) -> None:
        """Wait for visibility then click the element."""
        element = self._element(target)
        await self.wait_for(element, self.settings.visibility_timeout_seconds)
        await self._perform("click", element, element.click)

    async def js_click(self, target: Target) -> None:
        """Wait for visibility then click the element from page script."""
        element = self._element(target)
        await self.wait_for(element, self.settings.extended_timeout_seconds)
        await self._perform(
            "js_click", element, lambda: element.evaluate("el => el.click()")
        )

    async def wait_and_click(self, target: Target, seconds: float) -> bool:
        """
        Wait for the element to be clickable then click it.

        A failed click is logged at error level rather than raised.

        Returns:
            True if the click went through
        """
        element = self._element(target)
        await self.wait_for_click(element, seconds)
        try:
            await self.click(element)
            return True
        except BrowserError as exc:
            self.logger.error(
                f"Click failed: {exc.message}",
                extra={"selector": exc.selector, "action": exc.action},
            )
            return False

    async def set_value(self, target: Target, text: str) -> None:
        """Wait for visibility then type ``text`` into the element."""
        element = self._element(target)
        await self.wait_for(element, self.settings.visibility_timeout_seconds)
        await self._perform(
            "type", element, lambda: element.press_sequentially(text)
        )

    async def set_value_and_wait(self, target: Target, text: str) -> None:
        """Wait for visibility then type ``text``; same contract as set_value."""
        await self.set_value(target, text)

    async def clear_and_set_value(self, target: Target, text: str) -> None:
        """Clear the element, type ``text`` and tab out of the field."""
        element = self._element(target)
        await self.wait_for(element, self.settings.extended_timeout_seconds)

        async def replace() -> None:
            await element.clear()
            await element.press_sequentially(text)
            await element.press("Tab")

        await self._perform("clear_and_type", element, replace)

    async def select_by_text(self, target: Target, text: str) -> None:
        """Select the dropdown option whose visible label is ``text``."""
        element = self._element(target)
        await self.wait_for(element, self.settings.visibility_timeout_seconds)
        await self._perform(
            "select", element, lambda: element.select_option(label=text)
        )

    async def select_by_index(self, target: Target, index: int) -> None:
        """Select the dropdown option at ``index``."""
        element = self._element(target)
        await self.wait_for(element, self.settings.visibility_timeout_seconds)
        await self._perform(
            "select", element, lambda: element.select_option(index=index)
        )

    async def dd_selection_by_value(self, target: Target, value: str) -> None:
        """Select the dropdown option whose value attribute is ``value``."""
        element = self._element(target)
        await self.wait_for(element, self.settings.extended_timeout_seconds)
        await self._perform(
            "select", element, lambda: element.select_option(value=value)
        )
        self.logger.info(
            f"Element selected from dropdown: {value}",
            extra={"selector": waits.describe(element)},
        )

    async def element_list_loop(self, targets: Targets, condition: str) -> bool:
        """
        Click the first element whose text contains ``condition``.

        Args:
            targets: Selector, multi-match locator or list of locators
            condition: Substring to look for in each element's text

        Returns:
            True if a matching element was found and clicked
        """
        if isinstance(targets, (str, Locator)):
            elements: List[Locator] = await self._locator(targets).all()
        else:
            elements = list(targets)

        for element in elements:
            text = await self._perform("get_text", element, element.inner_text)
            self.logger.info(f"Available Elements: {text}")
            if condition in text:
                return await self.wait_and_click(
                    element, self.settings.list_click_timeout_seconds
                )
        return False

    # Device identity cookies

    def get_mac_id(self) -> Optional[str]:
        """
        Return this device's MAC id, or None if it cannot be determined.
        """
        mac_id: Optional[str] = None
        try:
            mac_id = get_mac_id()
        except DeviceIdentityError as exc:
            self.logger.error(f"{exc.message}: {exc.details}")
        self.logger.info(f"MAC ID: {mac_id}")
        return mac_id

    async def set_mac_id_cookie(self, mac_id: Optional[str] = None) -> str:
        """
        Set the device identity cookies for the current page.

        Args:
            mac_id: Identifier to use (defaults to this device's MAC id)

        Returns:
            The identifier written to the cookies
        """
        if mac_id is None:
            mac_id = self.get_mac_id()
        if not mac_id:
            raise DeviceIdentityError("No MAC id available for identity cookies")

        names = self.settings.device_cookie_names
        if not names:
            raise PageKitError(
                "No device cookie names configured",
                details={"setting": "device_cookie_names"},
            )

        url = self.page.url
        if urlparse(url).scheme not in ("http", "https"):
            raise BrowserError(
                "Cannot set cookies before navigating to a web page",
                url=url,
                action="add_cookies",
            )

        cookies = [
            {"name": name, "value": mac_id, "url": url}
            for name in names
        ]
        await self._perform(
            "add_cookies", self.page, lambda: self.page.context.add_cookies(cookies)
        )
        self.logger.info(
            f"MAC Id: {mac_id} set.",
            extra={"url": url},
        )
        return mac_id
