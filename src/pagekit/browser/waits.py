"""
Explicit wait primitives over Playwright locators.

Every wait raises WaitTimeoutError on expiry; callers that only want to
prepare an action catch it themselves.
"""

import asyncio
from typing import Awaitable, Callable

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from pagekit.error_handling.exceptions import WaitTimeoutError


def describe(locator: Locator) -> str:
    """Short human-readable form of a locator for logs and errors."""
    text = str(locator)
    return text if len(text) <= 200 else text[:197] + "..."


async def wait_for_visible(locator: Locator, timeout_s: float) -> None:
    """Wait until the first matching element is visible."""
    await _wait_for_state(locator, "visible", timeout_s)


async def wait_for_hidden(locator: Locator, timeout_s: float) -> None:
    """Wait until the first matching element is hidden or detached."""
    await _wait_for_state(locator, "hidden", timeout_s)


async def _wait_for_state(locator: Locator, state: str, timeout_s: float) -> None:
    timeout_ms = int(timeout_s * 1000)
    try:
        await locator.first.wait_for(state=state, timeout=timeout_ms)
    except PlaywrightTimeoutError as exc:
        raise WaitTimeoutError(
            f"Element did not become {state} within {timeout_ms}ms",
            operation=state,
            timeout_ms=timeout_ms,
            selector=describe(locator),
            cause=exc,
        ) from exc


async def poll_until(
    predicate: Callable[[], Awaitable[bool]],
    timeout_s: float,
    polling_ms: int,
    operation: str,
    selector: str = "",
) -> None:
    """
    Await ``predicate`` every ``polling_ms`` until it returns True.

    The predicate is always evaluated at least once, and once more after the
    deadline passes so a condition met during the last sleep still counts.

    Raises:
        WaitTimeoutError: If the predicate never holds within ``timeout_s``
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_s
    interval = polling_ms / 1000

    while True:
        if await predicate():
            return
        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval, remaining))

    timeout_ms = int(timeout_s * 1000)
    raise WaitTimeoutError(
        f"Condition '{operation}' not met within {timeout_ms}ms",
        operation=operation,
        timeout_ms=timeout_ms,
        selector=selector,
    )


async def wait_for_clickable(
    locator: Locator, timeout_s: float, polling_ms: int
) -> None:
    """
    Wait until the first matching element is visible and enabled.

    Each check is bounded by ``polling_ms``; a driver error during a check
    (detached element, closed page) counts as not clickable yet.
    """
    element = locator.first

    async def clickable() -> bool:
        try:
            return (
                await element.is_visible()
                and await element.is_enabled(timeout=polling_ms)
            )
        except PlaywrightError:
            return False

    await poll_until(
        clickable, timeout_s, polling_ms, "clickable", describe(locator)
    )


async def wait_for_text_change(
    locator: Locator, text: str, timeout_s: float, polling_ms: int
) -> None:
    """Wait until the element is gone or its text no longer equals ``text``."""
    element = locator.first

    async def text_changed() -> bool:
        try:
            if await locator.count() == 0:
                return True
            current = await element.inner_text(timeout=polling_ms)
        except PlaywrightError:
            # Detached between the count and the read
            return True
        return current.strip() != text

    await poll_until(
        text_changed, timeout_s, polling_ms, "text_changed", describe(locator)
    )
