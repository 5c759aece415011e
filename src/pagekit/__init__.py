"""
pagekit - page-object helpers for Playwright UI tests.
"""

from pagekit.browser import BasePage, Element, PlaywrightDriver
from pagekit.config import Settings, get_settings
from pagekit.error_handling import (
    BrowserError,
    DeviceIdentityError,
    PageKitError,
    WaitTimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    "BasePage",
    "Element",
    "PlaywrightDriver",
    "Settings",
    "get_settings",
    "PageKitError",
    "BrowserError",
    "WaitTimeoutError",
    "DeviceIdentityError",
]
