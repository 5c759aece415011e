"""
Error types raised by pagekit.
"""

from .exceptions import (
    PageKitError,
    BrowserError,
    WaitTimeoutError,
    DeviceIdentityError,
)

__all__ = [
    "PageKitError",
    "BrowserError",
    "WaitTimeoutError",
    "DeviceIdentityError",
]
