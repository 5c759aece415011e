"""
Exception hierarchy for pagekit.

Driver failures are wrapped into these types so callers get the selector,
action and page URL alongside the original Playwright error.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class PageKitError(Exception):
    """Base exception for all pagekit errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
            "cause": str(self.cause) if self.cause else None
        }


class BrowserError(PageKitError):
    """Error raised when a driver action on the page fails."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        selector: Optional[str] = None,
        action: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.url = url
        self.selector = selector
        self.action = action
        self.details.update({
            "url": url,
            "selector": selector,
            "action": action
        })


class WaitTimeoutError(BrowserError):
    """Error raised when an explicit wait expires."""

    def __init__(
        self,
        message: str,
        operation: str,
        timeout_ms: int,
        **kwargs
    ):
        kwargs.setdefault("action", operation)
        super().__init__(message, **kwargs)
        self.operation = operation
        self.timeout_ms = timeout_ms
        self.details.update({
            "operation": operation,
            "timeout_ms": timeout_ms
        })


class DeviceIdentityError(PageKitError):
    """Error raised when the device hardware address cannot be determined."""
    pass
