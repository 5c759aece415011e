"""
Core module exports.
"""

from pagekit.core.device import format_hardware_address, get_mac_id
from pagekit.core.interfaces import BrowserDriver, ConfigProvider

__all__ = [
    "BrowserDriver",
    "ConfigProvider",
    "get_mac_id",
    "format_hardware_address",
]
