"""
Browser automation module exports.
"""

from pagekit.browser.base_page import BasePage
from pagekit.browser.driver import PlaywrightDriver
from pagekit.browser.elements import Element

__all__ = [
    "BasePage",
    "Element",
    "PlaywrightDriver",
]
