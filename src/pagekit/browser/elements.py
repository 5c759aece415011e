"""
Declarative element fields for page objects.
"""

from typing import Any, Optional


class Element:
    """
    Page-object field that resolves to a fresh Playwright locator.

    Declared on a BasePage subclass::

        class LoginPage(BasePage):
            username = Element("#username")
            submit = Element("button", has_text="Sign in")

    Each attribute access builds a new locator from the owning page, so the
    field keeps working after navigation or a window switch.
    """

    def __init__(self, selector: str, has_text: Optional[str] = None) -> None:
        self.selector = selector
        self.has_text = has_text
        self.name: Optional[str] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        if self.has_text is not None:
            return instance.page.locator(self.selector, has_text=self.has_text)
        return instance.page.locator(self.selector)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"Element field '{self.name}' is read-only")

    def __repr__(self) -> str:
        return f"Element({self.selector!r}, has_text={self.has_text!r})"
