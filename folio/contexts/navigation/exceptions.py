"""Exceptions for the navigation context."""

from typing import Any


class NavigationConfigError(ValueError):
    """
    Raised when a site.yaml 'nav' entry cannot be turned into a NavItem.

    Attributes:
        entry: The offending entry as loaded from config
    """

    def __init__(self, entry: Any, reason: str):
        self.entry = entry
        self.reason = reason
        super().__init__(f"Invalid navigation entry {entry!r}: {reason}")
