"""
Mutable state of one navigation session.
"""

from dataclasses import dataclass


@dataclass
class Session:
    """
    Where the operator currently is.

    Owned and mutated by the navigation engine only.

    Attributes:
        current_url: URL of the resource being shown
        page: Zero-based link menu page
        expanded: Whether text blocks are shown untruncated
    """

    current_url: str
    page: int = 0
    expanded: bool = False

    def navigate(self, url: str) -> None:
        """Move to a new resource, resetting per-page view state."""
        self.current_url = url
        self.page = 0
        self.expanded = False
