"""
Navigation module for feednav.

Provides the interactive state machine and its building blocks:
- URL normalization and resolution
- Session state
- Link menu pagination
- Menu rendering
"""

from feednav.navigation.urls import normalize, resolve
from feednav.navigation.session import Session
from feednav.navigation.pagination import PageWindow, page_count, page_window
from feednav.navigation.renderer import TRUNCATION_MARKER, format_block
from feednav.navigation.engine import (
    NavigationEngine,
    Outcome,
    State,
    parse_selection,
)

__all__ = [
    # URLs
    "normalize",
    "resolve",
    # State
    "Session",
    # Pagination
    "PageWindow",
    "page_count",
    "page_window",
    # Rendering
    "TRUNCATION_MARKER",
    "format_block",
    # Engine
    "NavigationEngine",
    "Outcome",
    "State",
    "parse_selection",
]
