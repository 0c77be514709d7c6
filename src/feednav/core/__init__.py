"""
Core module for feednav.

Contains the exception hierarchy shared by every subsystem.
"""

from feednav.core.exceptions import (
    FeedNavError,
    ConfigurationError,
    FetchError,
    ExtractionError,
    FeedParseError,
    UrlResolutionError,
    SelectionError,
)

__all__ = [
    # Base
    "FeedNavError",
    "ConfigurationError",
    # Transport
    "FetchError",
    # Extraction
    "ExtractionError",
    "FeedParseError",
    # Navigation
    "UrlResolutionError",
    "SelectionError",
]
