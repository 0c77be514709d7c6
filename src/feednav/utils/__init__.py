"""
Utilities module for feednav.
"""

from feednav.utils.logging import setup_logging, get_logger, reset_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "reset_logging",
]
