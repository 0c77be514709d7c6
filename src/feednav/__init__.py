"""
feednav - an interactive feed and web page navigator.

Fetches a URL, decides whether it is a syndication feed or an HTML page,
shows the most salient content and lets the operator hop from link to
link, one fetch at a time.
"""

__version__ = "0.1.0"

from feednav.config import Settings, load_config
from feednav.utils.logging import setup_logging, get_logger
from feednav.core.exceptions import FeedNavError
from feednav.fetch import Fetcher
from feednav.navigation import NavigationEngine, Outcome

__all__ = [
    "__version__",
    "Settings",
    "load_config",
    "setup_logging",
    "get_logger",
    "FeedNavError",
    "Fetcher",
    "NavigationEngine",
    "Outcome",
]
