"""
Fetch module for feednav.

Provides the blocking HTTP transport and the optional parallel
link-size prober.
"""

from feednav.fetch.fetcher import Fetcher
from feednav.fetch.prober import FAILED_PROBE_SIZE, probe_link_sizes

__all__ = [
    "Fetcher",
    "FAILED_PROBE_SIZE",
    "probe_link_sizes",
]
