"""
Extraction module for feednav.

Provides content classification and extraction:
- Feed detection and item mapping
- Ranked text-block extraction from HTML
- Hyperlink collection
"""

from feednav.extraction.feeds import (
    FeedItem,
    UNTITLED,
    try_parse_feed,
)
from feednav.extraction.blocks import (
    TextBlock,
    extract_top_blocks,
)
from feednav.extraction.links import (
    LinkEntry,
    collect_links,
)
from feednav.extraction.classifier import (
    Resource,
    ResourceKind,
    classify,
)

__all__ = [
    # Feeds
    "FeedItem",
    "UNTITLED",
    "try_parse_feed",
    # Text blocks
    "TextBlock",
    "extract_top_blocks",
    # Links
    "LinkEntry",
    "collect_links",
    # Classification
    "Resource",
    "ResourceKind",
    "classify",
]
