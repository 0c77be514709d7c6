"""
Resource classification.

Turns a fetched body into a tagged Resource: either a feed with its items,
or an HTML page with ranked text blocks and raw links.
"""

from dataclasses import dataclass, field
from enum import Enum

from feednav.extraction.blocks import DEFAULT_MIN_LENGTH, TextBlock, extract_top_blocks
from feednav.extraction.feeds import FeedItem, try_parse_feed
from feednav.extraction.links import LinkEntry, collect_links
from feednav.utils.logging import get_logger

logger = get_logger(__name__)


class ResourceKind(str, Enum):
    """What a fetched body turned out to be."""

    FEED = "feed"
    PAGE = "page"


@dataclass(frozen=True)
class Resource:
    """
    A classified resource.

    Only the fields matching kind are populated: items for FEED,
    blocks and links for PAGE.
    """

    kind: ResourceKind
    url: str
    items: tuple[FeedItem, ...] = field(default_factory=tuple)
    blocks: tuple[TextBlock, ...] = field(default_factory=tuple)
    links: tuple[LinkEntry, ...] = field(default_factory=tuple)


def classify(
    url: str,
    raw: bytes,
    top_k: int = 5,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> Resource:
    """
    Classify a fetched body.

    Args:
        url: URL the body was fetched from
        raw: Response body
        top_k: Number of text blocks to keep for pages
        min_length: Minimum text-block length for pages

    Returns:
        A FEED resource when the body parses as a non-empty feed,
        otherwise a PAGE resource.
    """
    items = try_parse_feed(raw)
    if items is not None:
        return Resource(kind=ResourceKind.FEED, url=url, items=tuple(items))

    blocks = extract_top_blocks(raw, k=top_k, min_length=min_length)
    links = tuple(LinkEntry(raw_href=href) for href in collect_links(raw))

    logger.info(
        f"Page {url}: {len(blocks)} text blocks, {len(links)} links")
    return Resource(
        kind=ResourceKind.PAGE,
        url=url,
        blocks=tuple(blocks),
        links=links,
    )
