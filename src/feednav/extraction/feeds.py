"""
Syndication feed detection.

Wraps feedparser so that anything that is not a usable feed, whether
malformed, empty or plain HTML, comes back as None instead of an error.
"""

import io
from dataclasses import dataclass

import feedparser

from feednav.core.exceptions import FeedParseError
from feednav.utils.logging import get_logger

logger = get_logger(__name__)

# Title shown for entries that carry none
UNTITLED = "Untitled"


@dataclass(frozen=True)
class FeedItem:
    """One entry of a feed menu."""

    title: str
    link: str = ""


def _parse(raw: bytes | str) -> "feedparser.FeedParserDict":
    if isinstance(raw, str):
        raw = raw.encode("utf-8")

    # A stream is always read as content, never as a path or URL
    try:
        return feedparser.parse(io.BytesIO(raw))
    except Exception as e:  # noqa: BLE001 - parser internals may raise anything
        raise FeedParseError(f"Feed parser failed: {e}") from e


def _entry_to_item(entry: dict) -> FeedItem:
    title = entry.get("title")
    if title is None:
        title = UNTITLED

    links = entry.get("links") or []
    link = links[0].get("href", "") if links else ""

    return FeedItem(title=title, link=link or "")


def try_parse_feed(raw: bytes) -> list[FeedItem] | None:
    """
    Interpret a payload as a feed.

    Args:
        raw: Response body as fetched

    Returns:
        One FeedItem per entry in document order, or None when the payload
        is not a feed or has no entries.
    """
    try:
        parsed = _parse(raw)
    except FeedParseError as e:
        logger.debug(f"Not a feed: {e}")
        return None

    entries = parsed.get("entries") or []
    if not entries:
        if parsed.get("bozo"):
            logger.debug(f"Not a feed: {parsed.get('bozo_exception')}")
        return None

    items = [_entry_to_item(entry) for entry in entries]
    logger.info(f"Feed detected with {len(items)} entries")
    return items
