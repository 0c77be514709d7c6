"""
Hyperlink collection.
"""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from feednav.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LinkEntry:
    """
    A link as captured from the document.

    raw_href is kept unresolved; size is only set once the link has been
    probed.
    """

    raw_href: str
    size: int | None = None


def collect_links(raw: bytes | str) -> list[str]:
    """
    Collect the href of every anchor, in document order.

    Values are returned verbatim: relative, empty and repeated hrefs are
    all kept so menu numbering matches the page.

    Args:
        raw: HTML body as fetched

    Returns:
        Raw href strings
    """
    soup = BeautifulSoup(raw, "html.parser")
    hrefs = []
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if href is not None:
            hrefs.append(href)

    logger.debug(f"Collected {len(hrefs)} links")
    return hrefs
