"""
Parallel link-size probing.

Fans out one size probe per link over a bounded thread pool and fans the
results back in, in input order. A failed probe maps to size 0 and never
aborts the batch.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Sequence

from feednav.core.exceptions import FetchError
from feednav.extraction.links import LinkEntry
from feednav.navigation.urls import resolve
from feednav.utils.logging import get_logger

logger = get_logger(__name__)

# Size reported for links whose probe failed
FAILED_PROBE_SIZE = 0


def _probe_one(size_of: Callable[[str], int], url: str) -> int:
    try:
        return size_of(url)
    except FetchError as e:
        logger.debug(f"Probe failed for {url}: {e}")
    except Exception as e:  # noqa: BLE001 - any failure scores zero
        logger.debug(f"Size lookup raised for {url}: {type(e).__name__}: {e}")
    return FAILED_PROBE_SIZE


def probe_link_sizes(
    links: Sequence[LinkEntry],
    base_url: str,
    size_of: Callable[[str], int],
    max_workers: int = 8,
) -> list[LinkEntry]:
    """
    Attach a content size to every link and rank them largest first.

    Args:
        links: Raw links collected from a page
        base_url: URL the links are resolved against before probing
        size_of: Callable returning a resource size in bytes (raises FetchError)
        max_workers: Upper bound on concurrent probes

    Returns:
        New LinkEntry list with sizes set, stably sorted by size descending
    """
    if not links:
        return []

    urls = [resolve(base_url, link.raw_href) for link in links]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(urls))) as pool:
        sizes = list(pool.map(lambda url: _probe_one(size_of, url), urls))

    logger.info(f"Probed {len(urls)} links from {base_url}")

    sized = [
        LinkEntry(raw_href=link.raw_href, size=size)
        for link, size in zip(links, sizes)
    ]
    return sorted(sized, key=lambda link: link.size, reverse=True)
