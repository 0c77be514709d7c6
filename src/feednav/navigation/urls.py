"""
URL normalization and resolution.

Both functions are best effort and never raise: a malformed URL is passed
through and fails later, at fetch time.
"""

from urllib.parse import urljoin, urlparse

from feednav.core.exceptions import UrlResolutionError
from feednav.utils.logging import get_logger

logger = get_logger(__name__)

EXPLICIT_SCHEMES = ("http://", "https://")
DEFAULT_SCHEME = "https://"


def normalize(text: str) -> str:
    """
    Turn operator input into an absolute URL.

    Examples:
        >>> normalize("example.com/feed")
        'https://example.com/feed'
        >>> normalize("http://example.com")
        'http://example.com'
    """
    if text.startswith(EXPLICIT_SCHEMES):
        return text
    return f"{DEFAULT_SCHEME}{text}"


def _join(base: str, href: str) -> str:
    try:
        parsed = urlparse(base)
    except ValueError as e:
        raise UrlResolutionError(f"Unparseable base URL: {e}", base=base, href=href) from e

    if not parsed.scheme or not parsed.netloc:
        raise UrlResolutionError("Base URL is not absolute", base=base, href=href)

    try:
        return urljoin(base, href)
    except ValueError as e:
        raise UrlResolutionError(f"Cannot join href: {e}", base=base, href=href) from e


def resolve(base: str, href: str) -> str:
    """
    Resolve an href against the page it was found on.

    Hrefs that already start with "http" are returned unchanged. If the
    join fails the raw href is returned.

    Args:
        base: URL of the page containing the link
        href: Raw href attribute value

    Returns:
        Absolute URL, or href itself when resolution is impossible
    """
    if href.startswith("http"):
        return href

    try:
        return _join(base, href)
    except UrlResolutionError as e:
        logger.debug(f"Falling back to raw href: {e}")
        return href
