"""
Blocking HTTP transport.

Wraps a single httpx.Client so every fetch in a session shares the same
timeout, headers and connection pool. All transport failures surface as
FetchError.
"""

import httpx

from feednav.config.settings import FetchSettings, Settings
from feednav.core.exceptions import FetchError
from feednav.utils.logging import get_logger

logger = get_logger(__name__)


class Fetcher:
    """
    Fetches raw resource bodies over HTTP.

    Example:
        >>> with Fetcher(FetchSettings()) as fetcher:
        ...     body = fetcher.fetch("https://example.com/feed")
    """

    def __init__(
        self,
        settings: FetchSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the fetcher.

        Args:
            settings: Transport configuration
            transport: Optional httpx transport (used by tests)
        """
        self.settings = settings
        self._client = httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.timeout_seconds,
            follow_redirects=settings.follow_redirects,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Fetcher":
        """Create a fetcher from application settings."""
        return cls(settings.fetch)

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def _check_url(self, url: str) -> None:
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise FetchError(f"Invalid URL: {e}", url=url) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise FetchError(f"Not an absolute http(s) URL: {url!r}", url=url)

    def fetch(self, url: str) -> bytes:
        """
        GET a URL and return its body.

        Args:
            url: Absolute URL to fetch

        Returns:
            Raw response body

        Raises:
            FetchError: On invalid URL, transport failure, timeout or non-2xx status
        """
        self._check_url(url)

        logger.debug(f"GET {url}")
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"HTTP {e.response.status_code} {e.response.reason_phrase}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise FetchError(
                f"Timed out after {self.settings.timeout_seconds}s", url=url) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"{type(e).__name__}: {e}", url=url) from e

        logger.info(
            f"Fetched {url} ({response.status_code}, {len(response.content)} bytes)")
        return response.content

    def content_length(self, url: str) -> int:
        """
        Determine the size of a resource in bytes.

        Uses the Content-Length header of a HEAD response when present,
        otherwise falls back to the length of a full GET body.

        Raises:
            FetchError: If the resource cannot be reached
        """
        self._check_url(url)

        try:
            response = self._client.head(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"HEAD {url} failed ({e}), falling back to GET")
        else:
            header = response.headers.get("content-length")
            if header is not None and header.isdigit():
                return int(header)

        return len(self.fetch(url))
