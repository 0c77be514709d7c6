"""
Custom exceptions for feednav.

All exceptions inherit from FeedNavError so callers can catch the whole
family at the CLI boundary.

Exception Hierarchy:
    FeedNavError (base)
    ├── ConfigurationError
    ├── FetchError
    ├── ExtractionError
    │   └── FeedParseError
    ├── UrlResolutionError
    └── SelectionError
"""

from typing import Any


class FeedNavError(Exception):
    """
    Base exception for all feednav errors.

    Attributes:
        message: Human-readable error description
        details: Optional dictionary with additional context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(
                f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FeedNavError):
    """
    Error in configuration loading or validation.

    Raised when:
    - Configuration file is missing or malformed
    - Setting values fail validation
    """

    pass


# =============================================================================
# Fetch Errors
# =============================================================================


class FetchError(FeedNavError):
    """
    Error retrieving a resource over HTTP.

    Raised when:
    - The URL cannot be parsed or uses an unsupported scheme
    - The connection fails or times out
    - The server answers with a non-2xx status

    Fatal to a navigation session; never retried.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if status_code:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


# =============================================================================
# Extraction Errors
# =============================================================================


class ExtractionError(FeedNavError):
    """
    Base error for content extraction operations.
    """

    pass


class FeedParseError(ExtractionError):
    """
    The feed parser could not make sense of a payload.

    Always recovered locally: the payload is treated as HTML instead.
    """

    pass


# =============================================================================
# Navigation Errors
# =============================================================================


class UrlResolutionError(FeedNavError):
    """
    A relative href could not be joined onto its base URL.

    Recovered locally by falling back to the raw href.
    """

    def __init__(
        self,
        message: str,
        base: str | None = None,
        href: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if base is not None:
            details["base"] = base
        if href is not None:
            details["href"] = href
        super().__init__(message, details)
        self.base = base
        self.href = href


class SelectionError(FeedNavError):
    """
    Operator input that does not match any offered menu entry.

    Raised when:
    - The token is not a number or a known command
    - The number is outside the visible range
    - The command is not offered in the current state
    """

    def __init__(
        self,
        message: str,
        token: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if token is not None:
            details["token"] = token
        super().__init__(message, details)
        self.token = token
