"""
Tests for exception hierarchy.

Tests custom exceptions and error handling.
"""

import pytest

from feednav.core.exceptions import (
    FeedNavError,
    ConfigurationError,
    FetchError,
    ExtractionError,
    FeedParseError,
    UrlResolutionError,
    SelectionError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_base_exception(self):
        """FeedNavError should be the base for all custom exceptions."""
        exc = FeedNavError("Test error")

        assert isinstance(exc, Exception)
        assert str(exc) == "Test error"

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, FetchError, ExtractionError, UrlResolutionError, SelectionError],
    )
    def test_direct_subclasses(self, exc_class):
        """Every error family derives from FeedNavError."""
        assert isinstance(exc_class("boom"), FeedNavError)

    def test_feed_parse_error(self):
        """FeedParseError is an extraction error."""
        exc = FeedParseError("not xml")

        assert isinstance(exc, ExtractionError)
        assert isinstance(exc, FeedNavError)

    def test_catch_all(self):
        """The base class catches the whole family."""
        with pytest.raises(FeedNavError):
            raise SelectionError("Not a number", token="x")


class TestExceptionDetails:
    """Tests for exception context."""

    def test_details_in_str(self):
        """Details are appended to the message."""
        exc = FeedNavError("Bad thing", details={"path": "/tmp/x"})

        assert str(exc) == "Bad thing (path='/tmp/x')"
        assert exc.message == "Bad thing"

    def test_fetch_error_status_code(self):
        """Status codes are recorded on the error and in details."""
        exc = FetchError("HTTP 404 Not Found", url="https://example.com/", status_code=404)

        assert exc.status_code == 404
        assert exc.url == "https://example.com/"
        assert exc.details == {"status_code": 404}

    def test_fetch_error_without_status(self):
        """Transport failures carry no status code."""
        exc = FetchError("ConnectError: refused", url="https://example.com/")

        assert exc.status_code is None
        assert str(exc) == "ConnectError: refused"

    def test_url_resolution_error(self):
        """Base and href are kept for diagnostics."""
        exc = UrlResolutionError("Base URL is not absolute", base="foo", href="/bar")

        assert exc.base == "foo"
        assert exc.href == "/bar"
        assert exc.details == {"base": "foo", "href": "/bar"}

    def test_selection_error_token(self):
        """The rejected token is kept."""
        exc = SelectionError("Selection must be between 1 and 3", token="9")

        assert exc.token == "9"
        assert "token='9'" in str(exc)

    def test_repr(self):
        """repr names the concrete class."""
        exc = ConfigurationError("Invalid", details={"k": 1})

        assert repr(exc) == "ConfigurationError('Invalid', details={'k': 1})"
