"""
Tests for URL normalization and resolution.
"""

import pytest

from feednav.navigation.urls import normalize, resolve


class TestNormalize:
    """Tests for normalize()."""

    def test_adds_https_scheme(self):
        """Bare host input gets https://."""
        assert normalize("example.com/feed") == "https://example.com/feed"

    @pytest.mark.parametrize(
        "url",
        ["http://example.com", "https://example.com/path?q=1"],
    )
    def test_keeps_explicit_scheme(self, url):
        """http:// and https:// are left alone."""
        assert normalize(url) == url

    def test_other_schemes_get_prefixed(self):
        """Only http and https count as explicit."""
        assert normalize("ftp://example.com") == "https://ftp://example.com"


class TestResolve:
    """Tests for resolve()."""

    def test_absolute_href_unchanged(self):
        """Hrefs starting with http are returned as-is."""
        assert resolve("https://a.example/", "https://b.example/x") == "https://b.example/x"

    def test_root_relative(self):
        """Root-relative hrefs replace the path."""
        assert resolve("https://example.com/a/b", "/x") == "https://example.com/x"

    def test_path_relative(self):
        """Relative hrefs resolve against the base directory."""
        assert resolve("https://example.com/a/b", "c") == "https://example.com/a/c"

    def test_parent_relative(self):
        """Dot segments are collapsed."""
        assert resolve("https://example.com/a/b/c", "../d") == "https://example.com/a/d"

    def test_empty_href_resolves_to_base(self):
        """An empty href points back at the page itself."""
        assert resolve("https://example.com/page", "") == "https://example.com/page"

    def test_non_absolute_base_falls_back(self):
        """If the base is not absolute the raw href comes back."""
        assert resolve("not a url", "/x") == "/x"

    def test_malformed_base_falls_back(self):
        """Unparseable bases never raise."""
        assert resolve("http://[::1", "page") == "page"
