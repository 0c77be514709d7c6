"""
Tests for link menu pagination and session state.
"""

import pytest

from feednav.navigation.pagination import PageWindow, page_count, page_window
from feednav.navigation.session import Session


class TestPageCount:
    """Tests for page_count()."""

    @pytest.mark.parametrize(
        "total,expected",
        [(1, 1), (10, 1), (11, 2), (23, 3), (30, 3)],
    )
    def test_ceil_division(self, total, expected):
        """Pages are counted with ceiling division."""
        assert page_count(total, 10) == expected


class TestPageWindow:
    """Tests for page_window()."""

    def test_first_page(self):
        """Page 0 of 23 shows links 0..9."""
        window = page_window(0, 23)

        assert (window.start, window.end, window.size) == (0, 10, 10)
        assert window.has_next is True
        assert window.has_previous is False
        assert window.page_count == 3

    def test_middle_page(self):
        """Page 1 of 23 has both neighbors."""
        window = page_window(1, 23)

        assert (window.start, window.end) == (10, 20)
        assert window.has_next is True
        assert window.has_previous is True

    def test_last_partial_page(self):
        """Page 2 of 23 shows the remaining 3 links."""
        window = page_window(2, 23)

        assert (window.start, window.end, window.size) == (20, 23, 3)
        assert window.has_next is False
        assert window.has_previous is True

    def test_exact_multiple(self):
        """With 20 links the second page is the last."""
        window = page_window(1, 20)

        assert window.size == 10
        assert window.has_next is False

    def test_index_of(self):
        """Selections map into the full list."""
        window = page_window(2, 23)

        assert window.index_of(1) == 20
        assert window.index_of(3) == 22

    @pytest.mark.parametrize("selection", [0, 4, -1])
    def test_index_of_out_of_range(self, selection):
        """Selections outside the window raise IndexError."""
        with pytest.raises(IndexError):
            page_window(2, 23).index_of(selection)

    @pytest.mark.parametrize(
        "page,total,page_size",
        [(3, 23, 10), (-1, 23, 10), (0, 0, 10), (0, 5, 0)],
    )
    def test_invalid_windows(self, page, total, page_size):
        """Pages beyond the list, negative pages and bad sizes are rejected."""
        with pytest.raises(ValueError):
            page_window(page, total, page_size)

    def test_custom_page_size(self):
        """Page size is configurable."""
        window = page_window(1, 7, page_size=3)

        assert window == PageWindow(page=1, page_size=3, total=7)
        assert (window.start, window.end) == (3, 6)
        assert window.page_count == 3


class TestSession:
    """Tests for Session."""

    def test_defaults(self):
        """A new session starts on page 0, collapsed."""
        session = Session(current_url="https://example.com/")

        assert session.page == 0
        assert session.expanded is False

    def test_navigate_resets_view(self):
        """Navigating resets page and expansion."""
        session = Session(current_url="https://example.com/", page=2, expanded=True)

        session.navigate("https://example.com/next")

        assert session.current_url == "https://example.com/next"
        assert session.page == 0
        assert session.expanded is False
