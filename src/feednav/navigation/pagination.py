"""
Link menu pagination.
"""

from dataclasses import dataclass


DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageWindow:
    """The slice of a link list visible on one menu page."""

    page: int
    page_size: int
    total: int

    @property
    def start(self) -> int:
        return self.page * self.page_size

    @property
    def end(self) -> int:
        return min(self.start + self.page_size, self.total)

    @property
    def size(self) -> int:
        """Number of selectable entries; valid indices are 1..size."""
        return self.end - self.start

    @property
    def has_next(self) -> bool:
        return self.end < self.total

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def page_count(self) -> int:
        return page_count(self.total, self.page_size)

    def index_of(self, selection: int) -> int:
        """Map a 1-based selection on this page to an index in the full list."""
        if not 1 <= selection <= self.size:
            raise IndexError(f"selection {selection} outside 1..{self.size}")
        return self.start + selection - 1


def page_count(total: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Number of pages needed for total entries (ceil division)."""
    return -(-total // page_size)


def page_window(page: int, total: int, page_size: int = DEFAULT_PAGE_SIZE) -> PageWindow:
    """
    Build the window for a page.

    Raises:
        ValueError: If page_size is not positive, page is negative, or the
            page starts beyond the last entry
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    if page < 0:
        raise ValueError(f"page must be non-negative, got {page}")
    if page * page_size >= total:
        raise ValueError(
            f"page {page} is out of range for {total} entries (page_size={page_size})")
    return PageWindow(page=page, page_size=page_size, total=total)
