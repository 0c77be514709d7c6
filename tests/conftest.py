"""
Shared pytest fixtures for feednav tests.

Provides reusable fixtures for:
- Configuration and settings
- Sample feed and HTML payloads
- A recording console
- A fake fetcher that serves canned bodies
"""

import io
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from rich.console import Console

from feednav.config import Settings
from feednav.utils.logging import reset_logging
from tests.helpers import FakeFetcher, make_rss


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset logging handlers around each test."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the terminal bell disabled."""
    return Settings(navigation={"bell": False})


@pytest.fixture
def console() -> Console:
    """A console that records plain text into memory."""
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def sample_feed() -> bytes:
    """RSS feed with two entries, the second without a link."""
    return make_rss([("A", "https://x/1"), ("B", None)])


@pytest.fixture
def sample_html() -> bytes:
    """HTML article page with navigation, prose and scripts."""
    return b"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <title>Test Page Title</title>
        <style>body { font-family: sans-serif; color: #333; margin: 0 auto; max-width: 40em; }</style>
    </head>
    <body>
        <nav>
            <a href="/home">Home</a>
            <a href="/products">Products</a>
            <a href="https://other.example.org/about">About Us</a>
        </nav>
        <article>
            <p>This is the main content of our test page. It contains important information about our products and services.</p>
            <p>We offer a wide range of products including software, hardware, and consulting services for everyone.</p>
        </article>
        <script>var tracking = "this script body is long enough to pass the length threshold easily";</script>
        <footer><p>Short footer</p><a href="">Top</a></footer>
    </body>
    </html>
    """
