"""
Test doubles and payload builders shared across test modules.
"""

from typing import Callable, Iterable

from rich.console import Console

from feednav.core.exceptions import FetchError


def console_text(console: Console) -> str:
    """Everything printed to a recording console so far."""
    return console.file.getvalue()


def scripted_prompt(answers: Iterable[str]) -> Callable[[str], str]:
    """
    Build a prompt callable that replays answers in order.

    Prompts are recorded on the returned callable's ``prompts`` list.
    Running out of answers behaves like end of input.
    """
    remaining = iter(answers)
    prompts: list[str] = []

    def prompt(text: str) -> str:
        prompts.append(text)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    prompt.prompts = prompts
    return prompt


class FakeFetcher:
    """Serves canned bodies by URL; unknown URLs fail like a dead host."""

    def __init__(self, pages: dict[str, bytes] | None = None) -> None:
        self.pages = dict(pages or {})
        self.requested: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError("ConnectError: no route to host", url=url)
        return self.pages[url]

    def content_length(self, url: str) -> int:
        return len(self.fetch(url))


def make_rss(entries: list[tuple[str | None, str | None]]) -> bytes:
    """Build an RSS 2.0 document from (title, link) pairs; None omits the element."""
    items = []
    for title, link in entries:
        parts = []
        if title is not None:
            parts.append(f"<title>{title}</title>")
        if link is not None:
            parts.append(f"<link>{link}</link>")
        items.append(f"<item>{''.join(parts)}</item>")
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel>'
        "<title>Test Feed</title><link>https://example.com/</link>"
        "<description>Test</description>"
        f"{''.join(items)}"
        "</channel></rss>"
    ).encode("utf-8")


def make_html_with_links(count: int, body_text: str = "") -> bytes:
    """Build an HTML page with count anchors pointing at /page/1..count."""
    anchors = "".join(f'<a href="/page/{i}">Page {i}</a>' for i in range(1, count + 1))
    return f"<html><body><p>{body_text}</p>{anchors}</body></html>".encode("utf-8")
