"""
Menu rendering on a rich console.

All dynamic text (titles, URLs, page content) is printed with markup
disabled so brackets in content or in command labels are shown literally.
"""

from typing import Sequence

from rich.console import Console

from feednav.extraction.blocks import TextBlock
from feednav.extraction.feeds import FeedItem
from feednav.extraction.links import LinkEntry
from feednav.navigation.pagination import PageWindow
from feednav.navigation.urls import resolve

TRUNCATION_MARKER = "... [truncated]"
DEFAULT_TRUNCATE_AT = 1000

NO_TEXT_NOTICE = "No significant text found."


def say(console: Console, text: str, style: str | None = None) -> None:
    """Print one line verbatim."""
    console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def progress(console: Console, text: str) -> None:
    say(console, f"[+] {text}", style="cyan")


def notice(console: Console, text: str) -> None:
    say(console, f"[*] {text}", style="yellow")


def error(console: Console, text: str) -> None:
    say(console, f"[!] {text}", style="red")


def format_block(
    block: TextBlock,
    expanded: bool,
    limit: int = DEFAULT_TRUNCATE_AT,
) -> str:
    """
    Render a text block for display.

    Blocks longer than limit are cut to limit characters followed by
    TRUNCATION_MARKER, unless expanded.
    """
    if expanded or block.length <= limit:
        return block.content
    return block.content[:limit] + TRUNCATION_MARKER


def available_commands(
    window: PageWindow,
    expanded: bool,
    has_blocks: bool,
) -> list[tuple[str, str]]:
    """
    Commands offered on a page menu, as (key, label) pairs.

    n, b and e only appear when they would do something; q is always there.
    """
    commands = []
    if window.has_next:
        commands.append(("n", "Next page"))
    if window.has_previous:
        commands.append(("b", "Previous page"))
    if has_blocks and not expanded:
        commands.append(("e", "Expand text"))
    commands.append(("q", "Quit"))
    return commands


def render_feed_menu(console: Console, items: Sequence[FeedItem]) -> None:
    say(console, "--- FEED DETECTED ---", style="bold")
    for index, item in enumerate(items, 1):
        say(console, f"[{index}] {item.title}")
        say(console, f"    {item.link}", style="dim")


def render_blocks(
    console: Console,
    blocks: Sequence[TextBlock],
    expanded: bool,
    limit: int = DEFAULT_TRUNCATE_AT,
) -> None:
    say(console, "--- Content ---", style="bold")
    if not blocks:
        notice(console, NO_TEXT_NOTICE)
        return
    for block in blocks:
        say(console, format_block(block, expanded, limit))
        console.print()


def render_links(
    console: Console,
    links: Sequence[LinkEntry],
    window: PageWindow,
    base_url: str,
) -> None:
    """Print the links visible in window, resolved against base_url."""
    sized = any(link.size is not None for link in links)
    suffix = ", sorted by content length" if sized else ""
    say(
        console,
        f"--- LINKS (page {window.page + 1}/{window.page_count}{suffix}) ---",
        style="bold",
    )

    for number, link in enumerate(links[window.start:window.end], 1):
        line = f"[{number}] {resolve(base_url, link.raw_href)}"
        if link.size is not None:
            line += f" (size: {link.size})"
        say(console, line)


def render_commands(console: Console, commands: Sequence[tuple[str, str]]) -> None:
    for key, label in commands:
        say(console, f"[{key}] {label}", style="green")


def render_page_menu(
    console: Console,
    blocks: Sequence[TextBlock],
    links: Sequence[LinkEntry],
    window: PageWindow,
    base_url: str,
    expanded: bool,
    limit: int = DEFAULT_TRUNCATE_AT,
) -> list[tuple[str, str]]:
    """
    Render a full page menu: text, link window, then commands.

    Returns:
        The commands that were offered
    """
    say(console, "--- HTML PAGE ---", style="bold")
    render_blocks(console, blocks, expanded, limit)
    render_links(console, links, window, base_url)
    commands = available_commands(window, expanded, has_blocks=bool(blocks))
    render_commands(console, commands)
    return commands
