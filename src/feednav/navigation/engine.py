"""
Interactive navigation engine.

Drives the fetch -> classify -> present -> select loop as an explicit state
machine:

    FETCH ──feed──> FEED_MENU ──pick──> FETCH
      │                 └──q / invalid──> TERMINATED
      └──page──> PAGE_MENU ──pick──> FETCH
      │             ├──n / b / e / invalid──> PAGE_MENU
      │             └──q / no links──> TERMINATED
      └──fetch error──> TERMINATED

Each menu state blocks on exactly one prompt per visit.
"""

from enum import Enum
from typing import Callable, Sequence

from rich.console import Console

from feednav.config.settings import Settings
from feednav.core.exceptions import FetchError, SelectionError
from feednav.extraction.classifier import Resource, ResourceKind, classify
from feednav.extraction.links import LinkEntry
from feednav.navigation import renderer
from feednav.navigation.pagination import page_window
from feednav.navigation.session import Session
from feednav.navigation.urls import normalize, resolve
from feednav.utils.logging import get_logger

logger = get_logger(__name__)

START_PROMPT = "Enter feed or HTML URL: "
FEED_PROMPT = "Pick article number to open, or 'q' to quit: "
PAGE_PROMPT = "Pick a link number or command: "

QUIT = "q"


class State(str, Enum):
    """Navigation engine states."""

    FETCH = "fetch"
    FEED_MENU = "feed_menu"
    PAGE_MENU = "page_menu"
    TERMINATED = "terminated"


class Outcome(str, Enum):
    """Why a session ended."""

    QUIT = "quit"
    FETCH_FAILED = "fetch_failed"
    INVALID_SELECTION = "invalid_selection"
    NO_LINKS = "no_links"


LinkRanker = Callable[[Sequence[LinkEntry], str], list[LinkEntry]]


def parse_selection(token: str, count: int) -> int:
    """
    Parse a 1-based menu selection.

    Args:
        token: Operator input, already trimmed
        count: Number of selectable entries

    Returns:
        The selection, guaranteed to be in 1..count

    Raises:
        SelectionError: If token is not an integer or is out of range
    """
    try:
        selection = int(token)
    except ValueError as e:
        raise SelectionError("Not a number", token=token) from e

    if not 1 <= selection <= count:
        raise SelectionError(f"Selection must be between 1 and {count}", token=token)

    return selection


class NavigationEngine:
    """
    Runs one interactive navigation session.

    Collaborators are injected so the engine can be driven without a
    network or a terminal.

    Example:
        >>> with Fetcher.from_settings(settings) as fetcher:
        ...     engine = NavigationEngine(fetcher.fetch, settings)
        ...     outcome = engine.run("example.com/feed")
    """

    def __init__(
        self,
        fetch: Callable[[str], bytes],
        settings: Settings | None = None,
        console: Console | None = None,
        prompt: Callable[[str], str] | None = None,
        link_ranker: LinkRanker | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            fetch: Returns the body of a URL or raises FetchError
            settings: Application settings (defaults if None)
            console: Console used for all menu output
            prompt: Reads one line of operator input (defaults to console.input)
            link_ranker: Optional reordering of a page's links, e.g. by size
        """
        self.settings = settings or Settings()
        self.console = console or Console()
        self._fetch_body = fetch
        self._prompt = prompt or self.console.input
        self._link_ranker = link_ranker

        self.session: Session | None = None
        self.state = State.FETCH
        self.outcome: Outcome | None = None

        # Per-fetch view, recomputed on every FETCH
        self._resource: Resource | None = None
        self._links: list[LinkEntry] = []

    def run(self, start_url: str) -> Outcome:
        """
        Navigate from start_url until the session ends.

        Args:
            start_url: Operator-supplied URL, scheme optional

        Returns:
            Why the session ended
        """
        self.session = Session(current_url=normalize(start_url))
        self.state = State.FETCH
        self.outcome = None

        handlers = {
            State.FETCH: self._on_fetch,
            State.FEED_MENU: self._on_feed_menu,
            State.PAGE_MENU: self._on_page_menu,
        }

        while self.state is not State.TERMINATED:
            self.state = handlers[self.state]()

        logger.info(f"Session ended: {self.outcome.value}")
        if self.settings.navigation.bell:
            self.console.bell()
        return self.outcome

    def _terminate(self, outcome: Outcome) -> State:
        self.outcome = outcome
        return State.TERMINATED

    def _read(self, prompt: str) -> str:
        """Read one trimmed line; end of input counts as quit."""
        try:
            return self._prompt(prompt).strip()
        except EOFError:
            return QUIT

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _on_fetch(self) -> State:
        url = self.session.current_url
        console = self.console
        console.print()
        renderer.progress(console, f"Fetching: {url}")

        try:
            body = self._fetch_body(url)
        except FetchError as e:
            logger.warning(f"Fetch failed for {url}: {e}")
            renderer.error(console, f"Error fetching {url}: {e}")
            return self._terminate(Outcome.FETCH_FAILED)

        extraction = self.settings.extraction
        self._resource = classify(
            url,
            body,
            top_k=extraction.top_blocks,
            min_length=extraction.min_block_length,
        )

        if self._resource.kind is ResourceKind.FEED:
            return State.FEED_MENU

        links = list(self._resource.links)
        if links and self._link_ranker is not None:
            links = self._link_ranker(links, url)
        self._links = links
        return State.PAGE_MENU

    def _on_feed_menu(self) -> State:
        items = self._resource.items
        renderer.render_feed_menu(self.console, items)

        token = self._read(FEED_PROMPT)
        if token == QUIT:
            return self._terminate(Outcome.QUIT)

        try:
            selection = parse_selection(token, len(items))
        except SelectionError as e:
            logger.debug(f"Rejected feed selection: {e}")
            if self.settings.navigation.feed_invalid_input == "reprompt":
                renderer.error(self.console, "Invalid selection, try again.")
                return State.FEED_MENU
            renderer.error(self.console, "Invalid selection, exiting.")
            return self._terminate(Outcome.INVALID_SELECTION)

        item = items[selection - 1]
        logger.info(f"Opening feed item {selection}: {item.link!r}")
        self.session.navigate(item.link)
        return State.FETCH

    def _on_page_menu(self) -> State:
        session = self.session
        blocks = self._resource.blocks
        truncate_at = self.settings.extraction.truncate_at

        if not self._links:
            renderer.say(self.console, "--- HTML PAGE ---", style="bold")
            renderer.render_blocks(self.console, blocks, session.expanded, truncate_at)
            renderer.notice(self.console, "No links found. Exiting.")
            return self._terminate(Outcome.NO_LINKS)

        window = page_window(
            session.page,
            len(self._links),
            self.settings.navigation.page_size,
        )
        commands = renderer.render_page_menu(
            self.console,
            blocks,
            self._links,
            window,
            session.current_url,
            session.expanded,
            truncate_at,
        )
        offered = {key for key, _ in commands}

        token = self._read(PAGE_PROMPT)

        if token in offered:
            if token == QUIT:
                return self._terminate(Outcome.QUIT)
            if token == "e":
                session.expanded = True
            elif token == "n":
                session.page += 1
            elif token == "b":
                session.page -= 1
            return State.PAGE_MENU

        try:
            selection = parse_selection(token, window.size)
        except SelectionError as e:
            logger.debug(f"Rejected page input: {e}")
            renderer.error(self.console, "Invalid input, try again.")
            return State.PAGE_MENU

        link = self._links[window.index_of(selection)]
        target = resolve(session.current_url, link.raw_href)
        logger.info(f"Following link {selection} on page {session.page}: {target}")
        session.navigate(target)
        return State.FETCH
