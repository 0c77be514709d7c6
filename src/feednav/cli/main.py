"""
Command-line entry point for feednav.

Runs a single interactive navigation session:

    feednav                       # prompts for the start URL
    feednav example.com/feed      # starts right away
"""

from functools import partial
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from feednav import __version__
from feednav.config import get_default_config_path, load_config
from feednav.core.exceptions import ConfigurationError
from feednav.fetch import Fetcher, probe_link_sizes
from feednav.navigation import NavigationEngine, Outcome
from feednav.navigation.engine import START_PROMPT
from feednav.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="feednav",
    help="Interactive feed and web page navigator",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)

EXIT_CODES = {
    Outcome.QUIT: 0,
    Outcome.NO_LINKS: 0,
    Outcome.FETCH_FAILED: 1,
    Outcome.INVALID_SELECTION: 2,
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]feednav[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def main(
    url: Optional[str] = typer.Argument(
        None,
        help="Feed or HTML URL to start from (prompted for when omitted)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging on stderr",
    ),
    probe_links: Optional[bool] = typer.Option(
        None,
        "--probe-links/--no-probe-links",
        help="Probe link sizes in parallel and list the largest first",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Browse a feed or web page interactively.

    Feeds show a numbered list of entries; pages show their main text and
    a paginated list of links. Pick a number to follow it.
    """
    try:
        settings = load_config(config_file or get_default_config_path())
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    if probe_links is not None:
        settings.navigation.probe_links = probe_links

    setup_logging(settings.logging, level="DEBUG" if verbose else None)

    if url is None:
        try:
            url = console.input(START_PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            console.print()
            raise typer.Exit(0)

    if not url:
        console.print("[red]Error:[/red] No URL given")
        raise typer.Exit(2)

    try:
        with Fetcher.from_settings(settings) as fetcher:
            link_ranker = None
            if settings.navigation.probe_links:
                link_ranker = partial(
                    probe_link_sizes,
                    size_of=fetcher.content_length,
                    max_workers=settings.navigation.probe_workers,
                )

            engine = NavigationEngine(
                fetcher.fetch,
                settings,
                console=console,
                link_ranker=link_ranker,
            )
            outcome = engine.run(url)
    except KeyboardInterrupt:
        console.print("\n[yellow]Session cancelled by user[/yellow]")
        raise typer.Exit(0)

    raise typer.Exit(EXIT_CODES[outcome])


if __name__ == "__main__":
    app()
