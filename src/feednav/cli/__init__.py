"""
CLI module for feednav.

Provides the command-line interface using Typer.
"""

from feednav.cli.main import app

__all__ = ["app"]
