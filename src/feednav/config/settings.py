"""
Pydantic settings models for feednav.

All configuration is defined here with defaults that reproduce the
behavior of a plain interactive session.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class FetchSettings(BaseModel):
    """HTTP transport configuration."""

    timeout_seconds: float = Field(
        default=15.0,
        gt=0.0,
        le=300.0,
        description="Timeout applied to every outbound request in seconds",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; feednav/0.1)",
        description="User-Agent header sent with every request",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Whether to follow HTTP redirects",
    )


class ExtractionSettings(BaseModel):
    """Text-block extraction and display configuration."""

    top_blocks: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Number of ranked text blocks shown per page",
    )
    min_block_length: int = Field(
        default=61,
        ge=1,
        description="Minimum trimmed length of a text block to be considered",
    )
    truncate_at: int = Field(
        default=1000,
        ge=1,
        description="Characters shown per block before truncation (unless expanded)",
    )


class NavigationSettings(BaseModel):
    """Navigation engine configuration."""

    page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Number of links shown per menu page",
    )
    feed_invalid_input: Literal["terminate", "reprompt"] = Field(
        default="terminate",
        description="What an invalid selection in a feed menu does",
    )
    probe_links: bool = Field(
        default=False,
        description="Probe every link's content length and rank links by size",
    )
    probe_workers: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Worker threads used when probing link sizes",
    )
    bell: bool = Field(
        default=True,
        description="Ring the terminal bell when the session ends",
    )


class LoggingSettings(BaseModel):
    """Diagnostic logging; menu output is never routed through it."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Lowest level that reaches any handler",
    )
    format: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="logging.Formatter format string",
    )
    date_format: str = Field(
        default="%H:%M:%S",
        description="logging.Formatter datefmt string",
    )
    log_to_console: bool = Field(
        default=True,
        description="Emit records on stderr",
    )
    file_path: Path | None = Field(
        default=None,
        description="Also write records to this rotating file (\"~\" is expanded)",
    )
    max_file_size_mb: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Rotate the log file once it reaches this size",
    )
    backup_count: int = Field(
        default=2,
        ge=0,
        le=10,
        description="Rotated log files kept next to the active one",
    )

    @field_validator("file_path", mode="before")
    @classmethod
    def expand_file_path(cls, v: str | Path | None) -> Path | None:
        """Accept strings and expand a leading ~."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()


class Settings(BaseModel):
    """
    Root configuration model containing all subsystem settings.

    Settings are loaded from YAML with environment variable overrides.
    """

    fetch: FetchSettings = Field(
        default_factory=FetchSettings,
        description="HTTP transport settings",
    )
    extraction: ExtractionSettings = Field(
        default_factory=ExtractionSettings,
        description="Text-block extraction settings",
    )
    navigation: NavigationSettings = Field(
        default_factory=NavigationSettings,
        description="Navigation engine settings",
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    model_config = {
        "extra": "forbid",
        "validate_default": True,
    }
