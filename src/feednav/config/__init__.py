"""
Configuration module for feednav.

Provides Pydantic-based settings management with YAML file support
and environment variable overrides.
"""

from feednav.config.settings import (
    Settings,
    FetchSettings,
    ExtractionSettings,
    NavigationSettings,
    LoggingSettings,
)
from feednav.config.loader import (
    load_config,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "FetchSettings",
    "ExtractionSettings",
    "NavigationSettings",
    "LoggingSettings",
    "load_config",
    "get_default_config_path",
]
