"""
Settings loading for feednav.

Settings are assembled from layers, later layers winning key by key:

1. Model defaults (settings.py)
2. A YAML file, if one is given or found
3. FEEDNAV__{SECTION}__{KEY} environment variables

Example:
    FEEDNAV__NAVIGATION__PAGE_SIZE=20 feednav example.com
"""

import os
from functools import lru_cache, reduce
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from feednav.config.settings import Settings
from feednav.core.exceptions import ConfigurationError


ENV_PREFIX = "FEEDNAV"

# Points at a config file explicitly; checked before the search paths
CONFIG_PATH_ENV = "FEEDNAV_CONFIG"

_NULL_WORDS = frozenset({"", "none", "null"})


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with override merged into base, recursing into sub-dicts."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _parse_env_value(value: str) -> str | None:
    """
    Map an environment string to a settings value.

    Only the null words become None. Everything else stays a string and is
    coerced by the field it lands in, so "1" is an int for page_size but
    still "1" for user_agent.
    """
    if value.strip().lower() in _NULL_WORDS:
        return None
    return value


def _env_layer(prefix: str, environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Build a settings layer from prefixed environment variables.

    FEEDNAV__FETCH__TIMEOUT_SECONDS=5 becomes {"fetch": {"timeout_seconds": "5"}}.
    Variables naming no section are ignored.
    """
    environ = os.environ if environ is None else environ
    marker = f"{prefix}__"
    layer: dict[str, Any] = {}

    for name, raw in environ.items():
        if not name.startswith(marker):
            continue

        *sections, key = name[len(marker):].lower().split("__")
        if not sections:
            continue

        target = layer
        for section in sections:
            target = target.setdefault(section, {})
        target[key] = _parse_env_value(raw)

    return layer


def _file_layer(path: Path) -> dict[str, Any]:
    """
    Read a YAML settings file.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML or
            does not hold a mapping
    """
    if not path.is_file():
        raise ConfigurationError(
            "Configuration file not found", details={"path": str(path)})

    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}",
            details={"path": str(path)},
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got: {type(content).__name__}",
            details={"path": str(path)},
        )
    return content


def load_config(
    config_path: Path | str | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Settings:
    """
    Build validated Settings from defaults, an optional file and the environment.

    Args:
        config_path: YAML file to read, or None for defaults plus environment
        env_prefix: Prefix of override variables

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If the file cannot be used or a value is invalid
    """
    layers = []
    if config_path is not None:
        layers.append(_file_layer(Path(config_path)))
    layers.append(_env_layer(env_prefix))

    data = reduce(_deep_merge, layers, {})

    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} error(s)",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


@lru_cache(maxsize=1)
def get_default_config_path() -> Path | None:
    """
    Locate the config file used when none is passed on the command line.

    Checked in order: $FEEDNAV_CONFIG, ./feednav.yaml, ~/.feednav/config.yaml.

    Returns:
        The first existing path, or None
    """
    explicit = os.environ.get(CONFIG_PATH_ENV)
    if explicit:
        return Path(explicit).expanduser()

    for candidate in (
        Path.cwd() / "feednav.yaml",
        Path.home() / ".feednav" / "config.yaml",
    ):
        if candidate.is_file():
            return candidate

    return None
