"""
Logging setup for feednav.

Everything logs through children of the ``feednav`` logger. Records go to
stderr, never stdout, since stdout carries the interactive menu; a rotating
log file can be added through LoggingSettings.file_path.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler

from feednav.config.settings import LoggingSettings


ROOT_LOGGER_NAME = "feednav"

_logging_configured = False


def _build_handlers(settings: LoggingSettings, level: int) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=settings.format, datefmt=settings.date_format)
    handlers: list[logging.Handler] = []

    if settings.log_to_console:
        handlers.append(logging.StreamHandler(sys.stderr))

    if settings.file_path is not None:
        settings.file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            filename=str(settings.file_path),
            maxBytes=settings.max_file_size_mb * 1024 * 1024,
            backupCount=settings.backup_count,
            encoding="utf-8",
        ))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    settings: LoggingSettings | None = None,
    level: str | None = None,
) -> logging.Logger:
    """
    Configure the feednav logger once per process.

    Later calls are no-ops until reset_logging() is called.

    Args:
        settings: Logging configuration (LoggingSettings defaults if None)
        level: Level name that overrides settings.level, e.g. "DEBUG" for --verbose

    Returns:
        The ``feednav`` logger
    """
    global _logging_configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _logging_configured:
        return logger

    if settings is None:
        settings = LoggingSettings()

    numeric_level = getattr(logging, (level or settings.level).upper(), logging.WARNING)

    logger.handlers.clear()
    logger.setLevel(numeric_level)
    for handler in _build_handlers(settings, numeric_level):
        logger.addHandler(handler)

    # Keep records away from whatever the root logger prints
    logger.propagate = False

    _logging_configured = True
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a logger under the ``feednav`` hierarchy.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Fetched page")
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Close and detach all feednav handlers so setup_logging() can run again."""
    global _logging_configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    _logging_configured = False
