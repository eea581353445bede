"""Logger configuration for Algokit.

The package logs through the stdlib ``logging`` tree rooted at ``algokit``.
Output goes to stderr through a rich handler. The level is taken from the
``level`` argument, then the ``ALGOKIT_LOG_LEVEL`` environment variable,
then defaults to WARNING. An unknown name in the environment falls back to
WARNING; an unknown ``level`` argument raises. Records do not propagate to
the root logger, so a host application's handlers never print them twice.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from algokit.core.exceptions import InvalidArgumentError

__all__ = ["LOG_LEVEL_ENV", "get_logger", "logger", "setup_logger"]

LOG_LEVEL_ENV = "ALGOKIT_LOG_LEVEL"
ROOT_LOGGER_NAME = "algokit"

_DEFAULT_LEVEL = "WARNING"


def _level_number(name: str) -> int | None:
    resolved = logging.getLevelName(name.upper())
    return resolved if isinstance(resolved, int) else None


def _resolve_level(level: str | None) -> int:
    if level is not None:
        resolved = _level_number(level)
        if resolved is None:
            raise InvalidArgumentError(f"Unknown log level: {level.upper()}")
        return resolved

    # Unknown names in the environment fall back to WARNING.
    from_env = _level_number(os.getenv(LOG_LEVEL_ENV) or _DEFAULT_LEVEL)
    return from_env if from_env is not None else logging.WARNING


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Args:
        name: Logger name, normally the package name.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Rich console to write to. Defaults to stderr.

    Returns:
        The configured logger. Calling again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if not logger.handlers:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``algokit`` tree."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


logger = setup_logger()
