"""Configuration utilities for courier.

Settings are read from the environment:

- ``COURIER_LOG_LEVEL``: console log level name (default ``WARNING``).
- ``COURIER_DEBUG``: enable debug formatting (``1``, ``true``, ``yes``, ``on``).
- ``COURIER_LOGGER_LEVELS``: per-logger overrides as ``NAME=LEVEL`` items,
  separated by commas and/or whitespace.
- ``COURIER_LOG_PATH``: file the flight recorder writes to. Unset disables it.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import InvalidLogLevelError

LOG_LEVEL_ENV = "COURIER_LOG_LEVEL"  # pragma: no mutate
DEBUG_ENV = "COURIER_DEBUG"  # pragma: no mutate
LOGGER_LEVELS_ENV = "COURIER_LOGGER_LEVELS"  # pragma: no mutate
LOG_PATH_ENV = "COURIER_LOG_PATH"  # pragma: no mutate

DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOGGER_LEVELS = {"asyncio": logging.WARNING}
TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class Settings:
    """Logging settings resolved from the environment."""

    log_level: int = DEFAULT_LOG_LEVEL
    debug: bool = False
    logger_levels: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_LOGGER_LEVELS)
    )
    log_path: Path | None = None


def parse_level(name: str) -> int:
    """Convert a level name such as ``info`` or ``WARNING`` to its number.

    Raises:
        InvalidLogLevelError: If ``name`` is not a standard level name.
    """
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise InvalidLogLevelError(f"Invalid log level: {name}")
    return level


def _normalize_items(value: str | Iterable[str]) -> list[str]:
    """Split the input on commas and whitespace, dropping empty fragments."""
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend([s for s in re.split(r"[,\s]+", v) if s])
    return items


def parse_logger_levels(value: str | Iterable[str]) -> dict[str, int]:
    """Parse ``NAME=LEVEL`` items into a name -> level mapping.

    The result starts from DEFAULT_LOGGER_LEVELS; later items override earlier
    ones for the same logger.

    Raises:
        InvalidLogLevelError: If an item is malformed or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise InvalidLogLevelError(f"Expected NAME=LEVEL, got {item!r}") from e
        if not name.strip():
            raise InvalidLogLevelError(f"Missing logger name in {item!r}")
        levels[name.strip()] = parse_level(level_str)
    return levels


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from ``environ`` (defaults to ``os.environ``).

    Raises:
        InvalidLogLevelError: If a level variable holds an invalid value.
    """
    env = os.environ if environ is None else environ

    log_level = DEFAULT_LOG_LEVEL
    if level_name := env.get(LOG_LEVEL_ENV):
        log_level = parse_level(level_name)

    log_path = Path(path) if (path := env.get(LOG_PATH_ENV)) else None

    return Settings(
        log_level=log_level,
        debug=env.get(DEBUG_ENV, "").strip().lower() in TRUTHY,
        logger_levels=parse_logger_levels(env.get(LOGGER_LEVELS_ENV, "")),
        log_path=log_path,
    )
