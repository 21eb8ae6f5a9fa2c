"""Logging helpers for applications built on courier.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk when something goes wrong. It also provides a filter that annotates
third-party log records with a short prefix used by console formatting.

Courier itself only logs through ``logging.getLogger(__name__)``; calling
`configure_logging` is up to the host application.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger
    from pathlib import Path

    from .config import Settings

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "courier"
DEFAULT_FLIGHT_CAPACITY = 2000
MANAGED_ATTR = "_courier_managed"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[asyncio]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode the handler is set to DEBUG
    and includes timestamps and source file/line information; otherwise a
    short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """

    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to a file handler when a record at `flush_level` or higher is
    emitted (or on close if `flush_on_close` is True).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
            "%(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    settings: Settings, *, color: bool = True, root: Logger | None = None
) -> list[logging.Handler]:
    """Attach console (and optionally flight-recorder) handlers to ``root``.

    Handlers attached by an earlier call are removed and closed first, so
    reconfiguring does not duplicate output. The logger level is lowered to
    DEBUG when a flight recorder is configured so it can capture records the
    console filters out. Per-logger overrides from ``settings.logger_levels``
    are applied to children of ``root``.

    Args:
        settings: Resolved logging settings.
        color: Enable color output on the console.
        root: Logger to configure. Defaults to the root logger.

    Returns:
        The handlers that were attached.
    """
    root = root if root is not None else logging.getLogger()

    for previous in list(root.handlers):
        if getattr(previous, MANAGED_ATTR, False):
            root.removeHandler(previous)
            previous.close()

    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.log_level, debug_mode=settings.debug, color=color
        )
    ]
    if settings.log_path is not None:
        handlers.append(config_flight_recorder(settings.log_path))

    for handler in handlers:
        setattr(handler, MANAGED_ATTR, True)
        root.addHandler(handler)

    if settings.log_path is not None or settings.debug:
        root.setLevel(logging.DEBUG)
    else:
        root.setLevel(settings.log_level)

    # the root logger's children are the top-level loggers themselves
    for name, level in settings.logger_levels.items():
        root.getChild(name).setLevel(level)

    return handlers


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    settings: Settings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line summary and detailed diagnostics at start-up.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        settings: The settings logging was configured with.
        handlers: Active logging handlers attached to the root logger.
    """

    logger.info(
        "courier %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.log_level),
        "ON" if settings.log_path is not None else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.log_path is not None:
        logger.debug("Flight recorder: path=%s", settings.log_path)
    logger.debug(
        "Per-logger overrides: %s",
        {
            name: logging.getLevelName(lvl)
            for name, lvl in settings.logger_levels.items()
        }
        or "<none>",
    )
