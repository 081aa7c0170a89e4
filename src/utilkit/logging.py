"""Logging setup for the utilkit CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, whose level follows -v/-q, and
- an optional "flight recorder": a ``MemoryHandler`` that keeps the most
  recent records at DEBUG granularity and writes them to a file once a
  WARNING (or worse) arrives, or on exit when asked to.

:func:`configure_logging` installs both from a :class:`LogSettings` and
:func:`log_startup` reports what was installed.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "utilkit"
DEFAULT_FLIGHT_CAPACITY = 2000
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


@dataclass(frozen=True)
class LogSettings:
    """Everything the CLI options decide about logging.

    Attributes:
        level: Console level. Ignored in debug mode, which always shows DEBUG.
        debug: Show timestamps, logger names and source paths on the console.
        color: Let Rich pick a color system; False prints plain text.
        log_path: File the flight recorder writes to.
        flight_capacity: Records kept in memory, or None to disable the
            flight recorder.
        force_flush: Write whatever the flight recorder holds on close.
        logger_levels: Minimum level per logger name, applied to both handlers.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    flight_capacity: int | None = None
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.flight_capacity is not None and self.log_path is not None


def verbosity_level(verbose: int, quiet: int) -> int:
    """Turn -v/-q repetition counts into a level, starting from WARNING.

    Example:
        >>> verbosity_level(2, 0) == logging.DEBUG
        True
    """
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Give records from outside utilkit a ``[package]`` prefix.

    Sets ``record.prefix`` to the bracketed top-level package name of the
    logger (``"[urllib3]"`` for ``urllib3.connectionpool``), or to ``""`` for
    utilkit's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler.

    Normal mode prints ``<prefix> <message>`` at `level`. Debug mode drops to
    DEBUG and adds the time, logger name and a link to the source line.
    """
    # same choices as click-extra's --color/--no-color
    color_system: ColorSystem | None = "auto" if color else None
    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a buffer of `capacity` records that spills into `path`.

    The file is truncated when the handler is created. The buffer is written
    out whenever a record at `flush_level` or above is handled, when it is
    full, and on close if `flush_on_close` is set.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LogSettings) -> list[Handler]:
    """Replace the root logger's handlers according to `settings`.

    The root logger itself is opened to DEBUG so each handler does its own
    filtering; this is what lets the flight recorder keep DEBUG records that
    the console hides.

    Returns:
        list[Handler]: The installed handlers, console first.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.log_path is not None and settings.flight_capacity is not None:
        handlers.append(
            config_flight_recorder(
                path=settings.log_path,
                capacity=settings.flight_capacity,
                flush_on_close=settings.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in settings.logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def log_startup(
    logger: Logger,
    settings: LogSettings,
    handlers: list[Handler],
    *,
    app_version: str,
) -> None:
    """Log a one-line INFO summary, then DEBUG details about the run.

    The details (interpreter, platform, pid, working directory, Click and
    Rich versions, handlers, flight recorder and per-logger levels) usually
    only reach the flight recorder file.
    """
    logger.info(
        "UTILKIT %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Click: %s", version("click"))
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.flight_capacity,
            settings.force_flush,
        )
    overrides = {
        name: logging.getLevelName(lvl)
        for name, lvl in settings.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
