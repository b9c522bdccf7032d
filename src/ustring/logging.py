"""Logging helpers used by the USTRING CLI.

Console output goes through a Rich handler on stderr, so stdout stays free
for converted text. An optional in-memory "flight recorder" keeps recent
records at DEBUG granularity and dumps them to a file when something goes
wrong (for instance a transcoder failure reported by the encoding bridge).
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from ustring.config import Settings

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "ustring"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from foreign loggers with a short ``[name]`` prefix.

    Records from ``ustring.*`` loggers get an empty prefix. The filter never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source locations.
        color: Allow ANSI colors; mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler to attach to the root logger.
    """
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
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build a memory-buffered handler that flushes to *path*.

    Up to *capacity* records are kept; a record at *flush_level* or above
    (or closing the handler, with *flush_on_close*) writes them all out.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    settings: Settings,
    log_path: Path | None,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and environment details at DEBUG.

    The DEBUG lines cover the interpreter, platform, the byte order the
    encoding bridge will use and the selected transcoder, which is what one
    needs to explain an unexpected decoding result.
    """
    logger.info(
        "USTRING %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug(
        "Host byte order: %s (interpreter reports %s)",
        settings.byte_order.value,
        sys.byteorder,
    )
    logger.debug(
        "Transcoder: %s, byte-swap workaround: %s",
        settings.transcoder,
        {True: "ON", False: "OFF", None: "TRANSCODER DEFAULT"}[
            settings.byte_swap_workaround
        ],
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug("Flight recorder: path=%s", log_path if log_path else "<none>")
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
