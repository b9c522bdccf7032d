"""USTRING CLI entry point.

Defines the top-level ``ustring`` command (via Click-Extra). It configures
logging, wires an encoding bridge from the environment and exposes a few
inspection commands over it.

Available commands
- ``ustring units``: show the UTF-16 code units a UTF-8 text decodes to.
- ``ustring narrow``: decode then narrow a text back to single bytes.
- ``ustring find``: search a text for a pattern, in code-unit indices.

Examples
    $ ustring units "héllo"
    $ echo -n "日本" | ustring narrow -
    $ ustring find "banana" "ana" --start 2
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from ustring import __version__, config
from ustring.bootstrap import UnknownTranscoderError, build_bridge
from ustring.domain.ustring import NPOS
from ustring.logging import config_console_handler, config_flight_recorder, log_startup
from ustring.service_layer.bridge import MAX_NARROW_UNIT, EncodingBridge

from .helpers import error, parse_log_level, warn

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """USTRING command-line interface.

    USTRING converts UTF-8 text into fixed-width UTF-16 code units for
    glyph-addressable rendering, and narrows code units back into bytes.
    Use these commands to inspect exactly what a renderer will receive.
    """

STDIN_MARKER = "-"


def _argument_bytes(value: str) -> bytes:
    """Recover the raw bytes of a command-line argument.

    Arguments that were not valid UTF-8 arrive with their bad bytes
    surrogate-escaped; those bytes are restored instead of raising.
    """
    return value.encode("utf-8", "surrogateescape")


def _read_text(text: str) -> bytes:
    """Return TEXT as UTF-8 bytes, reading raw stdin when TEXT is ``-``."""
    if text == STDIN_MARKER:
        return click.get_binary_stream("stdin").read()
    return _argument_bytes(text)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=Path(user_log_dir("ustring", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="USTRING_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING/ERROR occurs (e.g. a transcoder failure)."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L ustring.adapters=DEBUG) or via USTRING_LOGGER_LEVEL."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def ustring(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """USTRING command-line interface."""

    # 0) effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) handlers
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path, flush_on_close=force_flush_flight_recorder
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)
    ctx.call_on_close(logging.shutdown)

    # 2) settings and bridge
    try:
        settings = config.get_settings()
        ctx.obj = build_bridge(settings)
    except (config.InvalidSettingError, UnknownTranscoderError) as e:
        raise click.ClickException(str(e)) from e

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        settings=settings,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )


@ustring.command()
@click.argument("text")
@click.pass_obj
def units(bridge: EncodingBridge, text: str) -> None:
    """Print the code units TEXT decodes to (``-`` reads stdin)."""
    ustr = bridge.decode(_read_text(text))
    for unit in ustr:
        click.echo(f"U+{unit:04X}")
    click.echo(f"length: {len(ustr)}")


@ustring.command()
@click.argument("text")
@click.pass_obj
def narrow(bridge: EncodingBridge, text: str) -> None:
    """Decode TEXT, then write it back narrowed to one byte per code unit."""
    ustr = bridge.decode(_read_text(text))
    replaced = sum(1 for unit in ustr if unit > MAX_NARROW_UNIT)
    if replaced:
        warn(f"{replaced} code unit(s) above 0xFF were replaced with '?'.")
    stdout = click.get_binary_stream("stdout")
    stdout.write(bridge.encode(ustr))
    stdout.flush()


@ustring.command()
@click.argument("text")
@click.argument("pattern")
@click.option(
    "--start",
    "-s",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Code-unit index to start searching from.",
)
@click.pass_context
def find(ctx: click.Context, text: str, pattern: str, start: int) -> None:
    """Print the code-unit index of PATTERN in TEXT; exit 1 when absent."""
    bridge: EncodingBridge = ctx.obj
    haystack = bridge.decode(_read_text(text))
    needle = bridge.decode(_argument_bytes(pattern))
    index = haystack.find(needle, start)
    if index == NPOS:
        error(f"{pattern!r} not found")
        ctx.exit(1)
    click.echo(index)
