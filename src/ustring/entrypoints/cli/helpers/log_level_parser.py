"""Parsing of ``NAME=LEVEL`` logger-level options.

Values may be given as repeated options or as one comma/space separated
string (the form an environment variable takes).
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten *value* into non-empty items split on commas and whitespace."""
    chunks = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for chunk in chunks:
        items.extend(s for s in re.split(r"[,\s]+", chunk) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones. Level
    names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
