"""Parse ``-L NAME=LEVEL`` options into per-logger minimum levels."""

import logging

import click

from userfields.config import split_list

# passlib logs backend probing at DEBUG on first use
DEFAULT_LIB_LEVELS = {"passlib": logging.WARNING}


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,
    value: str | tuple[str, ...],
) -> dict[str, int]:
    """Click callback mapping logger names to numeric levels.

    `value` is the tuple of repeated ``-L`` options, or the raw
    ``USERFIELDS_LOGGER_LEVELS`` string; either may hold several comma or
    space separated items. Items override `DEFAULT_LIB_LEVELS` and later items
    win. Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item has no name or an unknown level.
    """
    chunks = [value] if isinstance(value, str) else value
    known = logging.getLevelNamesMapping()
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in (part for chunk in chunks for part in split_list(chunk)):
        name, sep, level_name = item.partition("=")
        if not (sep and name):
            raise click.BadParameter(f"expected NAME=LEVEL, got {item!r}", param=param)
        if (level := known.get(level_name.upper())) is None:
            raise click.BadParameter(
                f"unknown level {level_name!r} for logger {name!r}", param=param
            )
        levels[name] = level
    return levels
