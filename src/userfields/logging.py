"""Console logging for the USERFIELDS CLI.

The CLI installs a single Rich handler on the root logger. Records from other
libraries (passlib, mostly) are tagged with their package name so they stand
out from the project's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from typing import TYPE_CHECKING

import passlib
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from userfields.domain.rules import ValidationRules

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "userfields"


class ThirdPartyPrefixFilter(logging.Filter):
    """Set `record.prefix` to ``"[package] "`` for records from other libraries.

    Project records get an empty prefix. Nothing is filtered out.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}] "
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler the CLI attaches to the root logger.

    Args:
        level: Minimum level for console output. Forced to DEBUG in debug mode.
        debug_mode: Show times, logger names and source locations.
        color: Follow click-extra's ``--color/--no-color``; False disables styling.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s%(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    logger_levels: dict[str, int],
    rules: ValidationRules,
    password_schemes: tuple[str, ...],
) -> None:
    """Log the version at INFO and the runtime and validation setup at DEBUG.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level.
        logger_levels: Per-logger level overrides from ``-L``.
        rules: The validation rules the commands will use.
        password_schemes: passlib schemes, preferred first.
    """
    logger.info("USERFIELDS %s, console=%s", app_version, logging.getLevelName(level))

    logger.debug(
        "Python %s on %s %s (pid %s), passlib %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        passlib.__version__,
    )
    logger.debug(
        "Logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
    logger.debug(
        "Reserved usernames: %s", ", ".join(sorted(rules.reserved_usernames))
    )
    logger.debug("Password schemes: %s", ", ".join(password_schemes))
