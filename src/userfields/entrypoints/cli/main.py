"""USERFIELDS CLI entry point.

Defines the top-level ``userfields`` command (via Click-Extra) and the
subcommands exposed by the project.

Currently available commands
- ``userfields check-username``: report whether usernames are canonical.
- ``userfields clean-username``: repair usernames into canonical form.
- ``userfields validate``: validate a JSON user record.

Notes
- The CLI version is sourced from `userfields.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Validation tables come from the environment (see `userfields.config`).

Examples
    $ userfields check-username spin-punch Spin-punch
    $ userfields clean-username "Spin Punch"
    $ userfields validate user.json
"""

import logging
from typing import TYPE_CHECKING, TextIO

import click
import click_extra as clickx

from userfields import __version__
from userfields.bootstrap import bootstrap
from userfields.config import get_password_schemes, get_validation_rules
from userfields.domain.errors import DomainError
from userfields.domain.user import user_from_json
from userfields.domain.username import clean_username, is_valid_username
from userfields.logging import config_console_handler, log_startup

from .helpers import error, success
from .helpers.log_level_parser import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """USERFIELDS command-line interface.

    Check and repair the identity fields of collaboration-app users: canonical
    usernames, bounded display names and emails, recognized roles.
    """


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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). "
        "Repeatable (e.g. -L passlib=INFO) or via USERFIELDS_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    default=("passlib=WARNING",),
    envvar="USERFIELDS_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def userfields(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """USERFIELDS command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger with configured handlers
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 3) set 3rd-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        logger_levels=logger_levels,
        rules=get_validation_rules(),
        password_schemes=get_password_schemes(),
    )

    ctx.call_on_close(logging.shutdown)


@click.command(name="check-username")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def check_username(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Report whether each NAME is a valid username.

    Exits with status 1 when any NAME is invalid.
    """
    rules = bootstrap().rules
    all_valid = True
    for name in names:
        valid = is_valid_username(name, rules)
        all_valid = all_valid and valid
        click.echo(f"{name}: {'valid' if valid else 'invalid'}")
    if not all_valid:
        ctx.exit(1)


@click.command(name="clean-username")
@click.argument("names", nargs=-1, required=True)
def clean_username_cmd(names: tuple[str, ...]) -> None:
    """Print the cleaned form of each NAME, one per line."""
    rules = bootstrap().rules
    for name in names:
        click.echo(clean_username(name, rules))


@click.command(name="validate")
@click.argument("source", type=click.File("r"))
@click.pass_context
def validate(ctx: click.Context, source: TextIO) -> None:
    """Validate the JSON user record read from SOURCE ('-' for stdin).

    Exits with status 1 when the record cannot be decoded or is invalid.
    """
    rules = bootstrap().rules
    try:
        user = user_from_json(source)
        user.validate(rules)
    except DomainError as e:
        error(str(e))
        ctx.exit(1)
    logger.debug("User %s passed validation", user.id)
    success(f"User {user.username} is valid.")


userfields.add_command(check_username)
userfields.add_command(clean_username_cmd)
userfields.add_command(validate)
