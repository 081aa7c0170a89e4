"""utilkit CLI entry point.

Defines the top-level ``utilkit`` command (via Click-Extra) and registers
the subcommands.

Available commands
- ``utilkit demo``          : run every utility on sample inputs.
- ``utilkit validate-date`` : check a day/month/year triple.
- ``utilkit guess``         : simulate a guessing game.
- ``utilkit unique-words``  : de-duplicate the words of a text.
- ``utilkit factorial``     : compute n!.

Examples
    $ utilkit --version
    $ utilkit -v demo
    $ utilkit validate-date 29 2 2024
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from utilkit import __version__
from utilkit.logging import (
    DEFAULT_FLIGHT_CAPACITY,
    LogSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .demo import demo
from .helpers import parse_log_level
from .tools import factorial_cmd, guess_cmd, unique_words_cmd, validate_date_cmd

logger = logging.getLogger(__name__)


HELP = """UTILKIT command-line interface.

    Small general-purpose utilities: date validation, a guessing-game
    simulation, word de-duplication, factorial, debounce, memoization and
    record transforms.
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
    help="Enable debug mode (source paths and timestamps in console logs).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("utilkit", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="UTILKIT_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_FLIGHT_CAPACITY,
    hidden=True,
    envvar="UTILKIT_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on exit "
        "if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on program exit.",
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
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L utilkit.wrappers=INFO)."
    ),
    show_envvar=True,
)
@clickx.pass_context
def utilkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """UTILKIT command-line interface."""
    settings = LogSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=log_path,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)

    ctx.call_on_close(logging.shutdown)


utilkit.add_command(demo)
utilkit.add_command(validate_date_cmd)
utilkit.add_command(guess_cmd)
utilkit.add_command(unique_words_cmd)
utilkit.add_command(factorial_cmd)
