"""PATTERNS CLI entry point.

Defines the top-level ``patterns`` command (via Click-Extra), sets up logging
before any subcommand runs, and registers the subcommands.

Available commands
- ``patterns list``: list the pattern examples.
- ``patterns demo <pattern>``: replay a pattern's canonical scenario.

Examples
    $ patterns --version
    $ patterns demo state --user alice
    $ patterns -v demo all
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from patterns import __version__
from patterns.logging import configure_logging, log_startup, verbosity_level

from .demo import PATTERN_CATALOG
from .demo import demo as demo_group
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """PATTERNS command-line interface.

    Replays small, self-contained illustrations of classic object-oriented
    design patterns. Demo output goes to stdout; logs go to stderr.
    """

DEFAULT_LOG_PATH = (
    Path(user_log_dir("patterns", appauthor=False, ensure_exists=True)) / "latest.log"
)


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
    help="Log one level more than WARNING per repetition (-v INFO, -vv DEBUG).",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Log one level less than WARNING per repetition (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything to the console, with source locations.",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=DEFAULT_LOG_PATH,
    envvar="PATTERNS_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="PATTERNS_FLIGHT_RECORDER_CAPACITY",
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    help=(
        "Keep recent records at DEBUG detail in memory and write them to "
        "--log-path on the first WARNING or worse. Expected demo outcomes, "
        "such as a denied proxy read, never trigger a write."
    ),
    default=True,
    envvar="PATTERNS_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    help="Also write the flight recorder buffer to --log-path on exit.",
    default=False,
    envvar="PATTERNS_FORCE_FLUSH",
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
        "Minimum level for a named logger, as NAME=LEVEL; affects the console "
        "and the flight recorder. Repeatable, e.g. -L patterns.service_layer=INFO."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    envvar="PATTERNS_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def patterns(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """PATTERNS command-line interface."""
    level = verbosity_level(verbose_count, quiet_count)

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    # flushes the flight recorder once the subcommand has returned
    ctx.call_on_close(logging.shutdown)


@patterns.command(name="list")
def list_patterns() -> None:
    """List the available pattern examples."""
    width = max(len(name) for name in PATTERN_CATALOG)
    for name, (category, summary) in PATTERN_CATALOG.items():
        click.echo(f"{name:<{width}}  {category:<11}  {summary}")


patterns.add_command(demo_group)
