"""PATTERNS demo CLI: replay each pattern's canonical scenario.

Each subcommand builds one service-layer command and hands it to the message
bus assembled by `patterns.bootstrap`. Demo output goes to **stdout**; failures
are reported on **stderr** with a non-zero exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patterns.bootstrap import bootstrap
from patterns.config import InvalidSettingError
from patterns.errors import PatternError
from patterns.service_layer import commands

from .helpers import error, success

if TYPE_CHECKING:
    from patterns.bootstrap import AppContainer

PATTERN_CATALOG: dict[str, tuple[str, str]] = {
    "abstract-factory": ("creational", "Pick a plant factory by plant type."),
    "factory-method": ("creational", "Map a country to its currency."),
    "singleton": ("creational", "Share one printer driver per process."),
    "decorator": ("structural", "Wrap a coffee machine to override and extend it."),
    "facade": ("structural", "Hide a preferences store behind a user repository."),
    "protection-proxy": ("structural", "Gate file reads behind a password."),
    "listener": ("behavioral", "Notify listeners when a text view changes."),
    "state": ("behavioral", "Toggle between unauthorized and authorized."),
    "strategy": ("behavioral", "Pass string formatting in as a function."),
}

PLANT_CHOICES = ["orange", "apple"]
FORMATTER_CHOICES = ["lower", "upper", "prefix"]


CONTAINER_KEY = "patterns.container"


def _get_container() -> AppContainer:
    """Return the app container, bootstrapping it on first use in this run."""
    meta = click.get_current_context().meta
    if CONTAINER_KEY not in meta:
        try:
            meta[CONTAINER_KEY] = bootstrap()
        except InvalidSettingError as e:
            error(str(e))
            raise SystemExit(2) from e
    return meta[CONTAINER_KEY]


def _dispatch(cmd: commands.Command) -> None:
    try:
        _get_container().message_bus.handle(cmd)
    except PatternError as e:
        error(str(e))
        raise SystemExit(1) from e


@click.group()
def demo() -> None:
    """Replay the canonical scenario of a design pattern."""


@demo.command(name="abstract-factory")
@click.option(
    "--plant",
    type=click.Choice(PLANT_CHOICES, case_sensitive=False),
    default="orange",
    show_default=True,
    help="Kind of plant to create.",
)
def abstract_factory(plant: str) -> None:
    """Create a plant through the factory selected for its type."""
    _dispatch(commands.MakePlant(plant=plant))


@demo.command(name="factory-method")
@click.argument("countries", nargs=-1)
def factory_method(countries: tuple[str, ...]) -> None:
    """Print the currency of each COUNTRY (default: greece usa)."""
    _dispatch(commands.LookupCurrency(countries=countries or ("greece", "usa")))


@demo.command()
@click.option("--times", type=click.IntRange(min=1), default=2, show_default=True)
def singleton(times: int) -> None:
    """Print repeatedly with the shared printer driver."""
    _dispatch(commands.PrintDocuments(times=times))


@demo.command()
def decorator() -> None:
    """Run delegated, overridden and extended coffee machine behavior."""
    _dispatch(commands.BrewCoffee())


@demo.command()
@click.option("--login", default="dbacinski", show_default=True, help="User login.")
def facade(login: str) -> None:
    """Save a user through the repository facade and read it back."""
    _dispatch(commands.SaveUser(login=login))


@demo.command(name="protection-proxy")
@click.option("--file", "name", default="readme.md", show_default=True)
@click.option(
    "--password",
    default=None,
    help="Password for the second read (default: the configured password).",
)
def protection_proxy(name: str, password: str | None) -> None:
    """Read a file without a password, then with one."""
    _dispatch(commands.ReadFile(name=name, password=password))


@demo.command()
@click.argument("texts", nargs=-1)
def listener(texts: tuple[str, ...]) -> None:
    """Assign each TEXT to an observed text view."""
    _dispatch(commands.ChangeText(texts=texts or ("Lorem ipsum", "dolor sit amet")))


@demo.command()
@click.option("--user", "user_name", default="admin", show_default=True)
def state(user_name: str) -> None:
    """Log a user in and out, printing the presenter each time."""
    _dispatch(commands.ToggleAuthorization(user_name=user_name))


@demo.command()
@click.argument("text", default="LOREM ipsum DOLOR sit amet")
@click.option(
    "--formatter",
    "formatters",
    type=click.Choice(FORMATTER_CHOICES),
    multiple=True,
    help="Formatter to apply; repeatable (default: all).",
)
def strategy(text: str, formatters: tuple[str, ...]) -> None:
    """Print TEXT with each formatter strategy."""
    formatters = formatters or tuple(FORMATTER_CHOICES)
    _dispatch(commands.FormatText(text=text, formatters=formatters))


ALL_COMMANDS: dict[str, commands.Command] = {
    "abstract-factory": commands.MakePlant(),
    "factory-method": commands.LookupCurrency(),
    "singleton": commands.PrintDocuments(),
    "decorator": commands.BrewCoffee(),
    "facade": commands.SaveUser(),
    "protection-proxy": commands.ReadFile(),
    "listener": commands.ChangeText(),
    "state": commands.ToggleAuthorization(),
    "strategy": commands.FormatText(),
}


@demo.command(name="all")
def all_patterns() -> None:
    """Replay every pattern with its default scenario."""
    for name, cmd in ALL_COMMANDS.items():
        click.secho(f"== {name}", bold=True)
        _dispatch(cmd)
    success(f"Replayed {len(ALL_COMMANDS)} patterns.")
