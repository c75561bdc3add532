"""Command handlers replaying each pattern's canonical scenario."""

import logging
from collections.abc import Callable

import click

from patterns.behavioral.listener import PrintingTextChangedListener, TextView
from patterns.behavioral.state import AuthorizationPresenter
from patterns.behavioral.strategy import Printer, get_formatter
from patterns.config import Settings
from patterns.creational.abstract_factory import PlantFactory, plant_type_for
from patterns.creational.factory_method import CurrencyFactory, country_for_name
from patterns.creational.singleton import get_printer_driver
from patterns.service_layer import commands
from patterns.structural.decorator import EnhancedCoffeeMachine, NormalCoffeeMachine
from patterns.structural.facade import User, UserRepository
from patterns.structural.protection_proxy import NormalFile, SecuredFile

logger = logging.getLogger(__name__)


def make_plant(cmd: commands.MakePlant) -> None:
    """Create a plant through the factory selected for its type."""
    plant_factory = PlantFactory.create_factory(plant_type_for(cmd.plant))
    plant = plant_factory.make_plant()
    click.echo(f"Created plant: {plant}")


def lookup_currency(cmd: commands.LookupCurrency) -> None:
    """Print the currency code for each requested country."""
    for name in cmd.countries:
        country = country_for_name(name)
        code = CurrencyFactory.currency_for_country(country).code
        click.echo(f"{country!r} currency: {code}")


def brew_coffee(cmd: commands.BrewCoffee) -> None:  # pylint: disable=unused-argument
    """Exercise delegated, overridden and extended decorator behavior."""
    normal_machine = NormalCoffeeMachine()
    enhanced_machine = EnhancedCoffeeMachine(normal_machine)

    enhanced_machine.make_small_coffee()
    enhanced_machine.make_large_coffee()
    enhanced_machine.make_coffee_with_milk()


def save_user(cmd: commands.SaveUser, settings: Settings) -> None:
    """Save a user through the facade and look it up again."""
    user_repository = UserRepository(settings.prefs_path)
    user_repository.save(User(cmd.login))
    result_user = user_repository.find_first()
    click.echo(f"Found stored user: {result_user}")


def change_text(cmd: commands.ChangeText) -> None:
    """Assign each text to a text view observed by a printing listener."""
    listener = PrintingTextChangedListener()
    text_view = TextView()
    text_view.listeners.append(listener)
    for text in cmd.texts:
        text_view.text = text


def read_file(cmd: commands.ReadFile, settings: Settings) -> None:
    """Read through the proxy without a password, then with one.

    The second read uses `cmd.password`, falling back to the configured
    password so the default scenario ends with a granted read.
    """
    secured_file = SecuredFile(NormalFile(), expected_password=settings.proxy_password)
    secured_file.read(cmd.name)
    secured_file.password = (
        cmd.password if cmd.password is not None else settings.proxy_password
    )
    secured_file.read(cmd.name)


def print_documents(cmd: commands.PrintDocuments) -> None:
    """Print repeatedly and report whether one driver was used throughout."""
    click.echo("Start")
    drivers = [get_printer_driver().print() for _ in range(cmd.times)]
    same = all(driver is drivers[0] for driver in drivers)
    logger.info("Printed %d time(s) with a single driver: %s", cmd.times, same)


def toggle_authorization(cmd: commands.ToggleAuthorization) -> None:
    """Log a user in, then out, printing the presenter after each step."""
    authorization_presenter = AuthorizationPresenter()

    authorization_presenter.login_user(cmd.user_name)
    click.echo(str(authorization_presenter))

    authorization_presenter.logout_user()
    click.echo(str(authorization_presenter))


def format_text(cmd: commands.FormatText) -> None:
    """Print the text once per formatter strategy."""
    for name in cmd.formatters:
        Printer(get_formatter(name)).print_string(cmd.text)


COMMAND_HANDLERS: dict[type, Callable[..., None]] = {
    commands.MakePlant: make_plant,
    commands.LookupCurrency: lookup_currency,
    commands.BrewCoffee: brew_coffee,
    commands.SaveUser: save_user,
    commands.ChangeText: change_text,
    commands.ReadFile: read_file,
    commands.PrintDocuments: print_documents,
    commands.ToggleAuthorization: toggle_authorization,
    commands.FormatText: format_text,
}
