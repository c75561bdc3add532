"""Module defining Commands."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class MakePlant(Command):
    """Build a plant through the abstract factory for `plant`."""

    plant: str = "orange"


@dataclass(frozen=True)
class LookupCurrency(Command):
    """Print the currency for each named country."""

    countries: tuple[str, ...] = ("greece", "usa")


@dataclass(frozen=True)
class BrewCoffee(Command):
    """Run the normal and enhanced coffee machines."""


@dataclass(frozen=True)
class SaveUser(Command):
    """Save a user through the repository facade and read it back."""

    login: str = "dbacinski"


@dataclass(frozen=True)
class ChangeText(Command):
    """Assign each text in turn to an observed text view."""

    texts: tuple[str, ...] = ("Lorem ipsum", "dolor sit amet")


@dataclass(frozen=True)
class ReadFile(Command):
    """Read a file through the protection proxy, before and after a password."""

    name: str = "readme.md"
    password: str | None = None


@dataclass(frozen=True)
class PrintDocuments(Command):
    """Print `times` times with the singleton printer driver."""

    times: int = 2


@dataclass(frozen=True)
class ToggleAuthorization(Command):
    """Log a user in and back out again."""

    user_name: str = "admin"


@dataclass(frozen=True)
class FormatText(Command):
    """Print `text` with each named formatter strategy."""

    text: str = "LOREM ipsum DOLOR sit amet"
    formatters: tuple[str, ...] = ("lower", "upper", "prefix")
