"""Factory Method: map a closed set of countries to their currency."""

from dataclasses import dataclass

from patterns.errors import UnsupportedCountryError

# pylint: disable=too-few-public-methods


class Country:
    """Base class of the closed country hierarchy.

    Only the subclasses defined in this module are valid countries; adding a
    new one requires a matching branch in `CurrencyFactory`.
    """

    def __repr__(self) -> str:
        return type(self).__name__


class _USA(Country):
    def __repr__(self) -> str:
        return "USA"


class _Spain(Country):
    def __repr__(self) -> str:
        return "Spain"


USA = _USA()
Spain = _Spain()


class Greece(Country):
    """Greece, carrying an arbitrary extra property."""

    def __init__(self, some_property: str = "") -> None:
        self.some_property = some_property


@dataclass(frozen=True)
class Canada(Country):
    """Canada, as a value object."""

    some_property: str = ""


@dataclass(frozen=True)
class Currency:
    """An ISO-4217 currency code."""

    code: str


class CurrencyFactory:
    """Creates the currency that belongs to a country."""

    @staticmethod
    def currency_for_country(country: Country) -> Currency:
        """Return the currency used in `country`.

        Raises:
            UnsupportedCountryError: If `country` is not part of the hierarchy.
        """
        match country:
            case Greece() | _Spain():
                return Currency("EUR")
            case _USA():
                return Currency("USD")
            case Canada():
                return Currency("CAD")
            case _:
                raise UnsupportedCountryError(country)


def country_for_name(name: str, some_property: str = "") -> Country:
    """Resolve a country name such as "greece" or "USA" (case-insensitive)."""
    match name.strip().lower():
        case "usa":
            return USA
        case "spain":
            return Spain
        case "greece":
            return Greece(some_property)
        case "canada":
            return Canada(some_property)
        case _:
            raise UnsupportedCountryError(name)
