"""Strategy: a printer whose formatting behavior is passed in as a function."""

from collections.abc import Callable

import click

from patterns.errors import UnknownFormatterError

Formatter = Callable[[str], str]

# pylint: disable=too-few-public-methods


class Printer:
    """Prints strings after running them through a formatter strategy."""

    def __init__(self, string_formatter_strategy: Formatter) -> None:
        self._string_formatter_strategy = string_formatter_strategy

    def print_string(self, string: str) -> str:
        """Format `string`, echo it, and return the formatted value."""
        formatted = self._string_formatter_strategy(string)
        click.echo(formatted)
        return formatted


def lower_case_formatter(string: str) -> str:
    return string.lower()


def upper_case_formatter(string: str) -> str:
    return string.upper()


def prefix_formatter(prefix: str = "Prefix") -> Formatter:
    """Build a formatter that prepends `"<prefix>: "`."""
    return lambda string: f"{prefix}: {string}"


FORMATTERS: dict[str, Formatter] = {
    "lower": lower_case_formatter,
    "upper": upper_case_formatter,
    "prefix": prefix_formatter(),
}


def get_formatter(name: str) -> Formatter:
    """Look up a registered formatter by name.

    Raises:
        UnknownFormatterError: If `name` is not in `FORMATTERS`.
    """
    try:
        return FORMATTERS[name]
    except KeyError as e:
        raise UnknownFormatterError(name) from e
