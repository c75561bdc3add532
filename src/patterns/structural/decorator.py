"""Decorator: add and override coffee machine behavior by wrapping.

`EnhancedCoffeeMachine` wraps any `CoffeeMachine`. It forwards what it does not
override, replaces `make_large_coffee`, and adds `make_coffee_with_milk`.
"""

import abc
from typing import Any

import click


class CoffeeMachine(abc.ABC):
    """Contract for a coffee machine."""

    @abc.abstractmethod
    def make_small_coffee(self) -> None:
        """Make a small coffee."""

    @abc.abstractmethod
    def make_large_coffee(self) -> None:
        """Make a large coffee."""


class NormalCoffeeMachine(CoffeeMachine):
    """A plain coffee machine."""

    def make_small_coffee(self) -> None:
        click.echo("Normal: Making small coffee")

    def make_large_coffee(self) -> None:
        click.echo("Normal: Making large coffee")


class EnhancedCoffeeMachine(CoffeeMachine):
    """Decorator around another coffee machine.

    Args:
        coffee_machine: The wrapped machine. Anything not defined here is
            forwarded to it, including attributes outside `CoffeeMachine`.
    """

    def __init__(self, coffee_machine: CoffeeMachine) -> None:
        self._coffee_machine = coffee_machine

    def __getattr__(self, name: str) -> Any:
        # only reached for attributes not found on the decorator itself
        if name == "_coffee_machine":
            raise AttributeError(name)
        return getattr(self._coffee_machine, name)

    def make_small_coffee(self) -> None:
        self._coffee_machine.make_small_coffee()

    def make_large_coffee(self) -> None:
        click.echo("Enhanced: Making large coffee")

    def make_coffee_with_milk(self) -> None:
        """Make a small coffee on the wrapped machine and add milk."""
        click.echo("Enhanced: Making coffee with milk")
        self._coffee_machine.make_small_coffee()
        self._add_milk()

    def _add_milk(self) -> None:
        click.echo("Enhanced: Adding milk")
