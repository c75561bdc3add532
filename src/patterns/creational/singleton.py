"""Singleton: a printer driver that exists at most once per process.

The instance is created lazily on first use, so importing this module has no
side effects.
"""

from __future__ import annotations

import logging
from typing import ClassVar

import click

logger = logging.getLogger(__name__)


class PrinterDriver:
    """The one and only printer driver.

    Every construction returns the same object; the initialization message is
    emitted only the first time.

    Example:
        first = PrinterDriver().print()
        second = get_printer_driver().print()
        assert first is second
    """

    _instance: ClassVar[PrinterDriver | None] = None

    def __new__(cls) -> PrinterDriver:
        if cls._instance is None:
            instance = super().__new__(cls)
            click.echo(f"Initializing with object: {instance}")
            logger.debug("Created printer driver %s", instance)
            cls._instance = instance
        return cls._instance

    def print(self) -> PrinterDriver:
        """Print with the shared driver and return it."""
        click.echo(f"Printing with object: {self}")
        return self


def get_printer_driver() -> PrinterDriver:
    """Return the shared printer driver, creating it on first access."""
    return PrinterDriver()
