"""Protection Proxy: gate file reads behind a password."""

import abc
import logging

import click

from patterns.config import DEFAULT_PROXY_PASSWORD

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class File(abc.ABC):
    """Contract for something that can read files by name."""

    @abc.abstractmethod
    def read(self, name: str) -> bool | None:
        """Read the file called `name`."""


class NormalFile(File):
    """Unrestricted file access."""

    def read(self, name: str) -> None:
        click.echo(f"Reading file: {name}")


class SecuredFile(File):
    """Proxy that forwards `read` only when `password` is correct.

    Args:
        normal_file: The file object reads are forwarded to.
        expected_password: The password `password` must equal exactly.

    Example:
        secured = SecuredFile(NormalFile())
        secured.read("readme.md")   # access denied
        secured.password = "secret"
        secured.read("readme.md")   # forwarded
    """

    def __init__(
        self, normal_file: File, expected_password: str = DEFAULT_PROXY_PASSWORD
    ) -> None:
        self._normal_file = normal_file
        self._expected_password = expected_password
        self.password = ""

    def read(self, name: str) -> bool:
        """Read `name` through the wrapped file if the password matches.

        Returns:
            True if the read was forwarded, False if access was denied.
        """
        if self.password == self._expected_password:
            click.echo(f"Password is correct: {self.password}")
            self._normal_file.read(name)
            return True
        logger.info("Access to %s denied", name)
        click.echo("Incorrect password. Access denied!")
        return False
