"""Facade: a user repository hiding a preferences store.

`ComplexSystemStore` stands in for a file-backed key/value store. It only
pretends to touch the file: reads and commits are console messages and the
data lives in a dict for the lifetime of the object.
"""

import logging
from dataclasses import dataclass

import click

from patterns.config import DEFAULT_PREFS_PATH

logger = logging.getLogger(__name__)

USER_KEY = "USER_KEY"


class ComplexSystemStore:
    """In-memory key/value store that announces file reads and writes."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        click.echo(f"Reading data from file: {file_path}")
        self._cache: dict[str, str] = {}

    def store(self, key: str, payload: str) -> None:
        """Put `payload` under `key`, replacing any previous value."""
        self._cache[key] = payload

    def read(self, key: str) -> str:
        """Return the value stored under `key`, or "" if there is none."""
        return self._cache.get(key, "")

    def commit(self) -> None:
        """Announce that the cached data would be written to the file."""
        logger.debug("Committing %d entries to %s", len(self._cache), self.file_path)
        click.echo(f"Storing cached data: {self._cache} to file: {self.file_path}")


@dataclass(frozen=True)
class User:
    """A user, identified by login."""

    login: str


class UserRepository:
    """Facade exposing user persistence on top of `ComplexSystemStore`."""

    def __init__(self, prefs_path: str = DEFAULT_PREFS_PATH) -> None:
        self._system_preferences = ComplexSystemStore(prefs_path)

    def save(self, user: User) -> None:
        """Store the user's login and commit the preferences."""
        self._system_preferences.store(USER_KEY, user.login)
        self._system_preferences.commit()

    def find_first(self) -> User:
        """Return the stored user; the login is "" if none was saved."""
        return User(self._system_preferences.read(USER_KEY))
