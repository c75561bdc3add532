"""Configuration utilities for PATTERNS.

This module centralizes the small set of environment-driven settings used by
the pattern examples when they are replayed through the CLI.
"""

import os
from dataclasses import dataclass

PREFS_PATH_ENV = "PATTERNS_PREFS_PATH"  # pragma: no mutate
PROXY_PASSWORD_ENV = "PATTERNS_PROXY_PASSWORD"  # pragma: no mutate

DEFAULT_PREFS_PATH = "/data/default.prefs"
DEFAULT_PROXY_PASSWORD = "secret"


class InvalidSettingError(Exception):
    """Raised when a PATTERNS_* environment variable is set but blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is set but empty.")
        self.name = name


def _get_env(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    if not value.strip():
        raise InvalidSettingError(name)
    return value


def get_prefs_path() -> str:
    """Get the preferences file path used by the user repository facade.

    Returns:
        The value of `PATTERNS_PREFS_PATH`, or `/data/default.prefs` if unset.

    Raises:
        InvalidSettingError: If `PATTERNS_PREFS_PATH` is set to a blank value.
    """
    return _get_env(PREFS_PATH_ENV, DEFAULT_PREFS_PATH)


def get_proxy_password() -> str:
    """Get the password the protection proxy expects.

    Returns:
        The value of `PATTERNS_PROXY_PASSWORD`, or `secret` if unset.

    Raises:
        InvalidSettingError: If `PATTERNS_PROXY_PASSWORD` is set to a blank value.
    """
    return _get_env(PROXY_PASSWORD_ENV, DEFAULT_PROXY_PASSWORD)


@dataclass(frozen=True)
class Settings:
    """Resolved settings handed to the service-layer handlers."""

    prefs_path: str = DEFAULT_PREFS_PATH
    proxy_password: str = DEFAULT_PROXY_PASSWORD


def load_settings() -> Settings:
    """Read all settings from the environment."""
    return Settings(
        prefs_path=get_prefs_path(),
        proxy_password=get_proxy_password(),
    )
