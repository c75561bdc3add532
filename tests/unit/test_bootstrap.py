"""Unit tests for the composition root."""

from dataclasses import dataclass

import pytest

from patterns import config
from patterns.bootstrap import bootstrap, build_message_bus, inject_dependencies
from patterns.service_layer.commands import Command

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class CustomCommand(Command):
    """A custom command for testing."""


def test_bootstrap_reads_settings_from_environment(monkeypatch):
    """Without explicit settings the environment is used."""
    monkeypatch.setenv(config.PREFS_PATH_ENV, "/srv/app.prefs")
    container = bootstrap()
    assert container.settings.prefs_path == "/srv/app.prefs"


def test_bootstrap_propagates_invalid_settings(monkeypatch):
    """Blank settings fail at bootstrap time."""
    monkeypatch.setenv(config.PROXY_PASSWORD_ENV, "")
    with pytest.raises(config.InvalidSettingError):
        bootstrap()


def test_build_message_bus_injects_settings():
    """Handlers declaring a `settings` parameter receive the settings."""
    seen = []

    def handler(cmd: CustomCommand, settings: config.Settings) -> None:
        seen.append((cmd, settings))

    settings = config.Settings(prefs_path="/x")
    bus = build_message_bus(settings, {CustomCommand: handler})
    cmd = CustomCommand()
    bus.handle(cmd)
    assert seen == [(cmd, settings)]


def test_inject_dependencies_leaves_plain_handlers_untouched():
    """Handlers without dependencies are returned as they are."""

    def handler(cmd: CustomCommand) -> None:
        pass

    assert inject_dependencies(handler, {"settings": object()}) is handler
