"""Bootstrap (composition root) for PATTERNS.

Reads configuration and binds it into the service-layer handlers, then builds
the message bus the entrypoints talk to. No pattern logic lives here.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from patterns import config
from patterns.service_layer.handlers import COMMAND_HANDLERS
from patterns.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from patterns.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    message_bus: MessageBus
    settings: config.Settings


def build_message_bus(
    settings: config.Settings,
    command_handlers: dict[type[Command], Callable[..., None]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"settings": settings}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }
    return MessageBus(command_handlers=injected_command_handlers)


def bootstrap(settings: config.Settings | None = None) -> AppContainer:
    """Bootstrap the message bus, reading settings from the environment if not given."""
    if settings is None:
        settings = config.load_settings()
    message_bus = build_message_bus(settings, COMMAND_HANDLERS)
    return AppContainer(message_bus=message_bus, settings=settings)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler declares as parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    if not deps:
        return handler
    return partial(handler, **deps)
