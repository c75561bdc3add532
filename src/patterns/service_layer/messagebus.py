"""Synchronous command bus connecting the entrypoints to the demo handlers."""

import logging
from collections.abc import Callable
from functools import partial

from patterns.errors import PatternError

from .commands import Command

logger = logging.getLogger(__name__)

type Handler = Callable[..., None]

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        self.command_type = type(cmd)
        super().__init__(f"No handler found for command {self.command_type.__name__}")


def handler_name(handler: Handler) -> str:
    """Name used for `handler` in log messages.

    Handlers with injected settings are `functools.partial` objects and are
    named after the function they wrap.
    """
    if isinstance(handler, partial):
        handler = handler.func
    return getattr(handler, "__name__", repr(handler))


class MessageBus:
    """Routes each command to the one handler registered for its exact type.

    Args:
        command_handlers: Handlers keyed by command type. Each is called with
            the command only; `patterns.bootstrap` binds anything else first.
    """

    def __init__(self, command_handlers: dict[type[Command], Handler]) -> None:
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> None:
        """Run the handler registered for `cmd`.

        A `PatternError` is an expected rejection of the command's input and
        is logged at INFO; anything else is logged with its traceback. Both
        are re-raised.

        Raises:
            NoHandlerForCommand: If no handler is registered for the command type.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = handler_name(handler)
        logger.debug("Handling command %s with handler %s", cmd, name)
        try:
            handler(cmd)
        except PatternError as e:
            logger.info("Command %s rejected by handler %s: %s", cmd, name, e)
            raise
        except Exception:  # pylint: disable=broad-except
            logger.exception(
                "Exception handling command %s with handler %s", cmd, name
            )
            raise
