"""Listener (Observer): a text view that notifies listeners on every change."""

import abc
import logging

import click

logger = logging.getLogger(__name__)

INITIAL_TEXT = "<empty>"

# pylint: disable=too-few-public-methods


class TextChangedListener(abc.ABC):
    """Contract for objects interested in text changes."""

    @abc.abstractmethod
    def on_text_changed(self, old_text: str, new_text: str) -> None:
        """Called after the observed text changed from `old_text` to `new_text`."""


class PrintingTextChangedListener(TextChangedListener):
    """Remembers and echoes a description of the latest change."""

    def __init__(self) -> None:
        self.text = ""

    def on_text_changed(self, old_text: str, new_text: str) -> None:
        self.text = f"Text is changed: {old_text} -> {new_text}"
        click.echo(self.text)


class TextView:
    """Holds a piece of text and notifies `listeners` whenever it is assigned.

    Listeners are called synchronously, in the order they were added, after
    the new value has been stored. Changes to `listeners` made during a
    notification take effect from the next assignment.
    """

    def __init__(self) -> None:
        self.listeners: list[TextChangedListener] = []
        self._text = INITIAL_TEXT

    @property
    def text(self) -> str:
        """The current text."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        old, self._text = self._text, value
        logger.debug("Notifying %d listener(s) of text change", len(self.listeners))
        for listener in list(self.listeners):
            listener.on_text_changed(old, value)
