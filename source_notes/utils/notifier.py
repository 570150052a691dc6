"""User-facing notification channels.

The note builder and exporter report progress and problems through a
notifier supplied by the caller instead of talking to the terminal
directly. Two channels are provided: one that only logs, and one that
echoes to the terminal through Click.
"""

import logging
from typing import Protocol

import click

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Something that can show informational and error messages to a user."""

    def info(self, text: str) -> None:
        """Show an informational message."""
        ...

    def error(self, text: str) -> None:
        """Show an error message."""
        ...


class LoggingNotifier:
    """Notifier that records messages in the application log only."""

    def info(self, text: str) -> None:
        logger.info(text)

    def error(self, text: str) -> None:
        logger.error(text)


class ClickNotifier:
    """Notifier that echoes messages to the terminal.

    Informational messages go to stdout; errors go to stderr in red.
    """

    def info(self, text: str) -> None:
        click.echo(text)

    def error(self, text: str) -> None:
        click.secho(f"Error: {text}", fg="red", err=True)
