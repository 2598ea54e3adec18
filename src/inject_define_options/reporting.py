"""Reporting channel for operator-facing status messages.

The injector and patcher never print directly. They talk to a Reporter,
so the console is just one implementation and tests can record messages
(see inject_define_options.testing.FakeReporter).
"""

import logging
from typing import Protocol, runtime_checkable

import typer

logger = logging.getLogger(__name__)


@runtime_checkable
class Reporter(Protocol):
    """Protocol for status reporting (info / warn / error)."""

    def info(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class ConsoleReporter:
    """Reporter that writes to the terminal and mirrors every message to logging.

    Info goes to stdout; warnings (yellow) and errors (red) go to stderr.
    """

    def info(self, message: str) -> None:
        logger.info(message)
        typer.echo(message)

    def warn(self, message: str) -> None:
        logger.warning(message)
        typer.secho(message, fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        logger.error(message)
        typer.secho(message, fg=typer.colors.RED, err=True)
