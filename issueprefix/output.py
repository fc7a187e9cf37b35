"""Output sinks for hook messages.

Informational lines go to stdout and error lines to stderr, so the calling
hook framework can tell them apart.
"""

from typing import Callable

import typer

# A sink receives a single line of human-readable text.
Sink = Callable[[str], None]


def echo_info(message: str) -> None:
    """Write an informational line to stdout."""
    typer.echo(message)


def echo_error(message: str) -> None:
    """Write an error line to stderr."""
    typer.echo(message, err=True)
