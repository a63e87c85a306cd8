"""Operator-facing output helpers.

Status messages go to stderr so stdout stays free for the approved text.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console


def user_output(message: str = "") -> None:
    """Write a line to stderr."""
    click.echo(message, err=True)


def report(emoji: str, message: str, *, fg: str | None = None, bold: bool = False) -> None:
    """Write an emoji-prefixed, optionally colored status line to stderr."""
    user_output(click.style(f"{emoji} {message}", fg=fg, bold=bold))


def report_error(message: str) -> None:
    report("❌", message, fg="red")


def report_warning(message: str) -> None:
    report("⚠️", message, fg="yellow")


@contextmanager
def spinner(description: str) -> Iterator[None]:
    """Show a spinner on stderr while a blocking call runs.

    Rich renders nothing when stderr is not a terminal, so this is safe in
    pipes and tests.
    """
    console = Console(stderr=True)
    with console.status(f"{description}..."):
        yield
