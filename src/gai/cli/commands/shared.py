"""Helpers shared by the action commands."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

import click

from gai.core.actions import ActionStop
from gai.core.errors import GaiError
from gai.output import report

F = TypeVar("F", bound=Callable[..., object])

# Passthrough flags after `--` (or unknown options) go to git verbatim
PASSTHROUGH_CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def enable_verbose_logging() -> None:
    """Turn on debug logging for gai's own loggers."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")
    logging.getLogger("gai").setLevel(logging.DEBUG)


def _verbose_callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        enable_verbose_logging()


def verbose_option(fn: F) -> F:
    """Accept -V/--verbose after the subcommand name too.

    Without it, ignore_unknown_options would hand -V to git.
    """
    return click.option(
        "-V",
        "--verbose",
        is_flag=True,
        expose_value=False,
        callback=_verbose_callback,
        help="Enable verbose output",
    )(fn)


@contextmanager
def handle_gai_errors() -> Iterator[None]:
    """Convert GaiError into click.ClickException (exit code 1)."""
    try:
        yield
    except GaiError as e:
        raise click.ClickException(str(e)) from e


def report_stop(stop: ActionStop) -> None:
    """Report a no-op or a cancellation; both exit successfully."""
    if stop.reason == "rejected":
        report("🚫", stop.message, fg="yellow")
    else:
        report("ℹ️", stop.message, fg="yellow")
