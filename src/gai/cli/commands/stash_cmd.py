"""Stash working tree changes with a generated message."""

import click

from gai.cli.alias import alias
from gai.cli.commands.shared import (
    PASSTHROUGH_CONTEXT_SETTINGS,
    handle_gai_errors,
    report_stop,
    verbose_option,
)
from gai.core.actions import ActionStop, make_initial_state, run_action_pipeline
from gai.core.context import GaiContext
from gai.core.preflight import check_requirements
from gai.output import report


@alias("s")
@click.command("stash", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@verbose_option
@click.argument("git_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def stash_cmd(ctx: GaiContext, *, git_args: tuple[str, ...]) -> None:
    """Stash changes with an AI-generated message.

    Nothing is staged; the stash captures the working tree as-is.
    """
    with handle_gai_errors():
        check_requirements(ctx)
        report("📢", "Stashing changes with AI message...", fg="blue")
        state = make_initial_state(kind="stash", cwd=ctx.cwd, amend=False, extra_args=git_args)
        result = run_action_pipeline(ctx, state)

    if isinstance(result, ActionStop):
        report_stop(result)
