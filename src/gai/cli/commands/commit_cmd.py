"""Commit staged (or all) changes with a generated message."""

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


@alias("c")
@click.command("commit", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@verbose_option
@click.option("--amend", is_flag=True, help="Amend the last commit")
@click.argument("git_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def commit_cmd(ctx: GaiContext, *, amend: bool, git_args: tuple[str, ...]) -> None:
    """Generate an AI-powered commit message.

    If nothing is staged, all changes are staged first. The message opens in
    your editor: save to commit, quit without saving to cancel.

    Examples:

    \b
      gai commit
      gai commit --amend
      gai commit -- --no-verify
    """
    with handle_gai_errors():
        check_requirements(ctx)
        report("📢", "Starting commit process...", fg="blue")
        state = make_initial_state(kind="commit", cwd=ctx.cwd, amend=amend, extra_args=git_args)
        result = run_action_pipeline(ctx, state)

    if isinstance(result, ActionStop):
        report_stop(result)
