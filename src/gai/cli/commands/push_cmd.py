"""Push the current branch and create or update its pull request."""

import click

from gai.cli.alias import alias
from gai.cli.commands.shared import (
    PASSTHROUGH_CONTEXT_SETTINGS,
    handle_gai_errors,
    report_stop,
    verbose_option,
)
from gai.core.actions import ActionStop
from gai.core.context import GaiContext
from gai.core.preflight import check_requirements
from gai.core.push_workflow import run_push


@alias("p")
@click.command("push", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@verbose_option
@click.argument("git_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def push_cmd(ctx: GaiContext, *, git_args: tuple[str, ...]) -> None:
    """Push changes and create/update a PR.

    An existing PR for the branch gets a regenerated body; otherwise a draft
    PR is created with a generated title and body. Each text is reviewed in
    your editor before anything is sent to GitHub.

    Examples:

    \b
      gai push
      gai push -- --force-with-lease
    """
    with handle_gai_errors():
        check_requirements(ctx)
        result = run_push(ctx, git_args)

    if isinstance(result, ActionStop):
        report_stop(result)
