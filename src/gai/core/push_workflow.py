"""Push the current branch and reconcile its pull request."""

import logging
from collections.abc import Sequence

from gai.core.actions import ActionStop, execute_push
from gai.core.context import GaiContext
from gai.core.pr_reconciler import ReconcileResult, reconcile_pull_request
from gai.core.ticket import detect_ticket
from gai.output import report, report_warning

logger = logging.getLogger(__name__)


def has_commits_to_push(ctx: GaiContext, branch: str) -> bool:
    """Check whether branch has commits the remote does not.

    Compares against the branch's upstream when it has one, otherwise
    against the remote main branch (a branch that was never pushed).
    """
    upstream = ctx.git.get_upstream_branch(ctx.cwd)
    base_ref = upstream if upstream is not None else f"{ctx.config.remote}/{ctx.config.main_branch}"
    ahead = ctx.git.count_commits_ahead(ctx.cwd, base_ref)
    logger.debug("Branch %s is %d commit(s) ahead of %s", branch, ahead, base_ref)
    return ahead > 0


def run_push(ctx: GaiContext, extra_args: Sequence[str]) -> ReconcileResult | ActionStop:
    """Push the current branch, then create or update its pull request.

    Returns:
        ReconcileResult after a successful reconcile, or ActionStop for a
        no-op or an operator cancellation

    Raises:
        ExternalCommandError: If fetch, push or a PR host call fails
        GenerationError: If generating PR text fails
    """
    report("🌐", "Preparing to push changes...", fg="blue")

    branch = ctx.git.get_current_branch(ctx.cwd)
    logger.debug("Current branch: %s", branch)

    if not has_commits_to_push(ctx, branch):
        return ActionStop(reason="no_changes", message="Nothing to push. Exiting.")

    execute_push(ctx, ctx.cwd, branch, extra_args=extra_args)

    base_ref = f"{ctx.config.remote}/{ctx.config.main_branch}"
    commit_subjects = ctx.git.get_commit_subjects(ctx.cwd, base_ref, branch)
    diff = ctx.git.get_diff_to_branch(ctx.cwd, base_ref)
    ticket = detect_ticket(branch)
    logger.debug("Detected ticket %s from branch %s", ticket, branch)

    result = reconcile_pull_request(
        ctx,
        branch=branch,
        commit_subjects=commit_subjects,
        diff=diff,
        ticket=ticket,
    )
    if isinstance(result, ActionStop):
        # The branch is already pushed, so the next run is a no-op until a new commit
        report_warning(
            f"Branch {branch} was pushed but its PR was not changed. "
            "Run `gai push` again after a new commit, or use `gh pr create`."
        )
    return result
