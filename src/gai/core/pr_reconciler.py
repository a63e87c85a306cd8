"""Create or update the pull request for a branch.

A branch is assumed to have at most one open pull request. If one exists,
only its body is regenerated; otherwise a title and body are generated,
reviewed and used to open a draft. Either way the PR is then opened in the
browser.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gai.core.actions import ActionStop
from gai.core.approval import ApprovalEditor
from gai.core.context import GaiContext
from gai.core.errors import GaiError
from gai.core.message_generator import GenerationRequest, MessageGenerator, build_input_block
from gai.core.ticket import NO_TICKET
from gai.output import report, report_warning

logger = logging.getLogger(__name__)

_NO_TICKET_TITLE_PREFIX = f"[{NO_TICKET}] "


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of a successful reconcile.

    Attributes:
        pr_number: Number of the PR that was updated or created, or None if
            a newly created PR could not be looked up again
        created: True if a new draft PR was created
    """

    pr_number: int | None
    created: bool


def find_pr_number(ctx: GaiContext, branch: str) -> int | None:
    """Look up the open PR for branch, taking the first if several match."""
    numbers = ctx.github.list_pr_numbers_for_branch(ctx.cwd, branch)
    if not numbers:
        return None
    if len(numbers) > 1:
        ignored = ", ".join(f"#{n}" for n in numbers[1:])
        logger.warning(
            "Multiple open PRs for branch %s; using #%d and ignoring %s", branch, numbers[0], ignored
        )
    return numbers[0]


def clean_title(raw_title: str, ticket: str) -> str:
    """Keep the first line of a generated title.

    The placeholder ticket prefix is dropped when the branch has no ticket.
    """
    first_line = raw_title.split("\n", 1)[0]
    if ticket == NO_TICKET:
        first_line = first_line.removeprefix(_NO_TICKET_TITLE_PREFIX)
    return first_line


def reconcile_pull_request(
    ctx: GaiContext,
    *,
    branch: str,
    commit_subjects: Sequence[str],
    diff: str,
    ticket: str,
) -> ReconcileResult | ActionStop:
    """Update the branch's PR body, or create a draft PR if there is none.

    Returns:
        ReconcileResult on success, ActionStop if the operator rejected a
        review. A rejection never mutates the PR host.

    Raises:
        GenerationError: If generating a title or body fails
        ExternalCommandError: If listing, creating or editing the PR fails
    """
    generator = MessageGenerator(ctx.text_generator, ctx.config)
    approval = ApprovalEditor(ctx.editor)

    pr_number = find_pr_number(ctx, branch)
    if pr_number is not None:
        report("📝", f"Pull request #{pr_number} found. Updating body...", fg="cyan")
        body_input = build_input_block(
            ticket=ticket, branch=branch, commit_subjects=commit_subjects, diff=diff
        )
        body = approval.review(generator.generate(_body_request(ctx, body_input)))
        if not body.approved:
            return ActionStop(reason="rejected", message="PR update canceled by user.")

        report("📢", "Updating PR on GitHub...", fg="blue")
        ctx.github.update_pr_body(ctx.cwd, pr_number, body.text)
        report("🎉", "Pull Request updated successfully!", fg="green")
        result = ReconcileResult(pr_number=pr_number, created=False)
    else:
        report("🚀", "No existing PR found. Creating new PR...", fg="blue")
        title_input = build_input_block(
            ticket=ticket, branch=branch, commit_subjects=commit_subjects, diff=diff
        )
        prompts = ctx.config.prompts
        raw_title = generator.generate(
            GenerationRequest(
                system_instructions=prompts.system.text,
                task_instructions=prompts.pr_title.text,
                input_block=title_input,
            )
        )
        title = approval.review(clean_title(raw_title, ticket))
        if not title.approved:
            return ActionStop(reason="rejected", message="PR creation canceled (no save on title).")

        body_input = build_input_block(
            ticket=ticket,
            branch=branch,
            pr_title=title.text,
            commit_subjects=commit_subjects,
            diff=diff,
        )
        body = approval.review(generator.generate(_body_request(ctx, body_input)))
        if not body.approved:
            return ActionStop(reason="rejected", message="PR creation canceled (no save on body).")

        report("📢", "Creating a draft Pull Request on GitHub...", fg="blue")
        ctx.github.create_draft_pr(ctx.cwd, branch, title.text, body.text)
        report("🎉", "Pull Request created successfully!", fg="green")
        result = ReconcileResult(pr_number=_lookup_created_pr(ctx, branch), created=True)

    open_pr(ctx, result.pr_number)
    return result


def open_pr(ctx: GaiContext, pr_number: int | None) -> None:
    """Open the PR in the browser; problems here only produce warnings."""
    if pr_number is None:
        report_warning("No PR number to open in browser.")
        return
    report("🌐", "Opening PR in browser...", fg="cyan")
    try:
        ctx.github.open_pr_in_browser(ctx.cwd, pr_number)
    except GaiError as e:
        report_warning(f"Could not open PR #{pr_number} in browser: {e}")


def _body_request(ctx: GaiContext, input_block: str) -> GenerationRequest:
    prompts = ctx.config.prompts
    return GenerationRequest(
        system_instructions=prompts.system.text,
        task_instructions=prompts.pr_body.text,
        input_block=input_block,
    )


def _lookup_created_pr(ctx: GaiContext, branch: str) -> int | None:
    # The PR already exists at this point; failing to find it only skips the browser step
    try:
        return find_pr_number(ctx, branch)
    except GaiError as e:
        logger.warning("Could not look up newly created PR for %s: %s", branch, e)
        return None
