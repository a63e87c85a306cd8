"""Linear pipeline for the commit and stash actions.

Each step: (GaiContext, ActionState) -> ActionState | ActionStop

A step returns ActionStop for outcomes that end the action without an
error: nothing to do, or the operator rejected the generated text. Failures
of git or of the generation call raise GaiError subclasses instead.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal

from gai.core.approval import ApprovalEditor
from gai.core.changes import collect_working_changes
from gai.core.context import GaiContext
from gai.core.message_generator import GenerationRequest, MessageGenerator, build_input_block
from gai.output import report, spinner

logger = logging.getLogger(__name__)

ActionKind = Literal["commit", "stash"]
StopReason = Literal["no_changes", "rejected"]

_UPSTREAM_FLAGS = ("-u", "--set-upstream")

# ---------------------------------------------------------------------------
# Data Types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ActionState:
    """Immutable state threaded through the action pipeline."""

    kind: ActionKind
    cwd: Path
    amend: bool
    extra_args: tuple[str, ...]
    diff: str
    candidate: str | None
    message: str | None


@dataclass(frozen=True)
class ActionStop:
    """Non-error end of an action, reported informationally.

    Attributes:
        reason: "no_changes" for a no-op, "rejected" for operator cancellation
        message: Text shown to the operator
    """

    reason: StopReason
    message: str


# ---------------------------------------------------------------------------
# Pipeline Steps
# ---------------------------------------------------------------------------

ActionStep = Callable[[GaiContext, ActionState], ActionState | ActionStop]


def check_changes(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    """Stop with a no-op if the working tree is clean."""
    changes = collect_working_changes(ctx.git, state.cwd)
    if not changes.has_changes:
        return ActionStop(reason="no_changes", message=f"Nothing to {state.kind}. Exiting.")
    return state


def stage_changes(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    """Stage everything for a commit, unless something is already staged.

    Stash never stages: it captures the working tree as-is.
    """
    if state.kind != "commit":
        return state

    staged_diff = ctx.git.get_diff(state.cwd, staged=True)
    if staged_diff.strip():
        report("🎁", "Changes already staged.", fg="blue")
        return state

    report("🎁", "No changes staged. Automatically staging all...", fg="cyan")
    ctx.git.stage_all(state.cwd)
    return state


def collect_diff(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    """Capture the diff the message will describe.

    Commit describes the index; stash describes everything it will store.
    """
    if state.kind == "commit":
        diff = ctx.git.get_diff(state.cwd, staged=True)
    else:
        diff = collect_working_changes(ctx.git, state.cwd).combined_diff

    if state.amend:
        last_subject = ctx.git.get_last_commit_subject(state.cwd)
        if last_subject is not None:
            report("ℹ️", f"Amending last commit: {last_subject}", fg="cyan")

    logger.debug("Collected %d characters of diff for %s", len(diff), state.kind)
    return replace(state, diff=diff)


def generate_candidate(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    prompts = ctx.config.prompts
    request = GenerationRequest(
        system_instructions=prompts.system.text,
        task_instructions=prompts.commit.text,
        input_block=build_input_block(diff=state.diff),
    )
    candidate = MessageGenerator(ctx.text_generator, ctx.config).generate(request)
    return replace(state, candidate=candidate)


def review_candidate(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    assert state.candidate is not None
    result = ApprovalEditor(ctx.editor).review(state.candidate)
    if not result.approved:
        return ActionStop(
            reason="rejected", message=f"{state.kind.capitalize()} canceled by user."
        )
    return replace(state, message=result.text)


def apply_action(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    assert state.message is not None
    if state.kind == "commit":
        execute_commit(ctx, state.cwd, state.message, amend=state.amend, extra_args=state.extra_args)
    else:
        execute_stash(ctx, state.cwd, state.message, extra_args=state.extra_args)
    return state


def _action_pipeline() -> tuple[ActionStep, ...]:
    return (
        check_changes,
        stage_changes,
        collect_diff,
        generate_candidate,
        review_candidate,
        apply_action,
    )


def run_action_pipeline(ctx: GaiContext, state: ActionState) -> ActionState | ActionStop:
    """Run the action pipeline, returning final state or the first stop."""
    for step in _action_pipeline():
        result = step(ctx, state)
        if isinstance(result, ActionStop):
            return result
        state = result
    return state


def make_initial_state(
    *,
    kind: ActionKind,
    cwd: Path,
    amend: bool,
    extra_args: Sequence[str],
) -> ActionState:
    """Create initial ActionState with only CLI-provided values."""
    return ActionState(
        kind=kind,
        cwd=cwd,
        amend=amend,
        extra_args=tuple(extra_args),
        diff="",
        candidate=None,
        message=None,
    )


# ---------------------------------------------------------------------------
# Executors
# ---------------------------------------------------------------------------


def execute_commit(
    ctx: GaiContext,
    cwd: Path,
    message: str,
    *,
    amend: bool,
    extra_args: Sequence[str],
) -> None:
    ctx.git.commit(cwd, message, amend=amend, extra_args=extra_args)
    report("🎉", "Changes committed successfully!", fg="green")


def execute_stash(ctx: GaiContext, cwd: Path, message: str, *, extra_args: Sequence[str]) -> None:
    ctx.git.stash_push(cwd, message, extra_args=extra_args)
    report("🎉", "Changes stashed successfully!", fg="green")


def has_set_upstream_flag(extra_args: Sequence[str]) -> bool:
    """Check whether the operator already asked git to set the upstream."""
    return any(arg in _UPSTREAM_FLAGS for arg in extra_args)


def execute_push(ctx: GaiContext, cwd: Path, branch: str, *, extra_args: Sequence[str]) -> None:
    """Fetch the main branch, then push branch to the configured remote.

    Raises:
        ExternalCommandError: If either the fetch or the push fails
    """
    remote = ctx.config.remote
    report("🔎", f"Fetching latest from {remote}...", fg="blue")
    with spinner(f"🛰️ Fetching from {remote}"):
        ctx.git.fetch(cwd, remote, ctx.config.main_branch)

    report("🌐", "Pushing changes...", fg="blue")
    with spinner("🚀 Pushing changes"):
        ctx.git.push(
            cwd,
            remote,
            branch,
            set_upstream=not has_set_upstream_flag(extra_args),
            extra_args=extra_args,
        )
    report("🎉", "Changes pushed successfully!", fg="green")
