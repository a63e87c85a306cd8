"""Tests for the push workflow."""

from pathlib import Path

import pytest

from gai.core.actions import ActionStop
from gai.core.context import GaiContext, config_for_test
from gai.core.errors import ExternalCommandError
from gai.core.pr_reconciler import ReconcileResult
from gai.core.push_workflow import has_commits_to_push, run_push
from gai.gateway.editor.fake import FakeEditor, SaveUnchanged
from gai.gateway.git.fake import FakeGit, PushRecord
from gai.gateway.github.fake import FakePullRequestHost
from gai.gateway.llm.fake import FakeTextGenerator

CWD = Path("/test/repo")
BRANCH = "feature/ABC-123-login"


def test_nothing_to_push_is_a_no_op() -> None:
    git = FakeGit(current_branch=BRANCH, upstream_branch=f"origin/{BRANCH}")
    github = FakePullRequestHost()
    llm = FakeTextGenerator(outputs=["unused"])
    ctx = GaiContext.for_test(git=git, github=github, text_generator=llm, cwd=CWD)

    result = run_push(ctx, ())

    assert result == ActionStop(reason="no_changes", message="Nothing to push. Exiting.")
    assert git.fetches == []
    assert git.pushes == []
    assert github.list_calls == []
    assert github.created_prs == []
    assert llm.requests == []


def test_unpushed_branch_compares_against_main() -> None:
    git = FakeGit(current_branch=BRANCH, commits_ahead={"origin/main": 2})
    ctx = GaiContext.for_test(git=git, cwd=CWD)

    assert has_commits_to_push(ctx, BRANCH) is True


def test_branch_with_upstream_compares_against_upstream() -> None:
    git = FakeGit(
        current_branch=BRANCH,
        upstream_branch=f"origin/{BRANCH}",
        commits_ahead={"origin/main": 3, f"origin/{BRANCH}": 0},
    )
    ctx = GaiContext.for_test(git=git, cwd=CWD)

    assert has_commits_to_push(ctx, BRANCH) is False


def test_push_creates_pr_for_new_branch() -> None:
    git = FakeGit(
        current_branch=BRANCH,
        commits_ahead={"origin/main": 1},
        commit_subjects={("origin/main", BRANCH): ["✨ [feat]: add login form"]},
        branch_diffs={"origin/main": "diff --git a/login.py b/login.py\n+login()\n"},
    )
    github = FakePullRequestHost(next_pr_number=12)
    llm = FakeTextGenerator(outputs=["[ABC-123] Add login", "### Description\nLogin"])
    editor = FakeEditor(sessions=[SaveUnchanged(), SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, github=github, text_generator=llm, editor=editor, cwd=CWD)

    result = run_push(ctx, ())

    assert result == ReconcileResult(pr_number=12, created=True)
    assert git.fetches == [("origin", "main")]
    assert git.pushes == [
        PushRecord(cwd=CWD, remote="origin", branch=BRANCH, set_upstream=True, extra_args=())
    ]
    title_input = llm.requests[0].messages[2].content
    assert "TICKET NUMBER: ABC-123\n" in title_input
    assert f"BRANCH NAME:   {BRANCH}\n" in title_input
    assert "✨ [feat]: add login form" in title_input
    assert "+login()" in title_input
    assert github.created_prs[0].title == "[ABC-123] Add login"


def test_push_passthrough_upstream_flag_is_not_duplicated() -> None:
    git = FakeGit(current_branch=BRANCH, commits_ahead={"origin/main": 1})
    github = FakePullRequestHost(prs={BRANCH: [4]})
    llm = FakeTextGenerator(outputs=["body"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, github=github, text_generator=llm, editor=editor, cwd=CWD)

    run_push(ctx, ("-u", "--force-with-lease"))

    push = git.pushes[0]
    assert push.set_upstream is False
    assert push.extra_args == ("-u", "--force-with-lease")


def test_push_updates_existing_pr() -> None:
    git = FakeGit(
        current_branch=BRANCH,
        upstream_branch=f"origin/{BRANCH}",
        commits_ahead={f"origin/{BRANCH}": 1},
    )
    github = FakePullRequestHost(prs={BRANCH: [4]})
    llm = FakeTextGenerator(outputs=["new body"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, github=github, text_generator=llm, editor=editor, cwd=CWD)

    result = run_push(ctx, ())

    assert result == ReconcileResult(pr_number=4, created=False)
    assert github.updated_pr_bodies == [(4, "new body")]


def test_fetch_failure_aborts_before_push() -> None:
    error = ExternalCommandError(
        cmd=["git", "fetch"], returncode=128, output="no remote", operation_context="fetch"
    )
    git = FakeGit(current_branch=BRANCH, commits_ahead={"origin/main": 1}, fetch_raises=error)
    github = FakePullRequestHost()
    ctx = GaiContext.for_test(git=git, github=github, cwd=CWD)

    with pytest.raises(ExternalCommandError):
        run_push(ctx, ())

    assert git.pushes == []
    assert github.list_calls == []


def test_push_rejection_after_push_leaves_pr_untouched(capsys) -> None:
    git = FakeGit(current_branch=BRANCH, commits_ahead={"origin/main": 1})
    github = FakePullRequestHost()
    llm = FakeTextGenerator(outputs=["Add login"])
    editor = FakeEditor(sessions=[None])
    ctx = GaiContext.for_test(git=git, github=github, text_generator=llm, editor=editor, cwd=CWD)

    result = run_push(ctx, ())

    assert isinstance(result, ActionStop)
    assert result.reason == "rejected"
    assert len(git.pushes) == 1
    assert github.created_prs == []
    assert "was pushed but its PR was not changed" in capsys.readouterr().err


def test_push_uses_configured_remote_for_every_ref() -> None:
    git = FakeGit(
        current_branch=BRANCH,
        commits_ahead={"upstream/main": 1},
        commit_subjects={("upstream/main", BRANCH): ["✨ [feat]: add login form"]},
        branch_diffs={"upstream/main": "diff --git a/login.py b/login.py\n+login()\n"},
    )
    github = FakePullRequestHost(next_pr_number=7)
    llm = FakeTextGenerator(outputs=["[ABC-123] Add login", "### Description\nLogin"])
    editor = FakeEditor(sessions=[SaveUnchanged(), SaveUnchanged()])
    ctx = GaiContext.for_test(
        git=git,
        github=github,
        text_generator=llm,
        editor=editor,
        config=config_for_test(remote="upstream"),
        cwd=CWD,
    )

    result = run_push(ctx, ())

    assert result == ReconcileResult(pr_number=7, created=True)
    assert git.fetches == [("upstream", "main")]
    assert git.pushes[0].remote == "upstream"
    title_input = llm.requests[0].messages[2].content
    assert "✨ [feat]: add login form" in title_input
    assert "+login()" in title_input
