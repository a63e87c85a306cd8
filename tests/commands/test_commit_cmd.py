"""Tests for `gai commit`."""

import logging

from click.testing import CliRunner

from gai.cli.cli import cli
from gai.core.context import GaiContext, config_for_test
from gai.core.errors import ExternalCommandError
from gai.gateway.editor.fake import FakeEditor, SaveUnchanged
from gai.gateway.git.fake import FakeGit
from gai.gateway.llm.fake import FakeTextGenerator


def test_commit_applies_approved_message() -> None:
    git = FakeGit(unstaged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "No changes staged. Automatically staging all..." in result.output
    assert "Changes committed successfully!" in result.output
    assert [c.message for c in git.commits] == ["✨ [feat]: add a"]


def test_commit_alias_and_passthrough_flags() -> None:
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    result = CliRunner().invoke(cli, ["c", "--amend", "--", "--no-verify"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.commits[0].amend is True
    assert git.commits[0].extra_args == ("--no-verify",)


def test_commit_nothing_to_commit_exits_zero() -> None:
    git = FakeGit()
    ctx = GaiContext.for_test(git=git)

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Nothing to commit. Exiting." in result.output
    assert git.commits == []


def test_commit_canceled_exits_zero() -> None:
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[None])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Commit canceled by user." in result.output
    assert git.commits == []


def test_commit_missing_api_key_fails_before_touching_git() -> None:
    git = FakeGit(unstaged_diff="diff --git a/a b/a\n+a\n")
    ctx = GaiContext.for_test(git=git, config=config_for_test(api_key=None))

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 1
    assert "OPENAI_API_KEY environment variable not set" in result.output
    assert git.stage_all_calls == []
    assert git.diff_reads == []


def test_commit_generation_failure_exits_one() -> None:
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=[[]])
    ctx = GaiContext.for_test(git=git, text_generator=llm)

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 1
    assert "No response from the text generation service" in result.output
    assert git.commits == []


def test_commit_git_failure_exits_one() -> None:
    error = ExternalCommandError(
        cmd=["git", "commit"],
        returncode=1,
        output="pre-commit hook failed",
        operation_context="commit changes",
    )
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n", commit_raises=error)
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    result = CliRunner().invoke(cli, ["commit"], obj=ctx)

    assert result.exit_code == 1
    assert "Failed to commit changes (exit code 1)" in result.output
    assert "pre-commit hook failed" in result.output


def test_verbose_flag_after_subcommand_enables_debug_logging(caplog) -> None:
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    try:
        result = CliRunner().invoke(cli, ["commit", "-V"], obj=ctx)
    finally:
        logging.getLogger("gai").setLevel(logging.NOTSET)

    assert result.exit_code == 0, result.output
    assert git.commits[0].extra_args == ()
    assert any(
        r.name.startswith("gai.") and r.levelno == logging.DEBUG for r in caplog.records
    )


def test_verbose_flag_after_separator_is_passed_to_git() -> None:
    git = FakeGit(staged_diff="diff --git a/a b/a\n+a\n")
    llm = FakeTextGenerator(outputs=["✨ [feat]: add a"])
    editor = FakeEditor(sessions=[SaveUnchanged()])
    ctx = GaiContext.for_test(git=git, text_generator=llm, editor=editor)

    result = CliRunner().invoke(cli, ["commit", "--", "-V"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert git.commits[0].extra_args == ("-V",)
