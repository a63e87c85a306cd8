"""Tests for ApprovalEditor review sessions."""

import shlex
import sys

from gai.core.approval import ApprovalEditor
from gai.gateway.editor.fake import FakeEditor, SaveUnchanged
from gai.gateway.editor.real import RealEditor


def test_edited_text_is_approved_and_trimmed() -> None:
    editor = FakeEditor(sessions=["  ✨ [feat]: add login  \n\n"])

    result = ApprovalEditor(editor).review("✨ [feat]: add logn")

    assert result.approved is True
    assert result.text == "✨ [feat]: add login"
    assert editor.opened_contents == ["✨ [feat]: add logn"]


def test_saving_unchanged_text_approves_it() -> None:
    editor = FakeEditor(sessions=[SaveUnchanged()])

    result = ApprovalEditor(editor).review("🐛 [fix]: handle empty diff")

    assert result.approved is True
    assert result.text == "🐛 [fix]: handle empty diff"


def test_quitting_without_saving_rejects() -> None:
    editor = FakeEditor(sessions=[None])

    result = ApprovalEditor(editor).review("🐛 [fix]: handle empty diff")

    assert result.approved is False


def test_empty_content_rejects_even_when_saved() -> None:
    editor = FakeEditor(sessions=["   \n\t\n"])

    result = ApprovalEditor(editor).review("🐛 [fix]: handle empty diff")

    assert result.approved is False
    assert result.text == ""


def test_non_zero_editor_exit_rejects() -> None:
    editor = FakeEditor(sessions=["changed"], exit_code=1)

    result = ApprovalEditor(editor).review("draft")

    assert result.approved is False


def test_editor_launch_failure_rejects() -> None:
    editor = FakeEditor(launch_error=FileNotFoundError("no such editor: nano"))

    result = ApprovalEditor(editor).review("draft")

    assert result.approved is False


def test_temporary_file_is_removed_after_review() -> None:
    editor = FakeEditor(sessions=["changed"])

    ApprovalEditor(editor).review("draft")

    path = editor.opened_paths[0]
    assert path.name.startswith("gai-")
    assert path.suffix == ".txt"
    assert not path.exists()


def test_temporary_file_is_removed_after_rejection() -> None:
    editor = FakeEditor(sessions=[None])

    ApprovalEditor(editor).review("draft")

    assert not editor.opened_paths[0].exists()


def test_approved_text_is_echoed_to_stdout(capsys) -> None:
    editor = FakeEditor(sessions=["📝 [docs]: update readme"])

    ApprovalEditor(editor).review("draft")

    captured = capsys.readouterr()
    assert "📝 [docs]: update readme" in captured.out


def test_real_editor_command_with_arguments() -> None:
    """RealEditor appends the file path to a command that carries its own args."""
    script = "import pathlib, sys; pathlib.Path(sys.argv[1]).write_text('from real editor')"
    command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"

    result = ApprovalEditor(RealEditor(command)).review("draft")

    assert result.approved is True
    assert result.text == "from real editor"


def test_real_editor_that_does_not_save_rejects() -> None:
    command = f"{shlex.quote(sys.executable)} -c pass"

    result = ApprovalEditor(RealEditor(command)).review("draft")

    assert result.approved is False


def test_editor_that_deletes_the_file_rejects(capsys) -> None:
    script = "import os, sys; os.remove(sys.argv[1])"
    command = f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"

    result = ApprovalEditor(RealEditor(command)).review("draft")

    assert result.approved is False
    assert "Failed to read temporary file" in capsys.readouterr().err
