"""Integration tests for RealGit against a throwaway repository."""

import shutil
import subprocess
from pathlib import Path

import pytest

from gai.core.errors import ExternalCommandError
from gai.gateway.git.real import RealGit

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    _git(tmp_path, "init", "-q", "-b", "main")
    _git(tmp_path, "config", "user.email", "dev@example.com")
    _git(tmp_path, "config", "user.name", "Dev")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    (tmp_path / "README.md").write_text("hello\n", encoding="utf-8")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-q", "-m", "initial")
    return tmp_path


def test_diff_stage_and_commit(repo: Path) -> None:
    git = RealGit()
    (repo / "README.md").write_text("hello\nworld\n", encoding="utf-8")

    assert "+world" in git.get_diff(repo, staged=False)
    assert git.get_diff(repo, staged=True) == ""

    git.stage_all(repo)
    assert "+world" in git.get_diff(repo, staged=True)

    git.commit(repo, "📝 [docs]: add world", amend=False, extra_args=[])
    assert git.get_last_commit_subject(repo) == "📝 [docs]: add world"
    assert git.get_diff(repo, staged=True) == ""


def test_amend_replaces_last_subject(repo: Path) -> None:
    git = RealGit()

    git.commit(repo, "🎉 [init]: start", amend=True, extra_args=["--allow-empty"])

    assert git.get_last_commit_subject(repo) == "🎉 [init]: start"
    assert _git(repo, "rev-list", "--count", "HEAD").strip() == "1"


def test_stash_push_uses_message(repo: Path) -> None:
    git = RealGit()
    (repo / "README.md").write_text("changed\n", encoding="utf-8")

    git.stash_push(repo, "🚧 [wip]: park change", extra_args=[])

    assert "🚧 [wip]: park change" in _git(repo, "stash", "list")
    assert git.get_diff(repo, staged=False) == ""


def test_branch_queries(repo: Path) -> None:
    git = RealGit()
    _git(repo, "checkout", "-q", "-b", "feature/ABC-1-x")

    assert git.get_current_branch(repo) == "feature/ABC-1-x"
    assert git.get_upstream_branch(repo) is None
    assert git.count_commits_ahead(repo, "main") == 0


def test_commit_with_nothing_staged_raises(repo: Path) -> None:
    git = RealGit()

    with pytest.raises(ExternalCommandError):
        git.commit(repo, "nothing", amend=False, extra_args=[])


def test_commit_subjects_against_non_origin_remote(repo: Path, tmp_path_factory) -> None:
    git = RealGit()
    remote_dir = tmp_path_factory.mktemp("remote") / "upstream.git"
    _git(repo, "init", "-q", "--bare", str(remote_dir))
    _git(repo, "remote", "add", "upstream", str(remote_dir))
    _git(repo, "push", "-q", "upstream", "main")
    _git(repo, "checkout", "-q", "-b", "feature/ABC-1-x")
    (repo / "login.py").write_text("login()\n", encoding="utf-8")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "✨ [feat]: add login")

    git.fetch(repo, "upstream", "main")

    assert git.get_commit_subjects(repo, "upstream/main", "feature/ABC-1-x") == [
        "✨ [feat]: add login"
    ]
    assert "+login()" in git.get_diff_to_branch(repo, "upstream/main")
