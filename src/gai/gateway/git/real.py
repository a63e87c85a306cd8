"""Production implementation of Git operations using subprocess."""

from collections.abc import Sequence
from pathlib import Path

from gai.gateway.git.abc import Git
from gai.subprocess_utils import run_subprocess_with_context


class RealGit(Git):
    """Real implementation of Git operations using the git CLI."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        """Get the staged or unstaged diff."""
        cmd = ["git", "diff", "--cached"] if staged else ["git", "diff"]
        result = run_subprocess_with_context(
            cmd,
            operation_context="read staged diff" if staged else "read unstaged diff",
            cwd=cwd,
        )
        return result.stdout

    def get_diff_to_branch(self, cwd: Path, base_ref: str) -> str:
        """Get the diff of HEAD against its merge base with base_ref."""
        result = run_subprocess_with_context(
            ["git", "diff", f"{base_ref}...HEAD"],
            operation_context=f"read diff against '{base_ref}'",
            cwd=cwd,
        )
        return result.stdout

    def get_current_branch(self, cwd: Path) -> str:
        """Get the current branch via git rev-parse --abbrev-ref HEAD."""
        result = run_subprocess_with_context(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            operation_context="get current branch",
            cwd=cwd,
        )
        return result.stdout.strip()

    def get_commit_subjects(self, cwd: Path, base_ref: str, head: str) -> list[str]:
        """Get non-merge commit subjects in base_ref..head."""
        result = run_subprocess_with_context(
            [
                "git",
                "log",
                f"{base_ref}..{head}",
                "--pretty=format:%s",
                "--no-merges",
            ],
            operation_context=f"list commits between {base_ref} and {head}",
            cwd=cwd,
        )
        return [line for line in result.stdout.splitlines() if line.strip()]

    def get_last_commit_subject(self, cwd: Path) -> str | None:
        """Get the HEAD commit subject; None when the repository has no commits."""
        result = run_subprocess_with_context(
            ["git", "log", "-1", "--pretty=format:%s"],
            operation_context="read last commit message",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        subject = result.stdout.strip()
        return subject if subject else None

    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Resolve @{upstream}; git exits non-zero when none is configured."""
        result = run_subprocess_with_context(
            ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{upstream}"],
            operation_context="resolve upstream branch",
            cwd=cwd,
            check=False,
        )
        if result.returncode != 0:
            return None
        upstream = result.stdout.strip()
        return upstream if upstream else None

    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        """Count commits in base_ref..HEAD."""
        result = run_subprocess_with_context(
            ["git", "rev-list", "--count", f"{base_ref}..HEAD"],
            operation_context=f"count commits ahead of '{base_ref}'",
            cwd=cwd,
        )
        return int(result.stdout.strip())

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def stage_all(self, cwd: Path) -> None:
        """Stage all changes (git add .)."""
        run_subprocess_with_context(
            ["git", "add", "."],
            operation_context="stage all changes",
            cwd=cwd,
        )

    def commit(
        self,
        cwd: Path,
        message: str,
        *,
        amend: bool,
        extra_args: Sequence[str],
    ) -> None:
        """Commit the index with the given message."""
        cmd = ["git", "commit"]
        if amend:
            cmd.append("--amend")
        cmd.extend(["-m", message, *extra_args])
        run_subprocess_with_context(
            cmd,
            operation_context="amend commit" if amend else "create commit",
            cwd=cwd,
        )

    def stash_push(self, cwd: Path, message: str, *, extra_args: Sequence[str]) -> None:
        """Stash changes via git stash push -m."""
        run_subprocess_with_context(
            ["git", "stash", "push", "-m", message, *extra_args],
            operation_context="stash changes",
            cwd=cwd,
        )

    def fetch(self, cwd: Path, remote: str, branch: str) -> None:
        """Fetch a branch from a remote."""
        run_subprocess_with_context(
            ["git", "fetch", remote, branch],
            operation_context=f"fetch branch '{branch}' from remote '{remote}'",
            cwd=cwd,
        )

    def push(
        self,
        cwd: Path,
        remote: str,
        branch: str,
        *,
        set_upstream: bool,
        extra_args: Sequence[str],
    ) -> None:
        """Push a branch to a remote."""
        cmd = ["git", "push"]
        if set_upstream:
            cmd.append("--set-upstream")
        cmd.extend([remote, branch, *extra_args])
        run_subprocess_with_context(
            cmd,
            operation_context=f"push branch '{branch}' to remote '{remote}'",
            cwd=cwd,
        )
