"""Production implementation of pull request host operations."""

from pathlib import Path

from gai.core.errors import GaiError
from gai.gateway.github.abc import PullRequestHost
from gai.gateway.github.parsing import parse_pr_numbers, parse_viewer_permission
from gai.subprocess_utils import run_subprocess_with_context


class RealPullRequestHost(PullRequestHost):
    """Production implementation using gh CLI.

    All pull request operations execute actual gh commands via subprocess.
    """

    # --- PR operations ---

    def list_pr_numbers_for_branch(self, repo_root: Path, branch: str) -> list[int]:
        """List open PRs for a head branch using gh pr list."""
        result = run_subprocess_with_context(
            ["gh", "pr", "list", "--head", branch, "--json", "number"],
            operation_context=f"check existing pull requests for branch '{branch}'",
            cwd=repo_root,
        )
        try:
            return parse_pr_numbers(result.stdout)
        except ValueError as e:
            raise GaiError(f"Failed to parse PR list JSON: {e}") from e

    def create_draft_pr(self, repo_root: Path, branch: str, title: str, body: str) -> None:
        """Create a draft PR using gh pr create."""
        run_subprocess_with_context(
            [
                "gh",
                "pr",
                "create",
                "--draft",
                "--head",
                branch,
                "--title",
                title,
                "--body",
                body,
            ],
            operation_context=f"create pull request for branch '{branch}'",
            cwd=repo_root,
        )

    def update_pr_body(self, repo_root: Path, pr_number: int, body: str) -> None:
        """Update a PR body using gh pr edit."""
        run_subprocess_with_context(
            ["gh", "pr", "edit", str(pr_number), "--body", body],
            operation_context=f"update pull request #{pr_number}",
            cwd=repo_root,
        )

    def open_pr_in_browser(self, repo_root: Path, pr_number: int) -> None:
        """Open a PR using gh pr view --web."""
        run_subprocess_with_context(
            ["gh", "pr", "view", str(pr_number), "--web"],
            operation_context=f"open pull request #{pr_number} in browser",
            cwd=repo_root,
        )

    # --- Preflight queries ---

    def check_auth_status(self) -> tuple[bool, str | None]:
        """Run gh auth status; it exits non-zero when not authenticated."""
        result = run_subprocess_with_context(
            ["gh", "auth", "status"],
            operation_context="check GitHub authentication status",
            check=False,
        )
        output = result.stdout + result.stderr
        return (result.returncode == 0, output)

    def get_viewer_permission(self, repo_root: Path) -> str | None:
        """Query viewerPermission via gh repo view."""
        result = run_subprocess_with_context(
            ["gh", "repo", "view", "--json", "viewerPermission"],
            operation_context="check repository permissions",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            return None
        return parse_viewer_permission(result.stdout)
