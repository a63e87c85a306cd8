"""Abstract base class for pull request host operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class PullRequestHost(ABC):
    """Abstract interface for the pull request operations gai needs.

    All implementations (real and fake) must implement this interface.
    """

    # --- PR operations ---

    @abstractmethod
    def list_pr_numbers_for_branch(self, repo_root: Path, branch: str) -> list[int]:
        """List open pull requests whose head is the given branch.

        Args:
            repo_root: Repository root directory
            branch: Head branch name

        Returns:
            PR numbers in the order the host reports them (empty if none)

        Raises:
            ExternalCommandError: If the host CLI fails
        """
        ...

    @abstractmethod
    def create_draft_pr(self, repo_root: Path, branch: str, title: str, body: str) -> None:
        """Create a draft pull request for a branch.

        Args:
            repo_root: Repository root directory
            branch: Head branch for the PR
            title: PR title
            body: PR body (markdown)

        Raises:
            ExternalCommandError: If the host CLI fails
        """
        ...

    @abstractmethod
    def update_pr_body(self, repo_root: Path, pr_number: int, body: str) -> None:
        """Replace the body of an existing pull request.

        Raises:
            ExternalCommandError: If the host CLI fails
        """
        ...

    @abstractmethod
    def open_pr_in_browser(self, repo_root: Path, pr_number: int) -> None:
        """Open a pull request in the web browser.

        Raises:
            ExternalCommandError: If the host CLI fails
        """
        ...

    # --- Preflight queries ---

    @abstractmethod
    def check_auth_status(self) -> tuple[bool, str | None]:
        """Check whether the host CLI is authenticated.

        Returns:
            Tuple of (is_authenticated, combined CLI output for diagnostics)
        """
        ...

    @abstractmethod
    def get_viewer_permission(self, repo_root: Path) -> str | None:
        """Get the authenticated user's permission on the repository.

        Returns:
            Permission string such as "ADMIN", "MAINTAIN", "WRITE" or "READ",
            or None if it could not be determined
        """
        ...
