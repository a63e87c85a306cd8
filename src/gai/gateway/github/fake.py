"""Fake pull request host operations for testing."""

from dataclasses import dataclass
from pathlib import Path

from gai.gateway.github.abc import PullRequestHost


@dataclass(frozen=True)
class CreatedPR:
    """Record of a create_draft_pr() call."""

    number: int
    branch: str
    title: str
    body: str


class FakePullRequestHost(PullRequestHost):
    """In-memory fake implementation of pull request host operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Created PRs are added to the
    branch's PR list so a follow-up lookup finds them, like the real host.
    """

    def __init__(
        self,
        *,
        prs: dict[str, list[int]] | None = None,
        next_pr_number: int = 1,
        authenticated: bool = True,
        viewer_permission: str | None = "WRITE",
        list_raises: Exception | None = None,
        list_raises_after_create: Exception | None = None,
        create_raises: Exception | None = None,
        update_raises: Exception | None = None,
        view_raises: Exception | None = None,
    ) -> None:
        """Create FakePullRequestHost with pre-configured state.

        Args:
            prs: Mapping of head branch -> open PR numbers
            next_pr_number: Number assigned to the next created PR
            authenticated: Whether check_auth_status() reports success
            viewer_permission: Value returned by get_viewer_permission()
            list_raises: Exception to raise from every list_pr_numbers_for_branch() call
            list_raises_after_create: Exception to raise from lookups made after
                a PR has been created
            create_raises: Exception to raise when create_draft_pr() is called
            update_raises: Exception to raise when update_pr_body() is called
            view_raises: Exception to raise when open_pr_in_browser() is called
        """
        self._prs = {branch: list(numbers) for branch, numbers in (prs or {}).items()}
        self._next_pr_number = next_pr_number
        self._authenticated = authenticated
        self._viewer_permission = viewer_permission
        self._list_raises = list_raises
        self._list_raises_after_create = list_raises_after_create
        self._create_raises = create_raises
        self._update_raises = update_raises
        self._view_raises = view_raises

        # Mutation tracking
        self._list_calls: list[str] = []
        self._created_prs: list[CreatedPR] = []
        self._updated_pr_bodies: list[tuple[int, str]] = []
        self._viewed_prs: list[int] = []

    # --- PR operations ---

    def list_pr_numbers_for_branch(self, repo_root: Path, branch: str) -> list[int]:
        self._list_calls.append(branch)
        if self._list_raises is not None:
            raise self._list_raises
        if self._created_prs and self._list_raises_after_create is not None:
            raise self._list_raises_after_create
        return list(self._prs.get(branch, []))

    def create_draft_pr(self, repo_root: Path, branch: str, title: str, body: str) -> None:
        if self._create_raises is not None:
            raise self._create_raises
        number = self._next_pr_number
        self._next_pr_number += 1
        self._created_prs.append(CreatedPR(number=number, branch=branch, title=title, body=body))
        self._prs.setdefault(branch, []).append(number)

    def update_pr_body(self, repo_root: Path, pr_number: int, body: str) -> None:
        if self._update_raises is not None:
            raise self._update_raises
        self._updated_pr_bodies.append((pr_number, body))

    def open_pr_in_browser(self, repo_root: Path, pr_number: int) -> None:
        if self._view_raises is not None:
            raise self._view_raises
        self._viewed_prs.append(pr_number)

    # --- Preflight queries ---

    def check_auth_status(self) -> tuple[bool, str | None]:
        if not self._authenticated:
            return (False, "You are not logged into any GitHub hosts.")
        return (True, "Logged in to github.com as test-user")

    def get_viewer_permission(self, repo_root: Path) -> str | None:
        return self._viewer_permission

    # --- Mutation tracking ---

    @property
    def list_calls(self) -> list[str]:
        """Branches passed to list_pr_numbers_for_branch(), in call order."""
        return self._list_calls

    @property
    def created_prs(self) -> list[CreatedPR]:
        return self._created_prs

    @property
    def updated_pr_bodies(self) -> list[tuple[int, str]]:
        """(pr_number, body) for every update_pr_body() call."""
        return self._updated_pr_bodies

    @property
    def viewed_prs(self) -> list[int]:
        return self._viewed_prs
