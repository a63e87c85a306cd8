"""Abstract base class for Git operations."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class Git(ABC):
    """Abstract interface for the git operations gai needs.

    All implementations (real and fake) must implement this interface.
    Query operations have no side effects. Mutation operations raise
    ExternalCommandError when git exits non-zero.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        """Get the working tree diff.

        Args:
            cwd: Working directory
            staged: If True, return the index diff (git diff --cached),
                otherwise the unstaged diff (git diff)

        Returns:
            Raw diff text, empty if there are no changes
        """
        ...

    @abstractmethod
    def get_diff_to_branch(self, cwd: Path, base_ref: str) -> str:
        """Get the diff of HEAD against the merge base with base_ref.

        Args:
            cwd: Working directory
            base_ref: Ref to compare against (e.g. "origin/main")

        Returns:
            Raw diff text of `git diff base_ref...HEAD`
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str:
        """Get the name of the checked-out branch.

        Returns:
            Branch name ("HEAD" when detached)
        """
        ...

    @abstractmethod
    def get_commit_subjects(self, cwd: Path, base_ref: str, head: str) -> list[str]:
        """Get subjects of non-merge commits in head but not in base_ref.

        Args:
            cwd: Working directory
            base_ref: Remote-tracking ref that bounds the range (e.g. "origin/main")
            head: Branch or ref to list commits from

        Returns:
            Commit subject lines, newest first
        """
        ...

    @abstractmethod
    def get_last_commit_subject(self, cwd: Path) -> str | None:
        """Get the subject of the HEAD commit, or None if there are no commits."""
        ...

    @abstractmethod
    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Get the upstream tracking ref of the current branch.

        Returns:
            Upstream ref such as "origin/feature", or None if not configured
        """
        ...

    @abstractmethod
    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        """Count commits reachable from HEAD but not from base_ref."""
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def stage_all(self, cwd: Path) -> None:
        """Stage every change in the working tree (git add .)."""
        ...

    @abstractmethod
    def commit(
        self,
        cwd: Path,
        message: str,
        *,
        amend: bool,
        extra_args: Sequence[str],
    ) -> None:
        """Create a commit from the index.

        Args:
            cwd: Working directory
            message: Commit message
            amend: If True, amend HEAD instead of creating a new commit
            extra_args: Operator-supplied flags appended verbatim
        """
        ...

    @abstractmethod
    def stash_push(self, cwd: Path, message: str, *, extra_args: Sequence[str]) -> None:
        """Stash working tree changes under the given message.

        Args:
            cwd: Working directory
            message: Stash message
            extra_args: Operator-supplied flags appended verbatim
        """
        ...

    @abstractmethod
    def fetch(self, cwd: Path, remote: str, branch: str) -> None:
        """Fetch a single branch from a remote."""
        ...

    @abstractmethod
    def push(
        self,
        cwd: Path,
        remote: str,
        branch: str,
        *,
        set_upstream: bool,
        extra_args: Sequence[str],
    ) -> None:
        """Push a branch to a remote.

        Args:
            cwd: Working directory
            remote: Remote name (e.g. "origin")
            branch: Branch to push
            set_upstream: If True, pass --set-upstream
            extra_args: Operator-supplied flags appended verbatim
        """
        ...
