"""Fake implementation of Git operations for testing."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from gai.gateway.git.abc import Git


@dataclass(frozen=True)
class CommitRecord:
    """Record of a commit operation."""

    cwd: Path
    message: str
    amend: bool
    extra_args: tuple[str, ...]


@dataclass(frozen=True)
class StashRecord:
    """Record of a stash push operation."""

    cwd: Path
    message: str
    extra_args: tuple[str, ...]


@dataclass(frozen=True)
class PushRecord:
    """Record of a push operation."""

    cwd: Path
    remote: str
    branch: str
    set_upstream: bool
    extra_args: tuple[str, ...]


class FakeGit(Git):
    """In-memory fake implementation of Git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. The fake models a single
    repository, so cwd arguments are recorded but not used as lookup keys.

    Mutation Tracking:
    -----------------
    - stage_all_calls: Working directories passed to stage_all()
    - commits: CommitRecord per commit()
    - stashes: StashRecord per stash_push()
    - fetches: (remote, branch) per fetch()
    - pushes: PushRecord per push()
    """

    def __init__(
        self,
        *,
        staged_diff: str = "",
        unstaged_diff: str = "",
        current_branch: str = "feature",
        commit_subjects: dict[tuple[str, str], list[str]] | None = None,
        branch_diffs: dict[str, str] | None = None,
        last_commit_subject: str | None = None,
        upstream_branch: str | None = None,
        commits_ahead: dict[str, int] | None = None,
        stage_all_raises: Exception | None = None,
        commit_raises: Exception | None = None,
        stash_raises: Exception | None = None,
        fetch_raises: Exception | None = None,
        push_raises: Exception | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            staged_diff: Text returned by get_diff(staged=True)
            unstaged_diff: Text returned by get_diff(staged=False)
            current_branch: Branch returned by get_current_branch()
            commit_subjects: Mapping of (base_ref, head) -> commit subjects
            branch_diffs: Mapping of base_ref -> diff returned by get_diff_to_branch()
            last_commit_subject: Subject returned by get_last_commit_subject()
            upstream_branch: Ref returned by get_upstream_branch()
            commits_ahead: Mapping of base_ref -> count returned by count_commits_ahead()
            stage_all_raises: Exception to raise when stage_all() is called
            commit_raises: Exception to raise when commit() is called
            stash_raises: Exception to raise when stash_push() is called
            fetch_raises: Exception to raise when fetch() is called
            push_raises: Exception to raise when push() is called
        """
        self._staged_diff = staged_diff
        self._unstaged_diff = unstaged_diff
        self._current_branch = current_branch
        self._commit_subjects = commit_subjects if commit_subjects is not None else {}
        self._branch_diffs = branch_diffs if branch_diffs is not None else {}
        self._last_commit_subject = last_commit_subject
        self._upstream_branch = upstream_branch
        self._commits_ahead = commits_ahead if commits_ahead is not None else {}
        self._stage_all_raises = stage_all_raises
        self._commit_raises = commit_raises
        self._stash_raises = stash_raises
        self._fetch_raises = fetch_raises
        self._push_raises = push_raises

        self._stage_all_calls: list[Path] = []
        self._commits: list[CommitRecord] = []
        self._stashes: list[StashRecord] = []
        self._fetches: list[tuple[str, str]] = []
        self._pushes: list[PushRecord] = []
        self._diff_reads: list[bool] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        self._diff_reads.append(staged)
        return self._staged_diff if staged else self._unstaged_diff

    def get_diff_to_branch(self, cwd: Path, base_ref: str) -> str:
        return self._branch_diffs.get(base_ref, "")

    def get_current_branch(self, cwd: Path) -> str:
        return self._current_branch

    def get_commit_subjects(self, cwd: Path, base_ref: str, head: str) -> list[str]:
        return list(self._commit_subjects.get((base_ref, head), []))

    def get_last_commit_subject(self, cwd: Path) -> str | None:
        return self._last_commit_subject

    def get_upstream_branch(self, cwd: Path) -> str | None:
        return self._upstream_branch

    def count_commits_ahead(self, cwd: Path, base_ref: str) -> int:
        return self._commits_ahead.get(base_ref, 0)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def stage_all(self, cwd: Path) -> None:
        """Record the call and move unstaged changes into the index."""
        if self._stage_all_raises is not None:
            raise self._stage_all_raises
        self._stage_all_calls.append(cwd)
        if self._unstaged_diff:
            self._staged_diff = self._staged_diff + self._unstaged_diff
            self._unstaged_diff = ""

    def commit(
        self,
        cwd: Path,
        message: str,
        *,
        amend: bool,
        extra_args: Sequence[str],
    ) -> None:
        if self._commit_raises is not None:
            raise self._commit_raises
        self._commits.append(
            CommitRecord(cwd=cwd, message=message, amend=amend, extra_args=tuple(extra_args))
        )

    def stash_push(self, cwd: Path, message: str, *, extra_args: Sequence[str]) -> None:
        if self._stash_raises is not None:
            raise self._stash_raises
        self._stashes.append(StashRecord(cwd=cwd, message=message, extra_args=tuple(extra_args)))

    def fetch(self, cwd: Path, remote: str, branch: str) -> None:
        if self._fetch_raises is not None:
            raise self._fetch_raises
        self._fetches.append((remote, branch))

    def push(
        self,
        cwd: Path,
        remote: str,
        branch: str,
        *,
        set_upstream: bool,
        extra_args: Sequence[str],
    ) -> None:
        if self._push_raises is not None:
            raise self._push_raises
        self._pushes.append(
            PushRecord(
                cwd=cwd,
                remote=remote,
                branch=branch,
                set_upstream=set_upstream,
                extra_args=tuple(extra_args),
            )
        )

    # ============================================================================
    # Mutation Tracking
    # ============================================================================

    @property
    def staged_diff(self) -> str:
        """Current index diff, including changes moved there by stage_all()."""
        return self._staged_diff

    @property
    def stage_all_calls(self) -> list[Path]:
        return self._stage_all_calls

    @property
    def commits(self) -> list[CommitRecord]:
        return self._commits

    @property
    def stashes(self) -> list[StashRecord]:
        return self._stashes

    @property
    def fetches(self) -> list[tuple[str, str]]:
        return self._fetches

    @property
    def pushes(self) -> list[PushRecord]:
        return self._pushes

    @property
    def diff_reads(self) -> list[bool]:
        """The staged flag of every get_diff() call, in order."""
        return self._diff_reads
