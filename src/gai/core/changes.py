"""Change context gathered from the working repository."""

from dataclasses import dataclass
from pathlib import Path

from gai.gateway.git.abc import Git


@dataclass(frozen=True)
class ChangeSet:
    """Diff text and commit subjects captured for one invocation."""

    staged_diff: str
    unstaged_diff: str
    commit_subjects: tuple[str, ...]

    @property
    def has_changes(self) -> bool:
        return bool(self.staged_diff.strip() or self.unstaged_diff.strip())

    @property
    def combined_diff(self) -> str:
        """Staged and unstaged diffs joined, skipping empty parts."""
        parts = [diff for diff in (self.staged_diff, self.unstaged_diff) if diff.strip()]
        return "\n".join(parts)


def collect_working_changes(git: Git, cwd: Path) -> ChangeSet:
    """Read the staged and unstaged diffs of the working tree."""
    return ChangeSet(
        staged_diff=git.get_diff(cwd, staged=True),
        unstaged_diff=git.get_diff(cwd, staged=False),
        commit_subjects=(),
    )


def has_changes(git: Git, cwd: Path) -> bool:
    """Check whether the working tree has staged or unstaged changes."""
    return collect_working_changes(git, cwd).has_changes
