"""Abstract base class for launching an interactive editor."""

from abc import ABC, abstractmethod
from pathlib import Path


class Editor(ABC):
    """Abstract interface for running the operator's editor on a file."""

    @abstractmethod
    def edit_file(self, path: Path) -> int:
        """Open the file in the editor and block until the editor exits.

        The editor inherits the operator's terminal (stdin, stdout, stderr).

        Args:
            path: File to edit

        Returns:
            The editor's exit code

        Raises:
            OSError: If the editor cannot be launched
        """
        ...
