"""Abstract base class for tool availability checks."""

from abc import ABC, abstractmethod


class Shell(ABC):
    """Abstract interface for locating external tools."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Check whether a tool is on PATH.

        Args:
            tool_name: Executable name (e.g. "git", "gh")

        Returns:
            Absolute path to the executable, or None if not found
        """
        ...
