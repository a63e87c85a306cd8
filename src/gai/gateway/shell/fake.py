"""Fake tool lookup for testing."""

from gai.gateway.shell.abc import Shell


class FakeShell(Shell):
    """In-memory fake with a fixed set of installed tools.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, installed_tools: dict[str, str] | None = None) -> None:
        """Create FakeShell.

        Args:
            installed_tools: Mapping of tool name -> path. Defaults to git and gh
                being installed.
        """
        if installed_tools is None:
            installed_tools = {"git": "/usr/bin/git", "gh": "/usr/bin/gh"}
        self._installed_tools = installed_tools

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._installed_tools.get(tool_name)
