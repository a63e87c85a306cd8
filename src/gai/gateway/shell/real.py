"""Production tool lookup using shutil.which."""

import shutil

from gai.gateway.shell.abc import Shell


class RealShell(Shell):
    """Looks tools up on the current PATH."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)
