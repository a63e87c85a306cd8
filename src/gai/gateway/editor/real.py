"""Production editor launcher using subprocess."""

import logging
import shlex
import subprocess
from pathlib import Path

from gai.gateway.editor.abc import Editor

logger = logging.getLogger(__name__)


class RealEditor(Editor):
    """Runs the configured editor command with inherited stdio.

    The command may carry its own arguments (e.g. "code --wait"); the file
    path is appended as the last argument.
    """

    def __init__(self, command: str) -> None:
        self._command = command

    def edit_file(self, path: Path) -> int:
        argv = [*shlex.split(self._command), str(path)]
        logger.debug("Launching editor: %s", " ".join(argv))
        # No capture: the editor owns the terminal until it exits
        result = subprocess.run(argv, check=False)
        return result.returncode
