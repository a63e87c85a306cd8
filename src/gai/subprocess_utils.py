"""Subprocess helpers shared by the git and gh gateways."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from gai.core.errors import ExternalCommandError

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    *,
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command, capturing output, and raise with context on failure.

    Args:
        cmd: Command and arguments to execute
        operation_context: Description of the operation, used in error messages
            (e.g. "push branch 'feature' to remote 'origin'")
        cwd: Working directory for the command
        check: If True, raise ExternalCommandError on non-zero exit

    Returns:
        The completed process with text stdout/stderr

    Raises:
        ExternalCommandError: If check is True and the command exits non-zero,
            or if the executable cannot be found
    """
    logger.debug("Running command: %s", " ".join(cmd))
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        # Same status a shell reports for a missing executable
        raise ExternalCommandError(
            cmd=cmd,
            returncode=127,
            output=str(e),
            operation_context=operation_context,
        ) from e

    if check and result.returncode != 0:
        raise ExternalCommandError(
            cmd=cmd,
            returncode=result.returncode,
            output=result.stdout + result.stderr,
            operation_context=operation_context,
        )
    return result
