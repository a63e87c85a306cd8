"""Error taxonomy for gai actions.

Every failure that aborts an action derives from GaiError so the CLI layer
can translate it into a single non-zero exit. Operator cancellation and
"nothing to do" outcomes are not errors; pipeline steps report them as
ActionStop values instead (see gai.core.actions).
"""

from collections.abc import Sequence


class GaiError(Exception):
    """Base class for failures that abort the current action."""


class PreconditionError(GaiError):
    """A requirement checked before the pipeline starts is not satisfied.

    Examples: missing API key, git or gh not on PATH, gh not authenticated,
    no write permission on the repository.
    """


class ConfigError(PreconditionError):
    """Configuration values could not be parsed."""


class ExternalCommandError(GaiError):
    """A git or gh subprocess exited non-zero.

    Attributes:
        cmd: The command that was executed
        returncode: Exit status of the process
        output: Combined stdout and stderr of the process
        operation_context: Human-readable description of what was attempted
    """

    def __init__(
        self,
        *,
        cmd: Sequence[str],
        returncode: int,
        output: str,
        operation_context: str,
    ) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.output = output
        self.operation_context = operation_context
        message = f"Failed to {operation_context} (exit code {returncode})"
        if output.strip():
            message += f"\nOutput: {output.strip()}"
        super().__init__(message)


class GenerationError(GaiError):
    """The text-generation call failed or returned no completions."""
