"""Requirement checks run before any action touches the repository."""

import logging

from gai.core.context import GaiContext
from gai.core.errors import PreconditionError

logger = logging.getLogger(__name__)

REQUIRED_PERMISSIONS = frozenset({"ADMIN", "MAINTAIN", "WRITE"})


def check_requirements(ctx: GaiContext) -> None:
    """Verify API key, tools, GitHub authentication and repository permission.

    Raises:
        PreconditionError: On the first requirement that is not met
    """
    if not ctx.config.api_key:
        raise PreconditionError("OPENAI_API_KEY environment variable not set")

    if ctx.shell.get_installed_tool_path("git") is None:
        raise PreconditionError("Git not in PATH")

    if ctx.shell.get_installed_tool_path("gh") is None:
        raise PreconditionError("GitHub CLI not in PATH")

    authenticated, auth_output = ctx.github.check_auth_status()
    if not authenticated:
        logger.debug("gh auth status output: %s", auth_output)
        raise PreconditionError("GitHub CLI not authenticated. Run 'gh auth login' first.")

    permission = ctx.github.get_viewer_permission(ctx.cwd)
    logger.debug("Repository viewer permission: %s", permission)
    if permission not in REQUIRED_PERMISSIONS:
        raise PreconditionError(
            "You do not have write permissions to this repository. "
            f"Permission: {permission or 'unknown'}"
        )
