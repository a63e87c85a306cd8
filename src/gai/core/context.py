"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gai.core.config import (
    DEFAULT_MAIN_BRANCH,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_REMOTE,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    GaiConfig,
)
from gai.core.prompts import load_prompts
from gai.gateway.editor.abc import Editor
from gai.gateway.editor.fake import FakeEditor
from gai.gateway.editor.real import RealEditor
from gai.gateway.git.abc import Git
from gai.gateway.git.fake import FakeGit
from gai.gateway.git.real import RealGit
from gai.gateway.github.abc import PullRequestHost
from gai.gateway.github.fake import FakePullRequestHost
from gai.gateway.github.real import RealPullRequestHost
from gai.gateway.llm.abc import TextGenerator
from gai.gateway.llm.fake import FakeTextGenerator
from gai.gateway.llm.real import OpenAITextGenerator
from gai.gateway.shell.abc import Shell
from gai.gateway.shell.fake import FakeShell
from gai.gateway.shell.real import RealShell


@dataclass(frozen=True)
class GaiContext:
    """Immutable context holding all dependencies for gai operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: PullRequestHost
    text_generator: TextGenerator
    editor: Editor
    shell: Shell
    config: GaiConfig
    cwd: Path  # Current working directory at CLI invocation

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: PullRequestHost | None = None,
        text_generator: TextGenerator | None = None,
        editor: Editor | None = None,
        shell: Shell | None = None,
        config: GaiConfig | None = None,
        cwd: Path | None = None,
    ) -> "GaiContext":
        """Create test context with optional pre-configured integration classes.

        Any unspecified integration is an empty fake; the default config has
        an API key set and built-in prompts.

        Example:
            >>> git = FakeGit(staged_diff="diff --git a/x b/x")
            >>> llm = FakeTextGenerator(outputs=["✨ [feat]: add x"])
            >>> ctx = GaiContext.for_test(git=git, text_generator=llm)
        """
        return GaiContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakePullRequestHost(),
            text_generator=text_generator if text_generator is not None else FakeTextGenerator(),
            editor=editor if editor is not None else FakeEditor(),
            shell=shell if shell is not None else FakeShell(),
            config=config if config is not None else config_for_test(),
            cwd=cwd if cwd is not None else Path("/test/repo"),
        )


def config_for_test(
    *,
    api_key: str | None = "test-key",
    main_branch: str = DEFAULT_MAIN_BRANCH,
    remote: str = DEFAULT_REMOTE,
    config_dir: Path | None = None,
) -> GaiConfig:
    """Build a GaiConfig with defaults suitable for tests."""
    resolved_config_dir = config_dir if config_dir is not None else Path("/test/config/gai")
    return GaiConfig(
        api_key=api_key,
        model=DEFAULT_MODEL,
        max_tokens=DEFAULT_MAX_TOKENS,
        temperature=DEFAULT_TEMPERATURE,
        top_p=DEFAULT_TOP_P,
        main_branch=main_branch,
        remote=remote,
        editor="vim",
        verbose=False,
        config_dir=resolved_config_dir,
        prompts=load_prompts(resolved_config_dir),
    )


def create_context(config: GaiConfig, cwd: Path) -> GaiContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        config: Configuration loaded from environment and config.toml
        cwd: Working directory the command runs against
    """
    return GaiContext(
        git=RealGit(),
        github=RealPullRequestHost(),
        text_generator=OpenAITextGenerator(api_key=config.api_key),
        editor=RealEditor(config.editor),
        shell=RealShell(),
        config=config,
        cwd=cwd,
    )
