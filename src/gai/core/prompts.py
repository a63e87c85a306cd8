"""Prompt texts sent to the text generation service.

Each prompt has a built-in default that can be overridden by a markdown file
of the same purpose in the gai config directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTIONS_FILE = "systemInstructions.md"
PR_TITLE_INSTRUCTIONS_FILE = "prTitleFormattingInstructions.md"
PR_BODY_INSTRUCTIONS_FILE = "prBodyFormattingInstructions.md"
COMMIT_INSTRUCTIONS_FILE = "commitFormattingInstructions.md"

DEFAULT_SYSTEM_INSTRUCTIONS = """
You are an expert software developer who helps generate concise, high-quality
Git-related messages. Provide brief, clear outputs with an imperative mood.
Avoid disclaimers, personal references, or mention of AI.
Stay consistent with the style across this repository.

Every message must use exactly one of the allowed Gitmojis from this set:
- 🎨 → Improve structure / format of the code
- ⚡️ → Improve performance
- 🔥 → Remove code or files
- 🐛 → Fix a bug
- 🚑️ → Critical hotfix
- ✨ → Introduce new features
- 📝 → Add or update documentation
- 🚀 → Deploy stuff
- 💄 → Add or update the UI and style files
- 🎉 → Begin a project
- ✅ → Add, update, or pass tests
- 🔒️ → Fix security or privacy issues
- 🔐 → Add or update secrets
- 🔖 → Release / Version tags
- 🚨 → Fix compiler / linter warnings
- 🚧 → Work in progress
- 💚 → Fix CI Build
- ⬇️ → Downgrade dependencies
- ⬆️ → Upgrade dependencies
- 📌 → Pin dependencies to specific versions
- 👷 → Add or update CI build system
- 📈 → Add or update analytics or track code
- ♻️ → Refactor code
- ➕ → Add a dependency
- ➖ → Remove a dependency
- 🔧 → Add or update configuration files
- 🔨 → Add or update development scripts
- 🌐 → Internationalization and localization
- ✏️ → Fix typos
- 💩 → Write bad code that needs to be improved
- ⏪️ → Revert changes
- 🔀 → Merge branches
- 📦️ → Add or update compiled files or packages
- 👽️ → Update code due to external API changes
- 🚚 → Move or rename resources (e.g.: files, paths, routes)
- 💥 → Introduce breaking changes
- 🍱 → Add or update assets
- ♿️ → Improve accessibility
- 💡 → Add or update comments in source code
- 🍻 → Write code drunkenly
- 💬 → Add or update text and literals
- 🗃️ → Perform database related changes
- 🔊 → Add or update logs
- 🔇 → Remove logs
- 👥 → Add or update contributor(s)
- 🚸 → Improve user experience / usability
- 🏗️ → Make architectural changes
- 📱 → Work on responsive design
- 🤡 → Mock things
- 🥚 → Add or update an easter egg
- 🙈 → Add or update a .gitignore file
- 📸 → Add or update snapshots
- ⚗️ → Perform experiments
- 🔍️ → Improve SEO
- 🏷️ → Add or update types
- 🌱 → Add or update seed files
- 🚩 → Add, update, or remove feature flags
- 🥅 → Catch errors
- 💫 → Add or update animations and transitions
- 🗑️ → Deprecate code that needs to be cleaned up
- 🛂 → Work on code related to authorization, roles and permissions
- 🩹 → Simple fix for a non-critical issue
- 🧐 → Data exploration/inspection
- ⚰️ → Remove dead code
- 🧪 → Add a failing test
- 👔 → Add or update business logic
- 🩺 → Add or update healthcheck
- 🧱 → Infrastructure related changes
- 🧑‍💻 → Improve developer experience
- 💸 → Add sponsorships or money related infrastructure
- 🧵 → Add or update code related to multithreading or concurrency
- 🦺 → Add or update code related to validation
"""

DEFAULT_PR_TITLE_INSTRUCTIONS = """
As an expert software developer, generate a clear pull request title. Requirements:
- If JIRA ticket number is provided, place it at the start in brackets
- Summarize the main purpose
- Keep under 140 characters
- Use imperative mood
- Do not end with a period
- Must be a complete thought
- Maintain consistency across all PR titles
- Do not add disclaimers or AI references
- Keep style aligned with repository standards

OUTPUT FORMAT:
[<ticket number>] <pull request title>
"""

DEFAULT_PR_BODY_INSTRUCTIONS = """
As an expert software developer, write a concise Pull Request body. Requirements:
- Summarize the main purpose in a few sentences, imperative mood
- Include a bullet list of key changes
- If a JIRA ticket is present, link it under "Ticket links"
- Keep sentences short
- Maintain style consistency: do not add disclaimers or AI references

OUTPUT FORMAT:
### Description
(Summary of changes in a few sentences)

### Changes
* Bullet points of key changes

### Ticket links // Skip if no JIRA Ticket found
* [JIRA-0000]
"""

DEFAULT_COMMIT_INSTRUCTIONS = """
As an expert developer, generate a Git commit message following Conventional Commits:
Requirements:
- Use the format: <gitmoji> [type]: <description>
- The entire line must stay under 80 characters
- Use imperative mood (e.g., "add" not "added")
- Do not end with a period
- Condense multiple changes into a single descriptive line if needed
- Do not add disclaimers or references to yourself or AI
- Output exactly one line

OUTPUT FORMAT:
<gitmoji> [type]: <description>
"""


@dataclass(frozen=True)
class Prompt:
    """A prompt text and where it came from.

    Attributes:
        name: Short label shown by `gai instructions`
        path: Override file location in the config directory
        text: Effective prompt text
        overridden: True if text was read from path
    """

    name: str
    path: Path
    text: str
    overridden: bool


@dataclass(frozen=True)
class PromptSet:
    """The four prompts used by gai actions."""

    system: Prompt
    pr_title: Prompt
    pr_body: Prompt
    commit: Prompt

    def all(self) -> tuple[Prompt, ...]:
        return (self.system, self.pr_title, self.pr_body, self.commit)


def load_prompt(name: str, path: Path, default_text: str) -> Prompt:
    """Read a prompt override from path, falling back to the default.

    An unreadable override is logged and ignored rather than failing the run.
    """
    if not path.exists():
        logger.debug("Prompt file not found at %s. Using default.", path)
        return Prompt(name=name, path=path, text=default_text, overridden=False)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Error reading prompt file at %s: %s. Using default.", path, e)
        return Prompt(name=name, path=path, text=default_text, overridden=False)

    logger.debug("Loaded prompt from %s", path)
    return Prompt(name=name, path=path, text=text, overridden=True)


def load_prompts(config_dir: Path) -> PromptSet:
    """Load all prompts, honoring overrides found in config_dir."""
    return PromptSet(
        system=load_prompt(
            "system", config_dir / SYSTEM_INSTRUCTIONS_FILE, DEFAULT_SYSTEM_INSTRUCTIONS
        ),
        pr_title=load_prompt(
            "pr-title", config_dir / PR_TITLE_INSTRUCTIONS_FILE, DEFAULT_PR_TITLE_INSTRUCTIONS
        ),
        pr_body=load_prompt(
            "pr-body", config_dir / PR_BODY_INSTRUCTIONS_FILE, DEFAULT_PR_BODY_INSTRUCTIONS
        ),
        commit=load_prompt(
            "commit", config_dir / COMMIT_INSTRUCTIONS_FILE, DEFAULT_COMMIT_INSTRUCTIONS
        ),
    )
