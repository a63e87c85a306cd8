"""Generate Git and pull request text with the text generation service.

A request is three ordered chat messages: the system instructions, the
task-specific formatting instructions, and an input block describing the
change (ticket, branch, optional PR title, commit subjects and diff).
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from gai.core.config import GaiConfig
from gai.core.errors import GenerationError
from gai.gateway.llm.abc import TextGenerator
from gai.gateway.llm.types import ChatMessage, CompletionRequest
from gai.output import spinner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """Prompt parts for a single generation call."""

    system_instructions: str
    task_instructions: str
    input_block: str

    def to_messages(self) -> tuple[ChatMessage, ...]:
        return (
            ChatMessage(role="system", content=self.system_instructions),
            ChatMessage(role="user", content=self.task_instructions),
            ChatMessage(role="user", content=self.input_block),
        )


def build_input_block(
    *,
    ticket: str = "",
    branch: str = "",
    pr_title: str = "",
    commit_subjects: Sequence[str] = (),
    diff: str = "",
) -> str:
    """Assemble the INPUT block describing the change.

    Fields that do not apply to an action are left empty rather than
    omitted, so the model always sees the same layout.
    """
    return (
        "INPUT:\n"
        f"TICKET NUMBER: {ticket}\n"
        f"BRANCH NAME:   {branch}\n"
        f"PULL REQUEST TITLE: {pr_title}\n"
        "COMMIT MESSAGES LIST:\n"
        f"{chr(10).join(commit_subjects)}\n"
        "GIT DIFFERENCE TO HEAD:\n"
        f"{diff}\n"
    )


class MessageGenerator:
    """Turns a GenerationRequest into candidate text."""

    def __init__(self, text_generator: TextGenerator, config: GaiConfig) -> None:
        self._text_generator = text_generator
        self._config = config

    def generate(self, request: GenerationRequest) -> str:
        """Run one completion and return the first candidate.

        Returns:
            Raw candidate text (may be empty if the model returned no content)

        Raises:
            GenerationError: If the service call fails or returns no candidates
        """
        completion_request = CompletionRequest(
            model=self._config.model,
            messages=request.to_messages(),
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            top_p=self._config.top_p,
        )
        logger.debug(
            "Requesting completion: model=%s max_tokens=%d input_chars=%d",
            completion_request.model,
            completion_request.max_tokens,
            len(request.input_block),
        )

        with spinner("🤖 Generating AI message"):
            candidates = self._text_generator.complete(completion_request)

        if not candidates:
            raise GenerationError("No response from the text generation service")

        logger.debug("Received %d candidate(s)", len(candidates))
        return candidates[0]
