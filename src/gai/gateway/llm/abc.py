"""Abstract base class for text generation."""

from abc import ABC, abstractmethod

from gai.gateway.llm.types import CompletionRequest


class TextGenerator(ABC):
    """Abstract interface over a chat-completion text generation service."""

    @abstractmethod
    def complete(self, request: CompletionRequest) -> list[str]:
        """Run one chat completion.

        Args:
            request: Model, ordered messages and sampling parameters

        Returns:
            The text of every candidate completion, in the order returned.
            May be empty if the service produced no candidates.

        Raises:
            GenerationError: If the call fails at the transport or API level
        """
        ...
