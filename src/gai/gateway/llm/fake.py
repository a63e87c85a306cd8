"""Fake text generation for testing."""

from gai.gateway.llm.abc import TextGenerator
from gai.gateway.llm.types import CompletionRequest


class FakeTextGenerator(TextGenerator):
    """In-memory fake that returns scripted completions.

    Constructor Injection:
    - outputs: one entry per expected call, consumed in order. Each entry is
      the list of candidate texts for that call, or a single string as
      shorthand for one candidate.
    - error: Exception raised from every call instead of returning output

    Mutation Tracking:
    - requests: every CompletionRequest received
    """

    def __init__(
        self,
        *,
        outputs: list[str | list[str]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._outputs = list(outputs or [])
        self._error = error
        self._requests: list[CompletionRequest] = []

    def complete(self, request: CompletionRequest) -> list[str]:
        self._requests.append(request)
        if self._error is not None:
            raise self._error
        if not self._outputs:
            return []
        output = self._outputs.pop(0)
        if isinstance(output, str):
            return [output]
        return list(output)

    @property
    def requests(self) -> list[CompletionRequest]:
        return self._requests
