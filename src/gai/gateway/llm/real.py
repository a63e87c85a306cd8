"""Production text generation using the OpenAI chat completions API."""

import logging

from openai import OpenAI, OpenAIError

from gai.core.errors import GenerationError
from gai.gateway.llm.abc import TextGenerator
from gai.gateway.llm.types import CompletionRequest

logger = logging.getLogger(__name__)


class OpenAITextGenerator(TextGenerator):
    """TextGenerator backed by the OpenAI Python client.

    The client is created on first use so that commands which never generate
    text (and the preflight that reports a missing key) work without a key.
    """

    def __init__(self, *, api_key: str | None, base_url: str | None = None) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key, base_url=self._base_url)
        return self._client

    def complete(self, request: CompletionRequest) -> list[str]:
        logger.debug(
            "Sending chat completion: model=%s max_tokens=%d temperature=%s top_p=%s",
            request.model,
            request.max_tokens,
            request.temperature,
            request.top_p,
        )
        try:
            response = self._get_client().chat.completions.create(
                model=request.model,
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                top_p=request.top_p,
                messages=[
                    {"role": message.role, "content": message.content}
                    for message in request.messages
                ],
            )
        except OpenAIError as e:
            raise GenerationError(f"OpenAI API request failed: {e}") from e

        return [choice.message.content or "" for choice in response.choices]
