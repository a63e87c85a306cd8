"""Types for chat-style text generation requests."""

from dataclasses import dataclass
from typing import Literal

ChatRole = Literal["system", "user"]


@dataclass(frozen=True)
class ChatMessage:
    """One message of a chat completion request."""

    role: ChatRole
    content: str


@dataclass(frozen=True)
class CompletionRequest:
    """A single chat completion call with its sampling parameters."""

    model: str
    messages: tuple[ChatMessage, ...]
    max_tokens: int
    temperature: float
    top_p: float
