"""Type definitions for the chat-completion backend.

This module contains the dataclasses that describe a single request to an
OpenAI-compatible chat-completion endpoint.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

Role = Literal["system", "user"]


@dataclass(frozen=True)
class ChatMessage:
    """A single role-tagged message sent to the backend.

    Attributes:
        role: Either "system" or "user"
        content: Fully materialized message text
    """

    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class CompletionRequest:
    """One self-contained chat-completion request.

    Requests are built fresh for every tool call and never reused, so two
    builders given the same inputs produce equal requests.

    Attributes:
        model: Model identifier (e.g., "qwen2.5-coder:7b")
        messages: Ordered messages; a system message, if any, comes first
        max_tokens: Upper bound on generated tokens
        temperature: Sampling temperature
    """

    model: str
    messages: tuple[ChatMessage, ...] = field(default_factory=tuple)
    max_tokens: int = 2048
    temperature: float = 0.7

    def to_payload(self) -> dict[str, Any]:
        """Render the request as keyword arguments for chat.completions.create."""
        return {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
