"""Chat-completion backend client and request types.

This package provides the async client used to talk to a locally hosted,
OpenAI-compatible inference server.
"""

from mcp_local_llm.backend.client import BackendClient
from mcp_local_llm.backend.types import ChatMessage, CompletionRequest

__all__ = ["BackendClient", "ChatMessage", "CompletionRequest"]
