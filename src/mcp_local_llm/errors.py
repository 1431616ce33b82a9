"""Exception types raised while dispatching tool calls.

Every exception here is caught once by the dispatcher and turned into an
error envelope; none of them reach the transport layer.
"""

from typing import Any


class LocalLLMError(Exception):
    """Base class for all mcp-local-llm errors."""


class UnknownToolError(LocalLLMError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolValidationError(LocalLLMError):
    """Raised when tool arguments don't match the tool's input schema.

    Attributes:
        tool: Name of the tool being called
        errors: Error dicts as produced by pydantic's ValidationError.errors()
    """

    def __init__(self, tool: str, errors: list[dict[str, Any]]):
        self.tool = tool
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(part) for part in error.get('loc', ())) or 'arguments'}: "
            f"{error.get('msg', 'invalid value')}"
            for error in errors
        )
        super().__init__(f"Invalid arguments for {tool}: {details}")


class BackendUnreachableError(LocalLLMError):
    """Raised when the backend can't be reached (refused, timeout, DNS)."""


class BackendError(LocalLLMError):
    """Raised when the backend answers with an error status or a malformed body."""
