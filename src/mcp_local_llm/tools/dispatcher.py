"""Tool dispatch: validate, build, call the backend, wrap the reply.

This module provides the ToolDispatcher, which fulfills a tool call with
exactly one backend round-trip and converts every failure into an error
envelope. It never raises to the transport layer.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NamedTuple

from pydantic import ValidationError

from mcp_local_llm.backend.client import BackendClient
from mcp_local_llm.backend.types import CompletionRequest
from mcp_local_llm.config import DOCKER_MODEL_RUNNER_URL, LocalLLMSettings
from mcp_local_llm.errors import ToolValidationError, UnknownToolError
from mcp_local_llm.tools import builders, registry
from mcp_local_llm.tools.registry import ToolRegistry
from mcp_local_llm.tools.schemas import (
    ClassifyArguments,
    CompleteArguments,
    DraftArguments,
    ExtractArguments,
    StatusArguments,
    SummarizeArguments,
    ToolArguments,
    TransformArguments,
)

logger = logging.getLogger(__name__)

STATUS_HINT = (
    "Ensure Ollama is running: ollama serve. If using Docker Model Runner, "
    f"set LOCAL_LLM_BASE_URL to {DOCKER_MODEL_RUNNER_URL}"
)


@dataclass(frozen=True)
class ToolResult:
    """The reply envelope for a tool call.

    Attributes:
        content: Completion text, status JSON, or "Error: <message>"
        is_error: True when the call failed
    """

    content: str
    is_error: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "isError": self.is_error}


class ToolHandler(NamedTuple):
    """How a completion tool turns arguments into text."""

    arguments: type[ToolArguments]
    build: Callable[[Any, LocalLLMSettings], CompletionRequest]
    fallback: str


HANDLERS: dict[str, ToolHandler] = {
    registry.SUMMARIZE: ToolHandler(
        SummarizeArguments, builders.build_summarize, "Summary generation failed"
    ),
    registry.DRAFT: ToolHandler(
        DraftArguments, builders.build_draft, "Draft generation failed"
    ),
    registry.CLASSIFY: ToolHandler(
        ClassifyArguments, builders.build_classify, "Classification failed"
    ),
    registry.EXTRACT: ToolHandler(
        ExtractArguments, builders.build_extract, "Extraction failed"
    ),
    registry.TRANSFORM: ToolHandler(
        TransformArguments, builders.build_transform, "Transformation failed"
    ),
    registry.COMPLETE: ToolHandler(
        CompleteArguments, builders.build_complete, "Completion failed"
    ),
}

ARGUMENT_MODELS: dict[str, type[ToolArguments]] = {
    **{name: handler.arguments for name, handler in HANDLERS.items()},
    registry.STATUS: StatusArguments,
}


def validate_arguments(name: str, arguments: Any) -> ToolArguments:
    """Validate a raw argument bag against the tool's argument model.

    Args:
        name: A registered tool name
        arguments: The caller-supplied arguments (None means no arguments)

    Returns:
        ToolArguments: The validated, defaulted arguments

    Raises:
        UnknownToolError: If the tool has no argument model
        ToolValidationError: If the arguments don't match the model
    """
    model = ARGUMENT_MODELS.get(name)
    if model is None:
        raise UnknownToolError(name)
    try:
        return model.model_validate(arguments if arguments is not None else {})
    except ValidationError as e:
        raise ToolValidationError(name, e.errors()) from e


class ToolDispatcher:
    """Routes tool calls to their builders and the backend.

    The dispatcher holds only read-only collaborators (settings, registry,
    backend client), so concurrent calls need no locking.
    """

    def __init__(
        self,
        settings: LocalLLMSettings,
        client: BackendClient,
        tool_registry: ToolRegistry | None = None,
    ):
        """Initialize the ToolDispatcher.

        Args:
            settings: Application settings (model, token and temperature defaults)
            client: Backend client used for completions and the status check
            tool_registry: Registry to dispatch against; built from settings
                           when not given
        """
        self.settings = settings
        self.client = client
        self.registry = tool_registry or ToolRegistry(settings)

    def _resolve(self, name: str) -> ToolHandler | None:
        """Look a tool up once; None means it takes no prompt (local_status).

        Raises:
            UnknownToolError: If the tool isn't registered
        """
        self.registry.get_tool(name)
        return HANDLERS.get(name)

    def build_request(self, name: str, arguments: Any) -> CompletionRequest:
        """Validate arguments and build the completion request for a tool.

        Raises:
            UnknownToolError: If the tool doesn't exist or takes no prompt
            ToolValidationError: If the arguments are invalid
        """
        handler = self._resolve(name)
        if handler is None:
            raise UnknownToolError(name)
        return handler.build(validate_arguments(name, arguments), self.settings)

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> ToolResult:
        """Fulfill one tool call.

        Args:
            name: The tool name
            arguments: The caller-supplied argument bag

        Returns:
            ToolResult: The completion text, or an error envelope
        """
        logger.info(f"Tool call: {name}")
        try:
            text = await self._dispatch(name, arguments)
        except UnknownToolError as e:
            logger.warning(str(e))
            return ToolResult(content=f"Error: {e}", is_error=True)
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            return ToolResult(content=f"Error: {e}", is_error=True)

        return ToolResult(content=text)

    async def _dispatch(self, name: str, arguments: dict[str, Any] | None) -> str:
        handler = self._resolve(name)
        if handler is None:
            validate_arguments(name, arguments)
            return await self.get_status()

        request = handler.build(validate_arguments(name, arguments), self.settings)
        content = await self.client.create_completion(request)

        if not content:
            logger.warning(f"Tool {name}: backend returned no content")
            return handler.fallback
        return content

    async def get_status(self) -> str:
        """Check the backend and describe it as a JSON document.

        Never raises: backend failures are reported inside the document with
        status "error" and a remediation hint.

        Returns:
            str: Pretty-printed JSON
        """
        try:
            models = await self.client.list_models()
        except Exception as e:
            logger.warning(f"Status check failed: {e}")
            return json.dumps(
                {
                    "status": "error",
                    "base_url": self.settings.base_url,
                    "error": str(e) or type(e).__name__,
                    "hint": STATUS_HINT,
                },
                indent=2,
            )

        return json.dumps(
            {
                "status": "connected",
                "base_url": self.settings.base_url,
                "default_model": self.settings.model,
                "available_models": models,
                "config": {
                    "max_tokens": self.settings.max_tokens,
                    "temperature": self.settings.temperature,
                },
            },
            indent=2,
        )
