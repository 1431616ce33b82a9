"""Static catalog of the tools exposed to calling agents.

The registry holds one ToolDescriptor per tool. Descriptors are built once,
when the registry is created at startup, and never change afterwards. The
input schemas document the accepted fields; validation itself happens in
the dispatcher.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.errors import UnknownToolError
from mcp_local_llm.tools.schemas import OutputFormat, SummaryStyle

logger = logging.getLogger(__name__)

SUMMARIZE = "local_summarize"
DRAFT = "local_draft"
CLASSIFY = "local_classify"
EXTRACT = "local_extract"
TRANSFORM = "local_transform"
COMPLETE = "local_complete"
STATUS = "local_status"


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class ToolDescriptor:
    """A named, schema-described tool.

    The schema is stored as nested read-only mappings and tuples, so a
    descriptor can't be changed through anything it hands out.

    Attributes:
        name: Unique tool name (e.g., "local_summarize")
        description: Guidance for the calling agent on when to use the tool
        schema: Read-only JSON schema object describing the accepted arguments
    """

    name: str
    description: str
    schema: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", _freeze(self.schema))

    @property
    def input_schema(self) -> dict[str, Any]:
        """A fresh, mutable copy of the JSON schema."""
        return _thaw(self.schema)

    @property
    def required(self) -> frozenset[str]:
        return frozenset(self.schema.get("required", ()))

    def to_dict(self) -> dict[str, Any]:
        """Render the descriptor in the MCP tool-list shape."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def _object_schema(
    properties: dict[str, dict[str, Any]], required: list[str]
) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _string_list(description: str) -> dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


def _build_descriptors(settings: LocalLLMSettings) -> tuple[ToolDescriptor, ...]:
    return (
        ToolDescriptor(
            name=SUMMARIZE,
            description=(
                "Summarize text using a local LLM. Use for long documents, "
                "research notes, or any content that needs condensing.\n\n"
                "DELEGATION GUIDANCE: Use this when you need to summarize content "
                "that doesn't require your full reasoning - bulk file summarization, "
                "extracting key points from research, condensing meeting notes."
            ),
            schema=_object_schema(
                {
                    "text": _string("The text to summarize"),
                    "style": {
                        "type": "string",
                        "enum": [style.value for style in SummaryStyle],
                        "description": "Summary style (default: brief)",
                    },
                    "max_length": {
                        "type": "number",
                        "description": "Approximate max words for summary (default: 150)",
                    },
                    "focus": _string(
                        "Optional focus area - what aspects to emphasize"
                    ),
                },
                required=["text"],
            ),
        ),
        ToolDescriptor(
            name=DRAFT,
            description=(
                "Generate an initial draft using a local LLM that you can then "
                "refine.\n\n"
                "DELEGATION GUIDANCE: Use this for boilerplate content, initial "
                "drafts, template-based generation. You should review and refine "
                "the output - the local model does the grunt work, you do the "
                "quality control."
            ),
            schema=_object_schema(
                {
                    "task": _string(
                        "What to draft (e.g., 'email response', 'README section', "
                        "'function docstring')"
                    ),
                    "context": _string("Context and requirements for the draft"),
                    "format": _string(
                        "Desired format (e.g., 'markdown', 'plain text', "
                        "'code comment')"
                    ),
                    "tone": _string(
                        "Desired tone (e.g., 'professional', 'casual', 'technical')"
                    ),
                },
                required=["task", "context"],
            ),
        ),
        ToolDescriptor(
            name=CLASSIFY,
            description=(
                "Classify text into categories using a local LLM.\n\n"
                "DELEGATION GUIDANCE: Use for sorting, tagging, organizing content. "
                "Good for batch classification tasks where the categories are "
                "clear-cut."
            ),
            schema=_object_schema(
                {
                    "text": _string("The text to classify"),
                    "categories": _string_list("List of possible categories"),
                    "allow_multiple": {
                        "type": "boolean",
                        "description": "Allow multiple category assignments (default: false)",
                    },
                    "explain": {
                        "type": "boolean",
                        "description": "Include brief explanation for classification (default: false)",
                    },
                },
                required=["text", "categories"],
            ),
        ),
        ToolDescriptor(
            name=EXTRACT,
            description=(
                "Extract structured information from text using a local LLM.\n\n"
                "DELEGATION GUIDANCE: Use for parsing documents, extracting specific "
                "fields, converting unstructured text to structured data."
            ),
            schema=_object_schema(
                {
                    "text": _string("The text to extract from"),
                    "fields": _string_list(
                        "Fields to extract (e.g., ['name', 'email', 'date', 'amount'])"
                    ),
                    "output_format": {
                        "type": "string",
                        "enum": [fmt.value for fmt in OutputFormat],
                        "description": "Output format (default: json)",
                    },
                },
                required=["text", "fields"],
            ),
        ),
        ToolDescriptor(
            name=TRANSFORM,
            description=(
                "Transform text according to instructions using a local LLM.\n\n"
                "DELEGATION GUIDANCE: Use for formatting changes, style conversions, "
                "simple rewrites. Good for mechanical transformations that don't "
                "require deep reasoning."
            ),
            schema=_object_schema(
                {
                    "text": _string("The text to transform"),
                    "instruction": _string(
                        "How to transform the text (e.g., 'convert to bullet points', "
                        "'make more concise', 'add markdown formatting')"
                    ),
                },
                required=["text", "instruction"],
            ),
        ),
        ToolDescriptor(
            name=COMPLETE,
            description=(
                "Raw completion using local LLM for maximum flexibility.\n\n"
                "DELEGATION GUIDANCE: Use when other tools don't fit. You control "
                "the prompt entirely. Good for custom tasks that don't match "
                "predefined patterns."
            ),
            schema=_object_schema(
                {
                    "prompt": _string("The prompt for the local model"),
                    "system": _string(
                        "Optional system message to set context/behavior"
                    ),
                    "max_tokens": {
                        "type": "number",
                        "description": f"Maximum tokens to generate (default: {settings.max_tokens})",
                    },
                    "temperature": {
                        "type": "number",
                        "description": f"Temperature for generation (default: {settings.temperature})",
                    },
                },
                required=["prompt"],
            ),
        ),
        ToolDescriptor(
            name=STATUS,
            description="Check the status of the local LLM and available models.",
            schema=_object_schema({}, required=[]),
        ),
    )


class ToolRegistry:
    """Enumerable catalog of tool descriptors.

    The registry is created once at startup from the settings (the
    local_complete schema documents the configured defaults) and is
    read-only afterwards.
    """

    def __init__(self, settings: LocalLLMSettings):
        self._tools = _build_descriptors(settings)
        self._by_name = {tool.name: tool for tool in self._tools}
        logger.debug(f"Registered {len(self._tools)} tools")

    def list_tools(self) -> list[ToolDescriptor]:
        """Return every tool descriptor, always in the same order."""
        return list(self._tools)

    def get_tool(self, name: str) -> ToolDescriptor:
        """Look up a descriptor by name.

        Raises:
            UnknownToolError: If no tool has that name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._tools)
