"""Unit tests for the tool registry."""

import pytest

from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.errors import UnknownToolError
from mcp_local_llm.tools import ToolDescriptor, ToolRegistry
from mcp_local_llm.tools.dispatcher import ARGUMENT_MODELS

EXPECTED_TOOLS = [
    "local_summarize",
    "local_draft",
    "local_classify",
    "local_extract",
    "local_transform",
    "local_complete",
    "local_status",
]


@pytest.fixture
def tool_registry(test_settings):
    return ToolRegistry(test_settings)


def test_list_tools_names_and_order(tool_registry):
    """Test that the registry lists all seven tools in a fixed order."""
    tools = tool_registry.list_tools()

    assert [tool.name for tool in tools] == EXPECTED_TOOLS
    assert all(isinstance(tool, ToolDescriptor) for tool in tools)
    assert len(tool_registry) == 7


def test_list_tools_is_stable(tool_registry):
    """Test that repeated calls return equal descriptors."""
    assert tool_registry.list_tools() == tool_registry.list_tools()


def test_list_tools_returns_copy(tool_registry):
    """Test that mutating the returned list doesn't affect the registry."""
    tools = tool_registry.list_tools()
    tools.clear()

    assert len(tool_registry.list_tools()) == 7


@pytest.mark.parametrize("name", EXPECTED_TOOLS)
def test_required_fields_match_argument_models(tool_registry, name):
    """Test that each schema's required set matches what validation requires."""
    descriptor = tool_registry.get_tool(name)
    model = ARGUMENT_MODELS[name]

    required = {
        field_name
        for field_name, field in model.model_fields.items()
        if field.is_required()
    }
    assert descriptor.required == required
    assert set(descriptor.input_schema["properties"]) == set(model.model_fields)


def test_schema_enums(tool_registry):
    """Test the enumerated value sets."""
    summarize = tool_registry.get_tool("local_summarize").input_schema
    extract = tool_registry.get_tool("local_extract").input_schema

    assert summarize["properties"]["style"]["enum"] == [
        "brief",
        "detailed",
        "bullet_points",
        "executive",
    ]
    assert extract["properties"]["output_format"]["enum"] == [
        "json",
        "yaml",
        "markdown_table",
    ]


def test_complete_schema_documents_configured_defaults():
    """Test that local_complete's schema mentions the configured defaults."""
    registry = ToolRegistry(LocalLLMSettings(max_tokens=512, temperature=0.2))
    properties = registry.get_tool("local_complete").input_schema["properties"]

    assert "(default: 512)" in properties["max_tokens"]["description"]
    assert "(default: 0.2)" in properties["temperature"]["description"]


def test_descriptions_carry_delegation_guidance(tool_registry):
    """Test that every tool except status explains when to delegate."""
    for tool in tool_registry.list_tools():
        if tool.name == "local_status":
            continue
        assert "DELEGATION GUIDANCE" in tool.description


def test_to_dict_uses_protocol_keys(tool_registry):
    """Test the MCP wire shape of a descriptor."""
    data = tool_registry.get_tool("local_status").to_dict()

    assert data == {
        "name": "local_status",
        "description": "Check the status of the local LLM and available models.",
        "inputSchema": {"type": "object", "properties": {}, "required": []},
    }


def test_get_tool_unknown(tool_registry):
    """Test that unknown names raise UnknownToolError."""
    with pytest.raises(UnknownToolError, match="Unknown tool: nope"):
        tool_registry.get_tool("nope")

    assert "nope" not in tool_registry
    assert "local_draft" in tool_registry


def test_handed_out_schemas_cannot_change_registry(tool_registry):
    """Test that editing a returned schema leaves the registry untouched."""
    tool_registry.list_tools()[0].input_schema["required"].append("bogus")
    tool_registry.get_tool("local_summarize").to_dict()["inputSchema"][
        "properties"
    ].clear()

    descriptor = tool_registry.get_tool("local_summarize")
    assert descriptor.required == {"text"}
    assert descriptor.input_schema["required"] == ["text"]
    assert "max_length" in descriptor.input_schema["properties"]


def test_descriptor_schema_is_read_only(tool_registry):
    """Test that the stored schema rejects in-place edits."""
    descriptor = tool_registry.get_tool("local_classify")

    with pytest.raises(TypeError):
        descriptor.schema["type"] = "array"
    with pytest.raises(TypeError):
        descriptor.schema["properties"]["text"]["type"] = "number"
    with pytest.raises(AttributeError):
        descriptor.schema["required"].append("bogus")
