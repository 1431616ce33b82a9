"""Model Context Protocol server over stdio.

This module exposes the tool registry and dispatcher to MCP clients (Claude
CLI, Claude Desktop, or any MCP-compatible agent). Stdout carries the
protocol stream, so logging must go to stderr.
"""

import logging
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from mcp_local_llm.backend import BackendClient
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.errors import LocalLLMError
from mcp_local_llm.tools import ToolDispatcher, ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-local-llm"
SERVER_VERSION = "1.0.1"


class ToolCallFailed(LocalLLMError):
    """Carries an error envelope's text back to the MCP SDK.

    The SDK turns an exception raised from a call_tool handler into a
    CallToolResult with isError set and the exception text as content.
    """


def list_tools(dispatcher: ToolDispatcher) -> list[types.Tool]:
    """Render the registry as MCP tool definitions."""
    return [
        types.Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_schema,
        )
        for tool in dispatcher.registry.list_tools()
    ]


async def call_tool(
    dispatcher: ToolDispatcher, name: str, arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """Dispatch one MCP tool call.

    Raises:
        ToolCallFailed: If the dispatcher returned an error envelope
    """
    result = await dispatcher.call_tool(name, arguments)
    if result.is_error:
        raise ToolCallFailed(result.content)
    return [types.TextContent(type="text", text=result.content)]


def create_server(dispatcher: ToolDispatcher) -> Server:
    """Create an MCP server bound to a dispatcher.

    Input validation by the SDK is disabled; the dispatcher validates
    arguments itself and reports failures in its own wording.
    """
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tools(dispatcher)

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        return await call_tool(dispatcher, name, arguments)

    return server


async def run_stdio(settings: LocalLLMSettings) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    client = BackendClient(settings)
    dispatcher = ToolDispatcher(settings, client, ToolRegistry(settings))
    server = create_server(dispatcher)

    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info(f"{SERVER_NAME} server running")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await client.close()
