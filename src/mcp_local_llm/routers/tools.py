"""Tools router for listing and calling tools over HTTP.

This module exposes the same two operations as the MCP server (list tools,
call tool) plus the backend status as a plain JSON document.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from mcp_local_llm.dependencies import get_tool_dispatcher
from mcp_local_llm.models.tools import ToolCallResponse, ToolInfo, ToolListResponse
from mcp_local_llm.tools import ToolDispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["tools"])


@router.get("/tools", response_model=ToolListResponse)
async def list_tools(
    dispatcher: ToolDispatcher = Depends(get_tool_dispatcher),
) -> ToolListResponse:
    """List all registered tools with their input schemas.

    Args:
        dispatcher: The tool dispatcher (injected).

    Returns:
        ToolListResponse: Every tool, in registry order.
    """
    tools = [
        ToolInfo(
            name=tool.name,
            description=tool.description,
            input_schema=tool.input_schema,
        )
        for tool in dispatcher.registry.list_tools()
    ]
    return ToolListResponse(tools=tools)


@router.post("/tools/{name}", response_model=ToolCallResponse)
async def call_tool(
    name: str,
    arguments: dict[str, Any] | None = Body(default=None),
    dispatcher: ToolDispatcher = Depends(get_tool_dispatcher),
) -> ToolCallResponse:
    """Call a tool by name.

    Tool failures (unknown tool, invalid arguments, backend errors) come back
    as a 200 response with isError set, never as an HTTP error.

    Args:
        name: The tool name (e.g., "local_summarize").
        arguments: The JSON object of tool arguments.
        dispatcher: The tool dispatcher (injected).

    Returns:
        ToolCallResponse: The reply envelope.
    """
    result = await dispatcher.call_tool(name, arguments)
    return ToolCallResponse(content=result.content, is_error=result.is_error)


@router.get("/status")
async def get_status(
    dispatcher: ToolDispatcher = Depends(get_tool_dispatcher),
) -> dict[str, Any]:
    """Report backend connectivity, available models and defaults.

    Args:
        dispatcher: The tool dispatcher (injected).

    Returns:
        dict: The status document; status is "connected" or "error".
    """
    return json.loads(await dispatcher.get_status())
