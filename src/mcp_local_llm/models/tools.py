"""Pydantic models for the tool API.

This module contains request and response schemas for the /api/v1/tools
endpoints. Field names on the wire follow the tool-protocol spelling
(inputSchema, isError).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolInfo(BaseModel):
    """A single tool as advertised to callers."""

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="When and how to use the tool")
    input_schema: dict[str, Any] = Field(
        ...,
        alias="inputSchema",
        description="JSON schema of the accepted arguments",
    )

    model_config = ConfigDict(populate_by_name=True)


class ToolListResponse(BaseModel):
    """Response model for listing all tools."""

    tools: list[ToolInfo] = Field(
        default_factory=list, description="All registered tools, in order"
    )


class ToolCallResponse(BaseModel):
    """Reply envelope for a tool call.

    Tool failures are reported here with is_error set rather than as HTTP
    error statuses.
    """

    content: str = Field(..., description="Tool output or error message")
    is_error: bool = Field(
        default=False,
        alias="isError",
        description="Whether the call failed",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "content": "positive",
                "isError": False,
            }
        },
    )
