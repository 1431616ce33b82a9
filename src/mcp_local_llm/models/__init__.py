"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API responses across all endpoints.
"""

from mcp_local_llm.models.health import HealthResponse
from mcp_local_llm.models.tools import ToolCallResponse, ToolInfo, ToolListResponse

__all__ = [
    "HealthResponse",
    "ToolCallResponse",
    "ToolInfo",
    "ToolListResponse",
]
