"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
routers to inject the settings and the tool dispatcher.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.tools import ToolDispatcher


@lru_cache
def get_settings() -> LocalLLMSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the LOCAL_LLM_ prefix.

    Returns:
        LocalLLMSettings: The application configuration settings.
    """
    return LocalLLMSettings()


def get_tool_dispatcher(request: Request) -> ToolDispatcher:
    """Get the tool dispatcher from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolDispatcher: The dispatcher created during application startup.

    Raises:
        HTTPException: If the dispatcher is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "tool_dispatcher"):
        raise HTTPException(
            status_code=503,
            detail="Tool dispatcher not initialized",
        )
    return request.app.state.tool_dispatcher
