"""Pytest configuration and shared fixtures for mcp-local-llm tests.

This module provides common fixtures used across all test modules,
including settings, a mocked backend client and a dispatcher wired to it.
"""

from unittest.mock import AsyncMock

import pytest

from mcp_local_llm import create_app
from mcp_local_llm.backend import BackendClient
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.tools import ToolDispatcher, ToolRegistry


@pytest.fixture
def test_settings():
    """Create settings with explicit values, independent of the environment.

    Returns:
        LocalLLMSettings: Settings instance configured for testing.
    """
    return LocalLLMSettings(
        base_url="http://localhost:11434/v1",
        model="qwen2.5-coder:7b",
        max_tokens=2048,
        temperature=0.7,
        host="127.0.0.1",
        port=8000,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def mock_backend():
    """Create a mock BackendClient that answers every completion with "ok"."""
    client = AsyncMock(spec=BackendClient)
    client.base_url = "http://localhost:11434/v1"
    client.create_completion.return_value = "ok"
    client.list_models.return_value = ["qwen2.5-coder:7b", "llama3.2:latest"]
    client.check_connection.return_value = True
    return client


@pytest.fixture
def dispatcher(test_settings, mock_backend):
    """Create a ToolDispatcher wired to the mock backend."""
    return ToolDispatcher(
        settings=test_settings,
        client=mock_backend,
        tool_registry=ToolRegistry(test_settings),
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)
