"""Pytest configuration for integration tests.

This module patches the backend client before the app starts, so the
lifespan wires the dispatcher to a mock instead of a real server.
"""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest.fixture(autouse=True)
def patched_backend(mock_backend):
    """Make the app lifespan use the mock backend client."""
    with patch("mcp_local_llm.app.BackendClient") as mock_client_class:
        mock_client_class.return_value = mock_backend
        yield mock_backend


@pytest_asyncio.fixture
async def async_client(test_app, patched_backend):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.
        patched_backend: Ensures the backend is mocked before startup.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
