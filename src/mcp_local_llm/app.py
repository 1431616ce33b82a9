"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and
configures the FastAPI application instance, including lifespan management
for startup/shutdown and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mcp_local_llm.backend import BackendClient
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.routers import health, tools
from mcp_local_llm.tools import ToolDispatcher, ToolRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The backend client, tool registry and dispatcher are created once at
    startup and stored in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: LocalLLMSettings = app.state.settings
    app.state.backend_client = BackendClient(settings)
    app.state.tool_dispatcher = ToolDispatcher(
        settings=settings,
        client=app.state.backend_client,
        tool_registry=ToolRegistry(settings),
    )
    logger.info(f"Initialized backend client with base_url: {settings.base_url}")

    connected = await app.state.backend_client.check_connection()
    if connected:
        logger.info("Successfully connected to backend")
    else:
        logger.warning("Could not connect to backend - check if it is running")

    yield

    if hasattr(app.state, "backend_client"):
        await app.state.backend_client.close()
        logger.info("Backend client closed")


def create_app(settings: LocalLLMSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional LocalLLMSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from mcp_local_llm.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="mcp-local-llm",
        description="Delegate text-processing tools to a local LLM",
        version="1.0.1",
        lifespan=lifespan,
    )

    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tools.router)

    return app
