"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from mcp_local_llm.models.health import HealthResponse
from mcp_local_llm.tools import ToolDispatcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report whether the adapter can actually serve tool calls.

    Lists the backend's models once: a failure means the backend is down,
    and a successful listing tells whether the configured default model is
    installed. Always answers 200; the server itself is up even when the
    backend is not.
    """
    dispatcher: ToolDispatcher | None = getattr(
        request.app.state, "tool_dispatcher", None
    )
    if dispatcher is None:
        return HealthResponse(status="ok", version=request.app.version)

    backend_connected = True
    model_available = None
    try:
        models = await dispatcher.client.list_models()
        model_available = dispatcher.settings.model in models
    except Exception as e:
        logger.warning(f"Backend model listing failed: {e}")
        backend_connected = False

    if model_available is False:
        logger.warning(
            f"Default model {dispatcher.settings.model} is not installed on the backend"
        )

    return HealthResponse(
        status="ok",
        version=request.app.version,
        backend_connected=backend_connected,
        backend_url=dispatcher.settings.base_url,
        default_model=dispatcher.settings.model,
        model_available=model_available,
        tool_count=len(dispatcher.registry),
    )
