"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    The backend fields stay None until the lifespan has wired a dispatcher.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of mcp-local-llm")
    backend_connected: bool | None = Field(
        default=None, description="Whether the backend answered a model listing"
    )
    backend_url: str | None = Field(default=None, description="Backend base URL")
    default_model: str | None = Field(
        default=None, description="Model every tool call is sent to"
    )
    model_available: bool | None = Field(
        default=None,
        description="Whether the default model is installed (None if unknown)",
    )
    tool_count: int | None = Field(
        default=None, description="Number of tools the adapter exposes"
    )
