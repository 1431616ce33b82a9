"""FastAPI routers for API endpoints.

Each router module defines endpoints for a specific resource (health, tools).
"""

from mcp_local_llm.routers import health, tools

__all__ = ["health", "tools"]
