"""mcp-local-llm: delegate text-processing tools to a local LLM.

This package exposes summarize, draft, classify, extract, transform, raw
completion and status tools over MCP (stdio) and HTTP, and fulfills them
through a locally hosted OpenAI-compatible chat-completion endpoint.
"""

from mcp_local_llm.app import create_app

__version__ = "1.0.1"

__all__ = ["create_app", "__version__"]
