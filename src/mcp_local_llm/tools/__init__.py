"""Tool registry, prompt builders and dispatch layer.

This package declares the tools exposed to calling agents, turns their
arguments into chat-completion requests, and wraps backend replies in
result envelopes.
"""

from mcp_local_llm.tools.registry import ToolDescriptor, ToolRegistry
from mcp_local_llm.tools.dispatcher import ToolDispatcher, ToolResult

__all__ = ["ToolDescriptor", "ToolDispatcher", "ToolRegistry", "ToolResult"]
