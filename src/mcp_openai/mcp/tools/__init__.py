"""Tool handlers for the mcp-openai server."""

from mcp_openai.mcp.tools.chat import openai_chat
from mcp_openai.mcp.tools.plan import openai_plan

__all__ = ["openai_chat", "openai_plan"]
