"""MCP server exposing OpenAI chat and planning models as tools."""

__version__ = "0.1.1"
