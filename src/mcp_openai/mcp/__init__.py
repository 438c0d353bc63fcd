"""mcp-openai MCP (Model Context Protocol) module.

This module exposes OpenAI chat completion models to MCP clients.

Key components:
- Catalog: Static descriptions of the openai_chat and openai_plan tools
- Translator: Maps role/content messages to the chat completion shape
- Server: Dispatches tool calls and wraps results in the response envelope
"""
