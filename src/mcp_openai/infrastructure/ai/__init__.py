"""OpenAI infrastructure for the downstream completion call."""

from mcp_openai.infrastructure.ai.client import AIResponse, OpenAIClient

__all__ = [
    "AIResponse",
    "OpenAIClient",
]
