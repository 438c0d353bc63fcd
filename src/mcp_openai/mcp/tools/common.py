"""Shared helpers for tool handlers."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from mcp_openai.infrastructure.ai.client import AIResponse
from mcp_openai.mcp.models import NO_RESPONSE_TEXT, ToolResponse
from mcp_openai.shared.exceptions import MCPOpenAIError
from mcp_openai.shared.logging import get_logger

logger = get_logger(__name__)

ERROR_PREFIX = "OpenAI API error"


def response_text(response: AIResponse) -> str:
    """Text of the first choice, or a placeholder when there is none."""
    return response.content or NO_RESPONSE_TEXT


def handle_error(e: Exception, tool_name: str) -> ToolResponse:
    """Convert a domain failure into an error envelope."""
    if isinstance(e, MCPOpenAIError):
        message = e.message
        logger.warning("tool_call_failed", tool=tool_name, error=message)
    elif isinstance(e, PydanticValidationError):
        message = str(e)
        logger.warning("tool_call_invalid_arguments", tool=tool_name, error_count=e.error_count())
    else:
        message = str(e)
        logger.exception("tool_call_failed", tool=tool_name, error=message)

    return ToolResponse.error(f"{ERROR_PREFIX}: {message}")
