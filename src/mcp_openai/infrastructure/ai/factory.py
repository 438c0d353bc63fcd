"""AI client factory - builds the process-scoped OpenAI client."""

from typing import Any, Protocol

from mcp_openai.config import Settings
from mcp_openai.infrastructure.ai.client import AIResponse, OpenAIClient
from mcp_openai.shared.logging import get_logger

logger = get_logger(__name__)


class AIClient(Protocol):
    """Protocol for the downstream completion client."""

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        reasoning_effort: str | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> AIResponse: ...


def build_ai_client(settings: Settings) -> OpenAIClient:
    """Build the OpenAI client from settings.

    Called once at startup; the result is handed to the server and never
    mutated afterwards.
    """
    logger.info("using_ai_provider", provider="openai")
    return OpenAIClient(api_key=settings.openai_api_key)
