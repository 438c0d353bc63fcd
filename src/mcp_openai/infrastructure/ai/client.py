"""OpenAI chat completion API client wrapper."""

import time
from dataclasses import dataclass
from typing import Any

import openai
from openai import AsyncOpenAI

from mcp_openai.shared.exceptions import AIRateLimitError, AIServiceError
from mcp_openai.shared.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AIResponse:
    """Response from AI completion."""

    content: str | None
    model: str
    input_tokens: int
    output_tokens: int
    latency_ms: float


class OpenAIClient:
    """Wrapper for the OpenAI chat completion API.

    One instance is created at startup and shared read-only by every tool
    call. Each `complete` call issues exactly one request; there is no retry,
    caching or streaming.
    """

    def __init__(self, api_key: str, client: AsyncOpenAI | None = None) -> None:
        # Use async client to avoid blocking the event loop
        self.client = client or AsyncOpenAI(api_key=api_key)

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        reasoning_effort: str | None = None,
        response_format: dict[str, Any] | None = None,
    ) -> AIResponse:
        """Send a chat completion request to OpenAI.

        Only the options that are set are sent, so omitted sampling and
        length controls fall back to the platform defaults.

        Args:
            model: Model identifier
            messages: Messages already in the chat completion shape
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            reasoning_effort: Reasoning effort for reasoning models
            response_format: Response format object

        Returns:
            AIResponse with the first choice's text (None if absent)

        Raises:
            AIRateLimitError: If rate limited
            AIServiceError: For other API errors
        """
        params: dict[str, Any] = {"model": model, "messages": messages}
        if temperature is not None:
            params["temperature"] = temperature
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if reasoning_effort:
            params["reasoning_effort"] = reasoning_effort
        if response_format is not None:
            params["response_format"] = response_format

        start_time = time.monotonic()

        try:
            response = await self.client.chat.completions.create(**params)

        except openai.RateLimitError as e:
            logger.warning("openai_rate_limited", model=model, error=str(e))
            raise AIRateLimitError(e.message, details={"status": e.status_code}) from e

        except openai.APIStatusError as e:
            logger.error("openai_api_error", model=model, status=e.status_code, error=str(e))
            raise AIServiceError(e.message, details={"status": e.status_code}) from e

        except openai.APIError as e:
            logger.error("openai_connection_error", model=model, error=str(e))
            raise AIServiceError(e.message) from e

        latency_ms = (time.monotonic() - start_time) * 1000

        content = None
        if response.choices:
            content = response.choices[0].message.content

        usage = response.usage
        input_tokens = usage.prompt_tokens if usage else 0
        output_tokens = usage.completion_tokens if usage else 0

        logger.debug(
            "openai_completion_success",
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=round(latency_ms, 2),
        )

        return AIResponse(
            content=content,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            latency_ms=latency_ms,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()
