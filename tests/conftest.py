"""
Pytest configuration and fixtures for mcp-openai tests.
"""
import os
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from mcp_openai.infrastructure.ai.client import AIResponse

# Settings are never loaded from a real credential in tests
os.environ.setdefault("OPENAI_API_KEY", "sk-test-key")


@pytest.fixture
def make_response() -> Callable[..., AIResponse]:
    """Build AIResponse objects with sensible defaults."""

    def _make(content: str | None = "Hello from OpenAI", model: str = "gpt-4o") -> AIResponse:
        return AIResponse(
            content=content,
            model=model,
            input_tokens=10,
            output_tokens=5,
            latency_ms=12.5,
        )

    return _make


@pytest.fixture
def mock_client(make_response) -> AsyncMock:
    """Downstream completion client returning a fixed response."""
    client = AsyncMock()
    client.complete.return_value = make_response()
    return client
