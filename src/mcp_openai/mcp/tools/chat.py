"""openai_chat tool."""

from __future__ import annotations

from typing import Any

from mcp_openai.infrastructure.ai.factory import AIClient
from mcp_openai.mcp.models import SUPPORTED_MODELS, OpenAIChatInput, ToolResponse
from mcp_openai.mcp.tools.common import handle_error, response_text
from mcp_openai.mcp.translator import translate_chat_messages
from mcp_openai.shared.exceptions import UnsupportedModelError

CHAT_TEMPERATURE = 0.7
CHAT_MAX_TOKENS = 2000


async def openai_chat(arguments: dict[str, Any], client: AIClient) -> ToolResponse:
    """Send messages to an OpenAI chat model.

    Sampling temperature and output length are fixed and not caller
    configurable. Developer messages are sent as assistant messages and
    list content is joined into a single string.

    Args:
        arguments: Raw tool arguments with:
            - messages (list): role/content messages
            - model (str): One of SUPPORTED_MODELS (default: gpt-4o)
        client: Downstream completion client

    Returns:
        ToolResponse: First choice text, or an error envelope
    """
    try:
        params = OpenAIChatInput.model_validate(arguments)

        if params.model not in SUPPORTED_MODELS:
            raise UnsupportedModelError(params.model, SUPPORTED_MODELS)

        messages = translate_chat_messages(params.messages)

        response = await client.complete(
            params.model,
            messages,
            temperature=CHAT_TEMPERATURE,
            max_tokens=CHAT_MAX_TOKENS,
        )

        return ToolResponse.success(response_text(response))

    except Exception as e:
        return handle_error(e, "openai_chat")
