"""openai_plan tool."""

from __future__ import annotations

from typing import Any

from mcp_openai.infrastructure.ai.factory import AIClient
from mcp_openai.mcp.models import PLAN_MODELS, OpenAIPlanInput, ToolResponse
from mcp_openai.mcp.tools.common import handle_error, response_text
from mcp_openai.mcp.translator import translate_plan_messages
from mcp_openai.shared.exceptions import UnsupportedModelError

# The requested response_format is accepted but never forwarded.
PLAN_RESPONSE_FORMAT = {"type": "text"}


async def openai_plan(arguments: dict[str, Any], client: AIClient) -> ToolResponse:
    """Send messages to an OpenAI reasoning model for planning.

    Any developer-role message is replaced by the planner/executor
    document. Temperature and max_tokens are left to platform defaults.

    Args:
        arguments: Raw tool arguments with:
            - messages (list): role/content messages
            - model (str): One of PLAN_MODELS (default: o1-2024-12-17)
            - reasoning_effort (str): low, medium or high (default: low)
            - response_format (dict): Accepted, always sent as {"type": "text"}
        client: Downstream completion client

    Returns:
        ToolResponse: First choice text, or an error envelope
    """
    try:
        params = OpenAIPlanInput.model_validate(arguments)

        if params.model not in PLAN_MODELS:
            raise UnsupportedModelError(
                params.model, PLAN_MODELS, prefix="Unsupported model for reasoning"
            )

        messages = translate_plan_messages(params.messages)

        reasoning_effort = params.reasoning_effort.value if params.reasoning_effort else None

        response = await client.complete(
            params.model,
            messages,
            reasoning_effort=reasoning_effort,
            response_format=dict(PLAN_RESPONSE_FORMAT),
        )

        return ToolResponse.success(response_text(response))

    except Exception as e:
        return handle_error(e, "openai_plan")
