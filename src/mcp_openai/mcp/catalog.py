"""Tool definitions advertised on tools/list.

The catalog is static data: it is returned verbatim on every request.
"""

from typing import Any

from mcp_openai.mcp.models import (
    ADVERTISED_PLAN_MODEL,
    DEFAULT_CHAT_MODEL,
    DEFAULT_REASONING_EFFORT,
    PLAN_ADVERTISED_MODELS,
    SUPPORTED_MODELS,
    ReasoningEffort,
)

_MODEL_LIST = ", ".join(SUPPORTED_MODELS)

TOOL_DEFINITIONS: list[dict[str, Any]] = [
    {
        "name": "openai_chat",
        "description": (
            "Use this tool when a user specifically requests to use one of OpenAI's models "
            f"({_MODEL_LIST}). This tool sends messages to OpenAI's chat completion API "
            "using the specified model."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "messages": {
                    "type": "array",
                    "description": "Array of messages to send to the API",
                    "items": {
                        "type": "object",
                        "properties": {
                            "role": {
                                "type": "string",
                                "enum": ["system", "user", "assistant"],
                                "description": "Role of the message sender",
                            },
                            "content": {
                                "type": "string",
                                "description": "Content of the message",
                            },
                        },
                        "required": ["role", "content"],
                    },
                },
                "model": {
                    "type": "string",
                    "enum": list(SUPPORTED_MODELS),
                    "description": f"Model to use for completion ({_MODEL_LIST})",
                    "default": DEFAULT_CHAT_MODEL,
                },
            },
            "required": ["messages"],
        },
    },
    {
        "name": "openai_plan",
        "description": (
            "Use this tool when a user specifically requests to do planning with one of "
            f"OpenAI's models ({_MODEL_LIST}). This tool sends messages to OpenAI's chat "
            "completion API with a specified reasoning_effort level (low, medium, high)."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "messages": {
                    "type": "array",
                    "description": "Array of messages to send to the API",
                    "items": {
                        "type": "object",
                        "properties": {
                            "role": {
                                "type": "string",
                                "enum": ["system", "user", "assistant", "developer"],
                                "description": "Role of the message sender",
                            },
                            "content": {
                                "oneOf": [
                                    {
                                        "type": "string",
                                        "description": "Content of the message as string",
                                    },
                                    {
                                        "type": "array",
                                        "description": "Content of the message as array of content parts",
                                        "items": {
                                            "type": "object",
                                            "properties": {
                                                "type": {
                                                    "type": "string",
                                                    "enum": ["text"],
                                                    "description": "Type of content part",
                                                },
                                                "text": {
                                                    "type": "string",
                                                    "description": "Text content",
                                                },
                                            },
                                            "required": ["type", "text"],
                                        },
                                    },
                                ]
                            },
                        },
                        "required": ["role", "content"],
                    },
                },
                "model": {
                    "type": "string",
                    "enum": list(PLAN_ADVERTISED_MODELS),
                    "description": "reasoning model to use for completion",
                    "default": ADVERTISED_PLAN_MODEL,
                },
                "reasoning_effort": {
                    "type": "string",
                    "enum": [level.value for level in ReasoningEffort],
                    "description": "Level of reasoning effort to use (low, medium, high)",
                    "default": DEFAULT_REASONING_EFFORT.value,
                },
                "response_format": {
                    "type": "object",
                    "properties": {
                        "type": {
                            "type": "string",
                            "enum": ["text"],
                            "description": "Type of response format",
                        },
                    },
                    "default": {"type": "text"},
                },
            },
            "required": ["messages"],
        },
    },
]


def get_tool_definitions() -> list[dict[str, Any]]:
    """Get the tool definitions advertised to MCP clients."""
    return TOOL_DEFINITIONS
