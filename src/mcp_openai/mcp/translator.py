"""Message translation into the OpenAI chat completion shape.

Both translators are order preserving and one-to-one: every input message
yields exactly one output message at the same position.
"""

from collections.abc import Sequence
from typing import Any

from mcp_openai.infrastructure.ai.prompts import render_developer_content
from mcp_openai.mcp.models import ContentPart, Message, MessageRole

INVALID_CONTENT_TEXT = "Invalid content format"

_MULTIPART_ROLES = (MessageRole.USER, MessageRole.ASSISTANT)


def join_content(content: str | Sequence[ContentPart]) -> str:
    """Collapse content into one string, joining text parts on newlines."""
    if isinstance(content, str):
        return content
    return "\n".join(part.text for part in content)


def translate_chat_message(message: Message) -> dict[str, Any]:
    # The chat path has no developer role and no multi-part content.
    if message.role == MessageRole.DEVELOPER:
        return {"role": MessageRole.ASSISTANT.value, "content": join_content(message.content)}
    return {"role": message.role.value, "content": join_content(message.content)}


def translate_plan_message(message: Message) -> dict[str, Any]:
    if message.role == MessageRole.DEVELOPER:
        # Caller content is discarded for the developer role.
        return {"role": MessageRole.DEVELOPER.value, "content": render_developer_content()}

    if isinstance(message.content, str):
        return {"role": message.role.value, "content": message.content}

    if message.role in _MULTIPART_ROLES:
        parts = [{"type": part.type, "text": part.text} for part in message.content]
        return {"role": message.role.value, "content": parts}

    return {"role": MessageRole.USER.value, "content": INVALID_CONTENT_TEXT}


def translate_chat_messages(messages: Sequence[Message]) -> list[dict[str, Any]]:
    """Translate messages for the openai_chat tool."""
    return [translate_chat_message(m) for m in messages]


def translate_plan_messages(messages: Sequence[Message]) -> list[dict[str, Any]]:
    """Translate messages for the openai_plan tool.

    Developer messages are replaced by the fixed planner/executor document.
    User and assistant messages keep list content as typed text parts; any
    other role with list content falls back to a user message carrying a
    placeholder.
    """
    return [translate_plan_message(m) for m in messages]
