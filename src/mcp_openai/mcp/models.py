"""Pydantic models for MCP tool input validation and responses.

These models define the argument shapes of the openai_chat and openai_plan
tools, the closed model-identifier sets each tool accepts, and the uniform
response envelope every handler returns.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ============================================================================
# Model Identifiers
# ============================================================================

SUPPORTED_MODELS = ("gpt-4o", "gpt-4o-mini", "o1-preview", "o1-mini", "o1", "o3-mini")
DEFAULT_CHAT_MODEL = "gpt-4o"

# Advertised in the catalog for openai_plan
PLAN_ADVERTISED_MODELS = ("o1-preview", "o1-mini", "o1", "o3-mini")
ADVERTISED_PLAN_MODEL = "o1"

# Accepted by openai_plan validation; "o1" is advertised but "o1-2024-12-17" is enforced
PLAN_MODELS = ("o1-preview", "o1-mini", "o1-2024-12-17")
DEFAULT_PLAN_MODEL = "o1-2024-12-17"

NO_RESPONSE_TEXT = "No response received"


# ============================================================================
# Enums
# ============================================================================


class MessageRole(str, Enum):
    """Role of a message sender."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    DEVELOPER = "developer"  # Native to openai_plan only


class ReasoningEffort(str, Enum):
    """Reasoning effort level for reasoning models."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_REASONING_EFFORT = ReasoningEffort.LOW


# ============================================================================
# Messages
# ============================================================================


class ContentPart(BaseModel):
    """A typed content part. Only text parts are recognized."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = Field(..., description="Type of content part")
    text: str = Field(..., description="Text content")


class Message(BaseModel):
    """A single conversational turn."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole = Field(..., description="Role of the message sender")
    content: str | list[ContentPart] = Field(
        ..., description="Content as a string or as an ordered list of text parts"
    )


# ============================================================================
# Tool Input Models
# ============================================================================


class OpenAIChatInput(BaseModel):
    """Input model for the openai_chat tool."""

    model_config = ConfigDict(extra="ignore")

    messages: list[Message] = Field(..., description="Array of messages to send to the API")
    model: str = Field(
        default=DEFAULT_CHAT_MODEL,
        description=f"Model to use for completion ({', '.join(SUPPORTED_MODELS)})",
    )


class OpenAIPlanInput(BaseModel):
    """Input model for the openai_plan tool."""

    model_config = ConfigDict(extra="ignore")

    messages: list[Message] = Field(..., description="Array of messages to send to the API")
    model: str = Field(
        default=DEFAULT_PLAN_MODEL, description="reasoning model to use for completion"
    )
    reasoning_effort: ReasoningEffort | None = Field(
        default=DEFAULT_REASONING_EFFORT,
        description="Level of reasoning effort to use (low, medium, high)",
    )
    # Accepted in any shape and discarded; the outgoing call always asks for text.
    response_format: Any = Field(default_factory=lambda: {"type": "text"})

    @field_validator("reasoning_effort", mode="before")
    @classmethod
    def empty_effort_is_unset(cls, v: Any) -> Any:
        if v == "":
            return None
        return v


# ============================================================================
# Response Envelope
# ============================================================================


class TextContent(BaseModel):
    """Text content block of a tool response."""

    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    """Uniform envelope returned by every tool handler."""

    content: list[TextContent]
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)], is_error=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape; isError is only present on failure."""
        result: dict[str, Any] = {"content": [c.model_dump() for c in self.content]}
        if self.is_error:
            result["isError"] = True
        return result
