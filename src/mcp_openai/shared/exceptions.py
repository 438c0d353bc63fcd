"""Custom exception hierarchy for mcp-openai."""

from collections.abc import Iterable
from typing import Any


class MCPOpenAIError(Exception):
    """Base exception for all mcp-openai errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


# ----- Validation Errors -----


class ValidationError(MCPOpenAIError):
    """Tool input validation failed."""

    pass


class UnsupportedModelError(ValidationError):
    """Requested model is not allowed for the tool."""

    def __init__(self, model: str, allowed: Iterable[str], prefix: str = "Unsupported model") -> None:
        allowed_models = list(allowed)
        super().__init__(
            message=f"{prefix}: {model}. Must be one of: {', '.join(allowed_models)}",
            details={"model": model, "allowed": allowed_models},
        )


# ----- External Service Errors -----


class ExternalServiceError(MCPOpenAIError):
    """Error from an external service."""

    pass


class AIServiceError(ExternalServiceError):
    """Error from the OpenAI API."""

    pass


class AIRateLimitError(AIServiceError):
    """OpenAI API rate limit exceeded."""

    pass
