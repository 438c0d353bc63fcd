"""Versioned prompts injected into downstream calls."""

from mcp_openai.infrastructure.ai.prompts.planner_executor_v1 import (
    PLANNER_EXECUTOR_DOCUMENT,
    render_developer_content,
)

__all__ = ["PLANNER_EXECUTOR_DOCUMENT", "render_developer_content"]
