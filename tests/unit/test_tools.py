"""
Unit tests for the openai_chat and openai_plan tool handlers.
"""

import pytest

from mcp_openai.infrastructure.ai.prompts import PLANNER_EXECUTOR_DOCUMENT
from mcp_openai.mcp.models import NO_RESPONSE_TEXT, PLAN_MODELS, SUPPORTED_MODELS
from mcp_openai.mcp.tools import openai_chat, openai_plan
from mcp_openai.shared.exceptions import AIServiceError

HI = [{"role": "user", "content": "hi"}]


class TestOpenAIChat:
    """Tests for the openai_chat handler."""

    @pytest.mark.asyncio
    async def test_downstream_call_options(self, mock_client):
        """Test fixed temperature and max_tokens are sent."""
        response = await openai_chat({"messages": HI, "model": "gpt-4o"}, mock_client)

        mock_client.complete.assert_awaited_once_with(
            "gpt-4o",
            [{"role": "user", "content": "hi"}],
            temperature=0.7,
            max_tokens=2000,
        )
        assert response.is_error is False
        assert response.content[0].text == "Hello from OpenAI"

    @pytest.mark.asyncio
    async def test_default_model(self, mock_client):
        await openai_chat({"messages": HI}, mock_client)
        assert mock_client.complete.call_args.args[0] == "gpt-4o"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("model", SUPPORTED_MODELS)
    async def test_all_supported_models(self, mock_client, model):
        response = await openai_chat({"messages": HI, "model": model}, mock_client)
        assert response.is_error is False
        assert mock_client.complete.call_args.args[0] == model

    @pytest.mark.asyncio
    async def test_unsupported_model_is_domain_failure(self, mock_client):
        response = await openai_chat({"messages": HI, "model": "gpt-3.5-turbo"}, mock_client)

        assert response.is_error is True
        assert response.content[0].text.startswith("OpenAI API error:")
        assert "Unsupported model: gpt-3.5-turbo" in response.content[0].text
        mock_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_response_uses_placeholder(self, mock_client, make_response):
        """Test a missing first choice is reported as success with a placeholder."""
        mock_client.complete.return_value = make_response(content=None)

        response = await openai_chat({"messages": HI}, mock_client)

        assert response.is_error is False
        assert response.content[0].text == NO_RESPONSE_TEXT

    @pytest.mark.asyncio
    async def test_downstream_failure_is_wrapped(self, mock_client):
        mock_client.complete.side_effect = AIServiceError("Incorrect API key provided")

        response = await openai_chat({"messages": HI}, mock_client)

        assert response.is_error is True
        assert response.content[0].text == "OpenAI API error: Incorrect API key provided"

    @pytest.mark.asyncio
    async def test_unexpected_failure_is_wrapped(self, mock_client):
        mock_client.complete.side_effect = RuntimeError("socket closed")

        response = await openai_chat({"messages": HI}, mock_client)

        assert response.is_error is True
        assert response.content[0].text == "OpenAI API error: socket closed"

    @pytest.mark.asyncio
    async def test_malformed_arguments_are_wrapped(self, mock_client):
        response = await openai_chat({"messages": "not a list"}, mock_client)

        assert response.is_error is True
        assert response.content[0].text.startswith("OpenAI API error:")
        mock_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_developer_message_sent_as_assistant(self, mock_client):
        await openai_chat(
            {"messages": [{"role": "developer", "content": "context"}]}, mock_client
        )
        sent = mock_client.complete.call_args.args[1]
        assert sent == [{"role": "assistant", "content": "context"}]


class TestOpenAIPlan:
    """Tests for the openai_plan handler."""

    @pytest.mark.asyncio
    async def test_defaults(self, mock_client):
        """Test default model, reasoning effort and forced response format."""
        response = await openai_plan({"messages": HI}, mock_client)

        mock_client.complete.assert_awaited_once_with(
            "o1-2024-12-17",
            [{"role": "user", "content": "hi"}],
            reasoning_effort="low",
            response_format={"type": "text"},
        )
        assert response.is_error is False

    @pytest.mark.asyncio
    async def test_no_sampling_controls(self, mock_client):
        await openai_plan({"messages": HI}, mock_client)
        kwargs = mock_client.complete.call_args.kwargs
        assert "temperature" not in kwargs
        assert "max_tokens" not in kwargs

    @pytest.mark.asyncio
    async def test_response_format_always_text(self, mock_client):
        await openai_plan(
            {"messages": HI, "response_format": {"type": "json_object"}}, mock_client
        )
        assert mock_client.complete.call_args.kwargs["response_format"] == {"type": "text"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fmt", [None, "json", {"type": 5}])
    async def test_malformed_response_format_ignored(self, mock_client, fmt):
        """Test any requested response_format is discarded rather than rejected."""
        response = await openai_plan({"messages": HI, "response_format": fmt}, mock_client)

        assert response.is_error is False
        assert mock_client.complete.call_args.kwargs["response_format"] == {"type": "text"}

    @pytest.mark.asyncio
    async def test_reasoning_effort_forwarded(self, mock_client):
        await openai_plan({"messages": HI, "reasoning_effort": "high"}, mock_client)
        assert mock_client.complete.call_args.kwargs["reasoning_effort"] == "high"

    @pytest.mark.asyncio
    async def test_null_reasoning_effort_left_unset(self, mock_client):
        await openai_plan({"messages": HI, "reasoning_effort": None}, mock_client)
        assert mock_client.complete.call_args.kwargs["reasoning_effort"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("model", PLAN_MODELS)
    async def test_plan_models_accepted(self, mock_client, model):
        response = await openai_plan({"messages": HI, "model": model}, mock_client)
        assert response.is_error is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("model", ["o1", "o3-mini", "gpt-4o"])
    async def test_models_outside_plan_set_rejected(self, mock_client, model):
        """Test that even advertised identifiers fail outside the validated set."""
        response = await openai_plan({"messages": HI, "model": model}, mock_client)

        assert response.is_error is True
        text = response.content[0].text
        assert text.startswith("OpenAI API error: Unsupported model for reasoning")
        mock_client.complete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_developer_content_replaced(self, mock_client):
        await openai_plan(
            {
                "messages": [
                    {"role": "developer", "content": "caller text"},
                    {"role": "user", "content": "plan this"},
                ]
            },
            mock_client,
        )
        sent = mock_client.complete.call_args.args[1]
        assert sent[0]["role"] == "developer"
        assert sent[0]["content"] == [{"type": "text", "text": PLANNER_EXECUTOR_DOCUMENT}]
        assert sent[1] == {"role": "user", "content": "plan this"}

    @pytest.mark.asyncio
    async def test_downstream_failure_is_wrapped(self, mock_client):
        mock_client.complete.side_effect = AIServiceError("model overloaded")

        response = await openai_plan({"messages": HI}, mock_client)

        assert response.to_dict() == {
            "content": [{"type": "text", "text": "OpenAI API error: model overloaded"}],
            "isError": True,
        }
