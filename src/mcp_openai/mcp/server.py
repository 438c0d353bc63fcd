"""MCP Server for mcp-openai.

This server exposes two tools over the Model Context Protocol (stdio):
- openai_chat: Chat completion with a general-purpose or reasoning model
- openai_plan: Planning with a reasoning model and a reasoning_effort level

Every tool call is handled to completion, with a single downstream call,
before the next request is read. Domain failures come back as tool results
with isError set; only an unknown tool name is a protocol-level error.

Usage with an MCP client:
    {
        "mcpServers": {
            "openai": {
                "command": "mcp-openai",
                "env": {"OPENAI_API_KEY": "sk-..."}
            }
        }
    }
"""

import asyncio
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import ValidationError as PydanticValidationError

from mcp_openai import __version__
from mcp_openai.config import MISSING_API_KEY_MESSAGE, Settings, get_settings
from mcp_openai.infrastructure.ai.factory import AIClient, build_ai_client
from mcp_openai.mcp.catalog import get_tool_definitions
from mcp_openai.mcp.models import ToolResponse
from mcp_openai.mcp.tools import openai_chat, openai_plan
from mcp_openai.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)

SERVER_NAME = "mcp-openai"

ToolHandler = Callable[[dict[str, Any], AIClient], Awaitable[ToolResponse]]

TOOL_HANDLERS: dict[str, ToolHandler] = {
    "openai_chat": openai_chat,
    "openai_plan": openai_plan,
}


class MCPServer:
    """MCP Server for the OpenAI tools.

    Holds the shared completion client and routes tool calls by name. The
    client is created once at startup and only read afterwards.
    """

    def __init__(self, client: AIClient, name: str = SERVER_NAME, version: str = __version__):
        self.client = client
        self.tools = {tool["name"]: tool for tool in get_tool_definitions()}
        self.server = self._build_sdk_server(name, version)

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the static tool catalog."""
        return list(self.tools.values())

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> ToolResponse:
        """Dispatch a tool call.

        Raises:
            McpError: METHOD_NOT_FOUND if the tool name is unknown
        """
        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
            )

        with structlog.contextvars.bound_contextvars(tool=name):
            logger.info("tool_call_started")
            response = await handler(arguments or {}, self.client)
            logger.info("tool_call_finished", is_error=response.is_error)
        return response

    def _build_sdk_server(self, name: str, version: str) -> Server:
        server: Server = Server(name, version=version)

        @server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return [
                types.Tool(
                    name=tool["name"],
                    description=tool["description"],
                    inputSchema=tool["inputSchema"],
                )
                for tool in self.list_tools()
            ]

        # Registered directly rather than via @server.call_tool(), which would
        # turn McpError for unknown tools into an isError result.
        async def _call_tool(request: types.CallToolRequest) -> types.ServerResult:
            response = await self.call_tool(request.params.name, request.params.arguments)
            return types.ServerResult(types.CallToolResult.model_validate(response.to_dict()))

        server.request_handlers[types.CallToolRequest] = _call_tool
        return server

    async def run_stdio(self) -> None:
        """Run the server in stdio mode."""
        logger.info("mcp_server_starting", transport="stdio", version=__version__)
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def serve(settings: Settings) -> None:
    """Build the shared client and serve until stdin closes."""
    client = build_ai_client(settings)
    try:
        await MCPServer(client).run_stdio()
    finally:
        await client.close()


def main() -> None:
    """Run the MCP server."""
    try:
        settings = get_settings()
    except PydanticValidationError as e:
        if any(err["loc"] == ("openai_api_key",) for err in e.errors()):
            sys.exit(MISSING_API_KEY_MESSAGE)
        sys.exit(f"Invalid configuration:\n{e}")
    except (RuntimeError, ValueError) as e:
        sys.exit(f"Invalid configuration: {e}")

    setup_logging(settings)

    try:
        asyncio.run(serve(settings))
    except Exception:
        logger.exception("server_start_failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
