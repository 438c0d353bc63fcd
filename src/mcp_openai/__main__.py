"""Entry point for `python -m mcp_openai`."""

from mcp_openai.mcp.server import main

main()
