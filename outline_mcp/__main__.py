"""Run the Outline MCP server with `python -m outline_mcp`."""

from outline_mcp.server import main

main()
