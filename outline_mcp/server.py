"""
Outline MCP Server - Main Entry Point

Exposes Outline document search as an MCP tool over STDIO.
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from outline_mcp.config import get_settings
from outline_mcp.logging_config import setup_logging
from outline_mcp.services import OutlineClient, SearchService
from outline_mcp.tools import search_documents

logger = logging.getLogger(__name__)

SERVER_NAME = "outline-server"
SERVER_VERSION = "0.1.0"


class OutlineServer:
    """MCP façade owning the settings, the upstream client and the tool handlers."""

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # Fails here, before any handler is registered, if config is missing
        self.settings = settings or get_settings()
        self.client = OutlineClient(self.settings, transport=transport)
        self.search_service = SearchService(self.client)

        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        # Registered raw so McpError codes reach the client as JSON-RPC errors
        self.server.request_handlers[types.CallToolRequest] = self._handle_call_tool

    async def list_tools(self) -> List[types.Tool]:
        return [search_documents.TOOL]

    async def call_tool(
        self,
        name: str,
        arguments: Optional[Dict[str, Any]],
    ) -> List[types.TextContent]:
        """
        Dispatch a tool call by name.

        Raises:
            McpError: METHOD_NOT_FOUND for unknown tools, or whatever the
                tool handler raises
        """
        if name != search_documents.NAME:
            raise McpError(types.ErrorData(
                code=types.METHOD_NOT_FOUND,
                message=f"Unknown tool: {name}",
            ))
        return await search_documents.handle(self.search_service, arguments)

    async def _handle_call_tool(self, request: types.CallToolRequest) -> types.ServerResult:
        try:
            content = await self.call_tool(request.params.name, request.params.arguments)
        except McpError as e:
            logger.error("[MCP Error] %s (code %s)", e.error.message, e.error.code)
            raise
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    async def run(self) -> None:
        """Serve over STDIO until the client disconnects or the task is cancelled."""
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Outline MCP server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.client.aclose()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Outline MCP Server")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (default: from env)"
    )
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(stream=sys.stderr, level=logging.INFO)
        logger.critical(
            "OUTLINE_API_KEY and OUTLINE_INSTANCE_URL environment variables are required\n%s",
            e,
        )
        sys.exit(1)

    if args.log_level:
        settings.log.level = args.log_level
    setup_logging(settings.log)

    server = OutlineServer(settings)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, server closed")


if __name__ == "__main__":
    main()
