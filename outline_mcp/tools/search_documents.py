"""
MCP Tool - search_documents

Keyword search across published Outline documents.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR, INVALID_PARAMS, TextContent, Tool

from outline_mcp.schemas import SearchRequest
from outline_mcp.schemas.search import (
    MAX_CHARS_MAX,
    MAX_CHARS_MIN,
    TOP_K_MAX,
    TOP_K_MIN,
)
from outline_mcp.services import SearchService

NAME = "search_documents"

TOOL = Tool(
    name=NAME,
    description="Search for documents in your Outline wiki instance",
    inputSchema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query",
            },
            "top_k": {
                "type": "number",
                "description": "Number of documents to return (default: 3)",
                "minimum": TOP_K_MIN,
                "maximum": TOP_K_MAX,
            },
            "max_chars": {
                "type": "number",
                "description": "Maximum number of characters per document (default: 4000)",
                "minimum": MAX_CHARS_MIN,
                "maximum": MAX_CHARS_MAX,
            },
        },
        "required": ["query"],
    },
)


def parse_arguments(arguments: Optional[Any]) -> SearchRequest:
    """
    Validate raw tool arguments.

    Raises:
        McpError: INVALID_PARAMS for a missing/non-object payload or a
            non-string query
    """
    if not isinstance(arguments, dict):
        raise McpError(ErrorData(
            code=INVALID_PARAMS,
            message="Arguments must be an object",
        ))
    try:
        return SearchRequest.model_validate(arguments)
    except ValidationError as e:
        raise McpError(ErrorData(
            code=INVALID_PARAMS,
            message="Query must be a string",
            data=e.errors(include_url=False, include_context=False),
        )) from e


async def handle(service: SearchService, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
    """
    Run a search_documents call.

    Returns:
        A single text block holding the results as pretty-printed JSON
    """
    request = parse_arguments(arguments)

    try:
        documents = await service.search_documents(
            query=request.query,
            top_k=request.top_k,
            max_chars=request.max_chars,
        )
    except McpError:
        raise
    except Exception as e:
        raise McpError(ErrorData(
            code=INTERNAL_ERROR,
            message=f"Failed to search documents: {e}",
        )) from e

    payload = json.dumps(
        [doc.model_dump() for doc in documents],
        indent=2,
        ensure_ascii=False,
    )
    return [TextContent(type="text", text=payload)]
