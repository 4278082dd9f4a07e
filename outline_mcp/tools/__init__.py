"""
Tools Module - MCP Tool Implementations
"""

from outline_mcp.tools import search_documents

__all__ = [
    "search_documents",
]
