"""
Schemas Module - Pydantic Models

Data models for search requests and results.
"""

from outline_mcp.schemas.search import SearchRequest, DocumentSummary

__all__ = [
    "SearchRequest",
    "DocumentSummary",
]
