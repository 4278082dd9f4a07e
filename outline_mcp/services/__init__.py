"""
Services Module - Business Logic Layer

Provides the Outline API client and the keyword fallback search.
"""

from outline_mcp.services.outline_client import OutlineClient, OutlineAPIError
from outline_mcp.services.search_service import SearchService, extract_keywords

__all__ = [
    "OutlineClient",
    "OutlineAPIError",
    "SearchService",
    "extract_keywords",
]
