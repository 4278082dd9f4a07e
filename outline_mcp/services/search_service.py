"""
Services - Search Service

Keyword fallback search over Outline with full-text enrichment.
"""

import asyncio
import logging
import re
from typing import List, Optional, Dict, Any

from mcp.shared.exceptions import McpError
from mcp.types import ErrorData, INTERNAL_ERROR

from outline_mcp.schemas import DocumentSummary
from outline_mcp.services.outline_client import OutlineClient, OutlineAPIError

logger = logging.getLogger(__name__)


STOPWORDS = frozenset({
    "how", "do", "i", "to", "the", "a", "an", "and", "or", "but",
    "in", "on", "at", "what", "where", "when", "why", "which", "who",
    "whom", "whose", "can", "could", "should", "would", "will",
})

_PUNCTUATION_ONLY = re.compile(r"^[^a-zA-Z0-9]+$")


def extract_keywords(query: str) -> List[str]:
    """
    Reduce a natural-language query to its content-bearing tokens.

    Tokens of two characters or fewer, stopwords, and tokens made only of
    punctuation are dropped. Order and duplicates are preserved.
    """
    return [
        word
        for word in query.lower().split()
        if len(word) > 2
        and word not in STOPWORDS
        and not _PUNCTUATION_ONLY.match(word)
    ]


class SearchService:
    """Searches Outline one keyword at a time until something matches."""

    def __init__(self, client: OutlineClient):
        self.client = client
        self.instance_url = client.base_url

    async def get_document(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch full document content.

        Returns:
            Document dict, or None if the fetch failed for any reason
        """
        try:
            return await self.client.document_info(document_id)
        except OutlineAPIError as e:
            logger.warning("Error fetching document %s: %s", document_id, e)
            return None

    async def search_documents(
        self,
        query: str,
        top_k: int = 3,
        max_chars: int = 4000,
    ) -> List[DocumentSummary]:
        """
        Search with keyword fallback.

        Keywords are tried in order; the first one whose search returns any
        hits wins and only its hits are returned. Each hit is enriched with
        the full document text, falling back to the search snippet.

        Args:
            query: Free-text query
            top_k: Hits requested per keyword attempt
            max_chars: Maximum characters of text per result

        Returns:
            List of DocumentSummary (empty if no keyword matched)

        Raises:
            McpError: INTERNAL_ERROR when a search request itself fails
        """
        keywords = extract_keywords(query)
        logger.info("Extracted keywords: %s", keywords)

        documents: List[DocumentSummary] = []
        for keyword in keywords:
            logger.info("Trying search term: %s", keyword)
            try:
                hits = await self.client.search(keyword, limit=top_k, offset=0)
            except OutlineAPIError as e:
                raise McpError(ErrorData(
                    code=INTERNAL_ERROR,
                    message=f"Outline API error: {e} (URL: {self.instance_url})",
                )) from e

            if hits:
                documents = list(await asyncio.gather(
                    *(self._summarize(hit, max_chars) for hit in hits)
                ))
                break

        logger.info("Found %d documents", len(documents))
        return documents

    async def _summarize(self, hit: Dict[str, Any], max_chars: int) -> DocumentSummary:
        doc = hit.get("document") or {}
        doc_id = str(doc.get("id") or "")

        text = None
        full_doc = await self.get_document(doc_id) if doc_id else None
        if full_doc is not None:
            text = full_doc.get("text") or ""
            if not isinstance(text, str):
                logger.warning("Document %s has a non-text body, using snippet", doc_id)
                text = None
        if text is None:
            text = str(hit.get("context") or "")

        return DocumentSummary(
            id=doc_id,
            title=str(doc.get("title") or ""),
            text=text[:max_chars],
            url=f"{self.instance_url}/doc/{doc.get('urlId') or doc_id}",
        )
