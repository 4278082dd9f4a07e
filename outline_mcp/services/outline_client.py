"""
Services - Outline Client

Thin async wrapper around the Outline REST API (documents.search, documents.info).
"""

import logging
from typing import Optional, Dict, Any, List

import httpx

from outline_mcp.config import get_settings

logger = logging.getLogger(__name__)


class OutlineAPIError(Exception):
    """Upstream request failed (transport error or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status {self.status_code})"
        return self.message


def _redact(headers: httpx.Headers) -> Dict[str, str]:
    redacted = dict(headers)
    if "authorization" in redacted:
        redacted["authorization"] = "Bearer ***"
    return redacted


async def log_request(request: httpx.Request) -> None:
    logger.info("Request: %s %s", request.method, request.url)
    logger.debug("Request headers: %s", _redact(request.headers))


async def log_response(response: httpx.Response) -> None:
    await response.aread()
    logger.info(
        "Response: %s %s -> %s",
        response.request.method,
        response.request.url,
        response.status_code,
    )
    logger.debug("Response body: %s", response.text)


class OutlineClient:
    """Posts JSON requests to an Outline instance with bearer auth."""

    def __init__(
        self,
        settings=None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        log_traffic: bool = True,
    ):
        self.settings = settings or get_settings()
        self.base_url = self.settings.outline.instance_url
        event_hooks = (
            {"request": [log_request], "response": [log_response]}
            if log_traffic else {}
        )
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.settings.outline.api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.settings.outline.timeout_seconds,
            transport=transport,
            event_hooks=event_hooks,
        )

    async def __aenter__(self) -> "OutlineClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to /api/<endpoint> and return the decoded JSON body.

        Raises:
            OutlineAPIError: on network failure or a non-2xx status
        """
        try:
            response = await self._client.post(f"/api/{endpoint}", json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response) or str(e)
            logger.error(
                "Error: status=%s body=%s message=%s",
                e.response.status_code,
                e.response.text,
                message,
            )
            raise OutlineAPIError(message, e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error("Error: %s %s", type(e).__name__, e)
            raise OutlineAPIError(str(e) or type(e).__name__) from e
        except ValueError as e:
            # body was not JSON
            raise OutlineAPIError(f"Invalid JSON response: {e}") from e

    async def search(
        self,
        query: str,
        limit: int,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Search published documents.

        Returns:
            Raw hits, each shaped like {"document": {...}, "context": "..."}
        """
        body = await self.post("documents.search", {
            "query": query,
            "limit": limit,
            "offset": offset,
            "statusFilter": ["published"],
        })
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            return []
        return data

    async def document_info(self, document_id: str) -> Dict[str, Any]:
        """Fetch a full document by id."""
        body = await self.post("documents.info", {"id": document_id})
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise OutlineAPIError(f"Document {document_id} returned no data")
        return data


def _error_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
