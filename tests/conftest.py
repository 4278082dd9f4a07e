"""
Shared fixtures: settings and a fake Outline API behind httpx.MockTransport.
"""

import json

import httpx
import pytest

from outline_mcp.config import Settings, OutlineSettings, LogSettings
from outline_mcp.services import OutlineClient, SearchService


INSTANCE_URL = "https://wiki.example.com"


class FakeOutline:
    """Minimal stand-in for the Outline documents.search / documents.info API."""

    def __init__(self, search_results=None, documents=None, search_status=200):
        self.search_results = search_results or {}
        self.documents = documents or {}
        self.search_status = search_status
        self.requests = []

    def searches(self):
        return [body for path, body in self.requests if path == "/api/documents.search"]

    def infos(self):
        return [body["id"] for path, body in self.requests if path == "/api/documents.info"]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append((request.url.path, body))

        if request.url.path == "/api/documents.search":
            if self.search_status != 200:
                return httpx.Response(
                    self.search_status,
                    json={"ok": False, "message": "Authentication required"},
                )
            return httpx.Response(200, json={"data": self.search_results.get(body["query"], [])})

        if request.url.path == "/api/documents.info":
            doc = self.documents.get(body["id"])
            if doc is None:
                return httpx.Response(404, json={"ok": False, "message": "Resource not found"})
            return httpx.Response(200, json={"data": doc})

        return httpx.Response(404)


def make_hit(doc_id, title="Doc", url_id=None, context="snippet"):
    document = {"id": doc_id, "title": title}
    if url_id:
        document["urlId"] = url_id
    return {"document": document, "context": context}


@pytest.fixture
def settings():
    return Settings(
        outline=OutlineSettings(
            OUTLINE_API_KEY="test-key",
            OUTLINE_INSTANCE_URL=INSTANCE_URL + "/",
        ),
        log=LogSettings(LOG_LEVEL="DEBUG", LOG_FORMAT="text"),
    )


@pytest.fixture
def fake_outline():
    return FakeOutline()


@pytest.fixture
def client(settings, fake_outline):
    return OutlineClient(settings, transport=httpx.MockTransport(fake_outline))


@pytest.fixture
def service(client):
    return SearchService(client)
