"""Integration tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from citation_grounding.api.app import create_app
from citation_grounding.config.settings import Settings

PAYLOAD = {
    "generatedText": 'As noted, "Trust is earned slowly." (Müller, 2020)',
    "corpus": [{"name": "doc1", "content": "Trust is earned slowly. Everything else follows."}],
}


@pytest.fixture
def client():
    with TestClient(create_app(Settings())) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["levels"] == ["exact-quote", "author-year", "filename", "topical", "plausibility"]


def test_validate(client):
    resp = client.post("/validate", json=PAYLOAD)
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 1
    assert body["validCount"] == 1
    assert body["groundingScore"] == 100.0
    assert body["results"][0]["matchedDocument"] == "doc1"


def test_validate_missing_text(client):
    resp = client.post("/validate", json={"corpus": []})
    assert resp.status_code == 422


def test_validate_markdown(client):
    resp = client.post("/validate/markdown", json=PAYLOAD)
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/markdown")
    assert "# Citation Grounding Report" in resp.text


def test_request_id_is_echoed(client):
    resp = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert resp.headers["X-Request-ID"] == "req-123"
    assert "X-Duration-MS" in resp.headers
