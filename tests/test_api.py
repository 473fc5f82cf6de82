"""Tests for the FastAPI application.

WHY: Validates every endpoint: happy paths, malformed expressions
(422 with the detail), invalid request bodies, and unknown formats.

HOW: Uses FastAPI TestClient for synchronous in-process testing. The
configured default notation is pinned with monkeypatch where a test
relies on it.

RULES:
- Each test is independent; the app keeps no state between requests
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from arithmetic import __version__, config
from arithmetic.server.app import app


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /calculations
# ---------------------------------------------------------------------------


class TestCalculations:

    def test_infix(self, client):
        resp = client.post("/calculations", json={"expression": "12-(4*3)", "notation": "infix"})
        assert resp.status_code == 200
        assert resp.json() == {"expression": "12-(4*3)", "notation": "infix", "result": "0"}

    def test_postfix(self, client):
        resp = client.post("/calculations", json={"expression": "10 5 3 * +", "notation": "postfix"})
        assert resp.status_code == 200
        assert resp.json()["result"] == "25"

    def test_default_notation(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "postfix")
        resp = client.post("/calculations", json={"expression": "10 5 +"})
        assert resp.status_code == 200
        assert resp.json()["notation"] == "postfix"
        assert resp.json()["result"] == "15"

    def test_malformed_expression_returns_422(self, client):
        resp = client.post("/calculations", json={"expression": "A+12", "notation": "infix"})
        assert resp.status_code == 422
        assert resp.json()["detail"] == "Unallowed character in expression A+12"

    def test_division_by_zero_returns_422(self, client):
        resp = client.post("/calculations", json={"expression": "1/0", "notation": "infix"})
        assert resp.status_code == 422
        assert "Division by zero" in resp.json()["detail"]

    def test_unknown_notation_rejected_by_validation(self, client):
        resp = client.post("/calculations", json={"expression": "1", "notation": "prefix"})
        assert resp.status_code == 422

    def test_missing_expression(self, client):
        resp = client.post("/calculations", json={"notation": "infix"})
        assert resp.status_code == 422

    def test_misconfigured_default_notation_returns_500(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "prefix")
        resp = client.post("/calculations", json={"expression": "10+5"})
        assert resp.status_code == 500
        assert "ARITHMETIC_NOTATION" in resp.json()["detail"]

    def test_explicit_notation_ignores_misconfigured_default(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "prefix")
        resp = client.post("/calculations", json={"expression": "10+5", "notation": "infix"})
        assert resp.status_code == 200
        assert resp.json()["result"] == "15"


# ---------------------------------------------------------------------------
# POST /parse
# ---------------------------------------------------------------------------


class TestParse:

    def test_tokens(self, client):
        resp = client.post("/parse", json={"expression": "(12+4)*3", "notation": "infix"})
        assert resp.status_code == 200
        assert resp.json()["tokens"] == ["12", "4", "+", "3", "*"]

    def test_malformed(self, client):
        resp = client.post("/parse", json={"expression": "10 5 +3", "notation": "postfix"})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# POST /render
# ---------------------------------------------------------------------------


class TestRender:

    def test_json_document(self, client):
        resp = client.post("/render", json={
            "values": ["10+5", "A+12"],
            "notation": "infix",
            "format": "json",
        })
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        body = resp.json()
        assert body["failed"] == 1
        assert body["results"][0]["result"] == "15"
        assert body["results"][1]["result"] == config.MALFORMED_PLACEHOLDER

    def test_plain_text_document(self, client):
        resp = client.post("/render", json={
            "values": ["10 5 +"],
            "notation": "postfix",
            "format": "plain_text",
        })
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "10 5 + = 15\n"

    def test_misconfigured_default_notation_returns_500(self, client, monkeypatch):
        monkeypatch.setattr(config, "DEFAULT_NOTATION", "prefix")
        resp = client.post("/render", json={"values": ["1+1"], "format": "json"})
        assert resp.status_code == 500
        assert "Server misconfigured" in resp.json()["detail"]

    def test_unknown_format(self, client):
        resp = client.post("/render", json={"values": [], "notation": "infix", "format": "xml"})
        assert resp.status_code == 400
        assert "Unknown output format" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# GET /formats, GET /health
# ---------------------------------------------------------------------------


class TestFormats:

    def test_lists_registered_formats(self, client):
        resp = client.get("/formats")
        assert resp.status_code == 200
        assert resp.json() == [
            {"key": "json", "name": "JSON results", "media_type": "application/json"},
            {"key": "plain_text", "name": "Plain text", "media_type": "text/plain"},
        ]


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
