"""
Tests for the placeholder data endpoint (api/routes/data.py).

    GET  /api/data  → always the empty-data envelope
    POST /api/data  → always the acknowledgement for valid JSON; 400 otherwise
"""
import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

EMPTY_ENVELOPE = {
    "success": True,
    "data": [],
    "message": "API endpoint ready for integration",
}
ACK = {"success": True, "message": "Data updated successfully"}


class TestGetData:
    def test_without_type(self, app_client):
        resp = app_client.get("/api/data")
        assert resp.status_code == 200
        assert resp.json() == EMPTY_ENVELOPE

    @pytest.mark.parametrize("query", [
        "?type=personas",
        "?type=problems",
        "?type=",
        "?type=a&type=b",
        "?type=%25ZZ",
        "?type=%3Cscript%3E",
        "?type=" + "x" * 500,
        "?unrelated=1",
    ])
    def test_type_is_ignored(self, app_client, query):
        resp = app_client.get("/api/data" + query)
        assert resp.status_code == 200
        assert resp.json() == EMPTY_ENVELOPE

    def test_content_type_is_json(self, app_client):
        resp = app_client.get("/api/data")
        assert resp.headers["content-type"].startswith("application/json")


class TestPostData:
    @pytest.mark.parametrize("body", [
        {"personas": [{"id": "cio"}]},
        [],
        [1, 2, 3],
        "a string",
        42,
        None,
        {},
    ])
    def test_any_valid_json_is_acknowledged(self, app_client, body):
        resp = app_client.post(
            "/api/data",
            content=json.dumps(body),
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert resp.json() == ACK

    def test_response_never_reflects_body(self, app_client):
        resp = app_client.post("/api/data", json={"secret_marker": "zebra-42"})
        assert resp.status_code == 200
        assert "zebra-42" not in resp.text
        assert "secret_marker" not in resp.text

    def test_content_type_header_not_required(self, app_client):
        resp = app_client.post("/api/data", content=b'{"a": 1}')
        assert resp.status_code == 200
        assert resp.json() == ACK

    def test_malformed_json_returns_400(self, app_client):
        resp = app_client.post(
            "/api/data",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "Bad request"
        assert data["status_code"] == 400
        assert data["detail"]

    def test_deeply_nested_json_is_acknowledged(self, app_client):
        body = "[" * 100_000 + "]" * 100_000
        resp = app_client.post(
            "/api/data",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert resp.json() == ACK

    def test_empty_body_returns_400(self, app_client):
        resp = app_client.post("/api/data", content=b"")
        assert resp.status_code == 400

    def test_undecodable_body_returns_400(self, app_client):
        resp = app_client.post("/api/data", content=b"\x80\x81\x82")
        assert resp.status_code == 400


class TestOtherMethods:
    def test_put_not_allowed(self, app_client):
        resp = app_client.put("/api/data", json={})
        assert resp.status_code == 405
        assert resp.json()["status_code"] == 405

    def test_unknown_api_path_is_json_404(self, app_client):
        resp = app_client.get("/api/unknown")
        assert resp.status_code == 404
        data = resp.json()
        assert data["error"] == "Not Found"
        assert data["status_code"] == 404
