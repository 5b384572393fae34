"""
Tests for api/app.py: create_app() factory

Verifies the FastAPI app is created with correct configuration, routers are
registered, and middleware (request IDs, security headers, logging) works.
"""
import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from fastapi.testclient import TestClient

import api.app as app_module
from api.app import _JsonFormatter, configure_logging, create_app
from utils.config import AppConfig


class TestCreateApp:
    def test_creates_fastapi_instance(self):
        app = create_app()
        assert app.title == "Sales Intel Hub"
        assert app.version == "1.0.0"

    def test_config_override(self, monkeypatch):
        monkeypatch.setenv("APP_TITLE", "Partner Enablement")
        app = create_app(AppConfig.from_env())
        assert app.title == "Partner Enablement"

    def test_registers_routes(self):
        route_paths = {getattr(r, "path", "") for r in create_app().routes}
        for path in ("/api/data", "/health", "/", "/partials/shell", "/partials/search"):
            assert path in route_paths

    def test_module_singleton(self):
        assert app_module.app.title == "Sales Intel Hub"


class TestHealth:
    def test_health_ok(self, app_client):
        resp = app_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": "1.0.0"}


class TestMiddleware:
    def test_request_id_header(self, app_client):
        resp = app_client.get("/api/data")
        rid = resp.headers.get("X-Request-ID")
        assert rid and len(rid) == 8

    def test_request_ids_differ(self, app_client):
        a = app_client.get("/health").headers["X-Request-ID"]
        b = app_client.get("/health").headers["X-Request-ID"]
        assert a != b

    def test_security_headers(self, app_client):
        resp = app_client.get("/")
        assert "default-src 'self'" in resp.headers["Content-Security-Policy"]
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["X-Frame-Options"] == "DENY"

    def test_cors_preflight_allows_post(self, app_client):
        resp = app_client.options(
            "/api/data",
            headers={
                "Origin": "https://example.com",
                "Access-Control-Request-Method": "POST",
            },
        )
        assert resp.status_code == 200
        assert "POST" in resp.headers["access-control-allow-methods"]

    def test_static_css_served(self, app_client):
        resp = app_client.get("/static/css/hub.css")
        assert resp.status_code == 200
        assert "text/css" in resp.headers["content-type"]

    def test_openapi_lists_data_endpoint(self, app_client):
        schema = app_client.get("/openapi.json").json()
        assert set(schema["paths"]["/api/data"]) == {"get", "post"}
        assert "/" not in schema["paths"]


class TestJsonFormatter:
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="sales_intel_hub", level=logging.INFO, pathname=__file__,
            lineno=1, msg="request %s", args=("done",), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        data = json.loads(_JsonFormatter().format(self._record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "sales_intel_hub"
        assert data["message"] == "request done"
        assert "timestamp" in data

    def test_extra_fields_merged(self):
        record = self._record(method="GET", path="/api/data", status=200,
                              duration_ms=1.5, request_id="abcd1234")
        data = json.loads(_JsonFormatter().format(record))
        assert data["method"] == "GET"
        assert data["status"] == 200
        assert data["request_id"] == "abcd1234"

    def test_unknown_extra_ignored(self):
        data = json.loads(_JsonFormatter().format(self._record(colour="blue")))
        assert "colour" not in data


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_logging(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_FORMAT", "json")
        configure_logging(AppConfig.from_env())
        root = logging.getLogger()
        assert isinstance(root.handlers[0].formatter, _JsonFormatter)

    def test_level_and_bad_level(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
        configure_logging(AppConfig.from_env())
        assert logging.getLogger().level == logging.WARNING
        monkeypatch.setenv("APP_LOG_LEVEL", "LOUD")
        configure_logging(AppConfig.from_env())
        assert logging.getLogger().level == logging.INFO


class TestJsonRequestLogging:
    def test_json_mode_request(self, monkeypatch):
        monkeypatch.setenv("APP_LOG_FORMAT", "json")
        client = TestClient(create_app(AppConfig.from_env()))
        resp = client.get("/api/data")
        assert resp.status_code == 200
