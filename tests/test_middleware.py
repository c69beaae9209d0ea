"""
Tests for API Middleware.

Tests:
- Security headers middleware
- Request ID middleware
- Request logging helpers
"""

from types import SimpleNamespace

from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from backend.app.middleware import security
from backend.app.middleware.request_id import RequestIDMiddleware
from backend.app.middleware.security import SecurityHeadersMiddleware
from core.logging import mask_email


async def _ok(request):
    return JSONResponse({"status": "ok"})


def _app(*middleware) -> Starlette:
    app = Starlette(routes=[Route("/test", _ok)])
    for cls in middleware:
        app.add_middleware(cls)
    return app


class TestSecurityHeadersMiddleware:
    def test_adds_security_headers(self):
        client = TestClient(_app(SecurityHeadersMiddleware))
        response = client.get("/test")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Referrer-Policy"] == "no-referrer"
        assert response.headers["Cache-Control"] == "no-store"
        assert "Strict-Transport-Security" not in response.headers

    def test_hsts_in_production(self, monkeypatch):
        monkeypatch.setattr(security, "get_settings", lambda: SimpleNamespace(is_production=True))

        client = TestClient(_app(SecurityHeadersMiddleware))
        response = client.get("/test")

        assert response.headers["Strict-Transport-Security"].startswith("max-age=31536000")


class TestRequestIDMiddleware:
    def test_generates_id_when_absent(self):
        client = TestClient(_app(RequestIDMiddleware))
        response = client.get("/test")

        assert len(response.headers["X-Request-ID"]) == 36

    def test_echoes_valid_id(self):
        client = TestClient(_app(RequestIDMiddleware))
        response = client.get("/test", headers={"X-Request-ID": "abc.123_x-y"})

        assert response.headers["X-Request-ID"] == "abc.123_x-y"

    def test_replaces_oversized_id(self):
        client = TestClient(_app(RequestIDMiddleware))
        response = client.get("/test", headers={"X-Request-ID": "a" * 65})

        assert response.headers["X-Request-ID"] != "a" * 65


def test_mask_email():
    assert mask_email("jane.doe@example.com") == "ja***@example.com"
    assert mask_email(None) == "***"
    assert mask_email("no-at-sign") == "***"
