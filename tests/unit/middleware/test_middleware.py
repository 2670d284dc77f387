"""Unit tests for middleware."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Create a minimal FastAPI app with logging and request ID middleware."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def _():
        return {"ok": True}

    @app.get("/missing")
    async def _missing():
        return JSONResponse({"message": "nope"}, status_code=404)

    return app


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id_when_not_provided(self):
        """Response includes a generated X-Request-ID header."""
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/test")

        assert "x-request-id" in response.headers
        assert len(response.headers["x-request-id"]) > 0

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self):
        """Provided X-Request-ID is propagated to response."""
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/test", headers={"X-Request-ID": "custom-req-123"})

        assert response.headers["x-request-id"] == "custom-req-123"

    @pytest.mark.asyncio
    async def test_replaces_malformed_request_id(self):
        """IDs with unexpected characters are not echoed back."""
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/test", headers={"X-Request-ID": "bad id <script>"})

        assert response.headers["x-request-id"] != "bad id <script>"
        assert len(response.headers["x-request-id"]) == 36

    @pytest.mark.asyncio
    async def test_auto_generated_ids_differ(self):
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            r1 = await c.get("/test")
            r2 = await c.get("/test")

        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_logs_completed_request(self):
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        with patch("api.middleware.logging.logger", MagicMock()) as mock_logger:
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.get("/test")

        assert response.status_code == 200
        mock_logger.info.assert_called_once()
        event = mock_logger.info.call_args
        assert event.args[0] == "request_completed"
        assert event.kwargs["status_code"] == 200
        assert event.kwargs["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_client_errors_logged_as_warning(self):
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        with patch("api.middleware.logging.logger", MagicMock()) as mock_logger:
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.get("/missing")

        assert response.status_code == 404
        mock_logger.warning.assert_called_once()
        mock_logger.info.assert_not_called()
