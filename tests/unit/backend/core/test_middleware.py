"""
Unit Tests for Request Context Middleware.

Tests the RequestContextMiddleware functionality including:
- Request ID generation and propagation
- Source extraction from X-Frontend-ID header
- Response timing headers
"""

from unittest.mock import MagicMock, patch

import pytest
from starlette.requests import Request
from starlette.responses import Response

from snipshare.backend.core.middleware import RequestContextMiddleware


class TestRequestContextMiddleware:
    """Tests for RequestContextMiddleware."""

    @pytest.fixture
    def middleware(self):
        """Create middleware instance."""
        return RequestContextMiddleware(MagicMock())

    @pytest.fixture
    def mock_request(self):
        """Create a mock request."""
        request = MagicMock(spec=Request)
        request.headers = {}
        request.method = "GET"
        request.url = MagicMock()
        request.url.path = "/api/v1/snippets/my"
        request.client = MagicMock()
        request.client.host = "127.0.0.1"
        request.state = MagicMock()
        return request

    @pytest.mark.asyncio
    async def test_propagates_request_id(self, middleware, mock_request):
        """Should reuse an incoming X-Request-ID."""
        mock_request.headers = {"X-Request-ID": "req-abc"}

        async def call_next(request):
            return Response(content="OK", status_code=200)

        with patch("snipshare.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert mock_request.state.request_id == "req-abc"
        assert response.headers["X-Request-ID"] == "req-abc"

    @pytest.mark.asyncio
    async def test_generates_request_id(self, middleware, mock_request):
        """Should generate a request id when none is supplied."""
        async def call_next(request):
            return Response(content="OK", status_code=200)

        with patch("snipshare.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert len(response.headers["X-Request-ID"]) == 36

    @pytest.mark.asyncio
    async def test_adds_response_time_header(self, middleware, mock_request):
        """Should report elapsed time in milliseconds."""
        async def call_next(request):
            return Response(content="OK", status_code=200)

        with patch("snipshare.backend.core.middleware.structlog.contextvars"):
            response = await middleware.dispatch(mock_request, call_next)

        assert response.headers["X-Response-Time"].endswith("ms")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("header", "expected"),
        [("web", "web"), ("CLI", "cli"), ("toaster", "unknown")],
    )
    async def test_source_extraction(self, middleware, mock_request, header, expected):
        """Should lower-case known sources and fall back to 'unknown'."""
        mock_request.headers = {"X-Frontend-ID": header}

        async def call_next(request):
            assert request.state.source == expected
            return Response(content="OK", status_code=200)

        with patch("snipshare.backend.core.middleware.structlog.contextvars"):
            await middleware.dispatch(mock_request, call_next)

    @pytest.mark.asyncio
    async def test_binds_and_clears_context(self, middleware, mock_request):
        """Should bind request context and clear it afterwards."""
        mock_request.headers = {"X-Request-ID": "req-ctx"}

        async def call_next(request):
            return Response(content="OK", status_code=200)

        with patch("snipshare.backend.core.middleware.structlog.contextvars") as ctx:
            await middleware.dispatch(mock_request, call_next)

        ctx.bind_contextvars.assert_called_once_with(
            request_id="req-ctx",
            source="unknown",
            method="GET",
            path="/api/v1/snippets/my",
        )
        assert ctx.clear_contextvars.call_count == 2

    @pytest.mark.asyncio
    async def test_reraises_downstream_exception(self, middleware, mock_request):
        """Should let exception handlers build the response."""
        async def call_next(request):
            raise RuntimeError("boom")

        with patch("snipshare.backend.core.middleware.structlog.contextvars"):
            with pytest.raises(RuntimeError):
                await middleware.dispatch(mock_request, call_next)
