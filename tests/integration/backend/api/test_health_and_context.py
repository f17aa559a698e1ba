"""
Integration Tests for Health Endpoints and Request Context.

Runs through the full application stack (middleware, exception handlers).
"""

from unittest.mock import patch

import pytest
from httpx import AsyncClient


class TestHealthEndpoints:
    """Tests for /health and /health/ready."""

    @pytest.mark.asyncio
    async def test_liveness(self, client_no_db: AsyncClient):
        """Liveness never touches the database."""
        response = await client_no_db.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    @pytest.mark.asyncio
    async def test_readiness_healthy(self, client_no_db: AsyncClient):
        """Readiness reports the database check."""
        with patch(
            "snipshare.backend.api.health.check_database",
            return_value={"status": "healthy", "latency_ms": 1},
        ):
            response = await client_no_db.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_readiness_unhealthy(self, client_no_db: AsyncClient):
        """Readiness returns 503 when the database is down."""
        with patch(
            "snipshare.backend.api.health.check_database",
            return_value={"status": "unhealthy", "error": "down"},
        ):
            response = await client_no_db.get("/health/ready")

        assert response.status_code == 503


class TestRequestContext:
    """Tests for request id and timing headers."""

    @pytest.mark.asyncio
    async def test_request_id_round_trip(self, client_no_db: AsyncClient):
        """An incoming X-Request-ID is echoed back."""
        response = await client_no_db.get("/health", headers={"X-Request-ID": "trace-1"})

        assert response.headers["X-Request-ID"] == "trace-1"
        assert response.headers["X-Response-Time"].endswith("ms")

    @pytest.mark.asyncio
    async def test_error_envelope_carries_request_id(self, client: AsyncClient, api):
        """Error responses include the request id in metadata."""
        response = await client.get(
            "/api/v1/snippets/nonexistent-id",
            headers={"X-Request-ID": "trace-2"},
        )

        data = api.assert_error(response, 404, "RES_NOT_FOUND")
        assert data["metadata"]["request_id"] == "trace-2"

    @pytest.mark.asyncio
    async def test_success_envelope_carries_request_id(self, client: AsyncClient, api):
        """Successful responses include the request id in metadata."""
        response = await client.get(
            "/api/v1/snippets/my",
            headers={"X-Request-ID": "trace-3", "X-User-Id": "carol"},
        )

        data = api.assert_success(response)
        assert data["metadata"]["request_id"] == "trace-3"
