"""Integration tests for the FastAPI host.

Uses the real app over httpx ASGITransport. No mocks.
"""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Integration tests for GET /health."""

    async def test_health_returns_ok(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "socratica"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_no_cors_headers(self, async_client: AsyncClient) -> None:
        """No cross-origin client exists, so no CORS middleware is installed."""
        response = await async_client.get(
            "/health",
            headers={"Origin": "http://localhost:3000"},
        )

        assert "access-control-allow-origin" not in response.headers


class TestNoExtraRoutes:
    """Only the page and the health check are served."""

    @pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
    async def test_schema_and_docs_routes_disabled(
        self, async_client: AsyncClient, path: str
    ) -> None:
        response = await async_client.get(path)

        assert response.status_code == 404

    async def test_no_chat_api_exposed(self, async_client: AsyncClient) -> None:
        """The tutor is reached through the page only, not a REST route."""
        response = await async_client.post("/chat", json={"message": "hi"})

        assert response.status_code == 404
