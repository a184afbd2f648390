"""
Integration tests for cross-cutting concerns.

These tests verify:
1. Unexpected failures are returned as opaque 500 errors
2. Request IDs are generated or propagated
3. Prometheus metrics are exposed and incremented
4. Health endpoint
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_credit_repository
from src.core.metrics import REGISTRY
from src.infrastructure.repositories import PostgresCreditRepository
from tests.integration.conftest import CREDITS_URL, build_credit_payload


class UnavailableCreditRepository(PostgresCreditRepository):
    """Credit repository whose store is unreachable."""

    async def get_by_customer_id(self, customer_id: int):
        raise ConnectionError("database unavailable")


@pytest_asyncio.fixture
async def client_with_failing_store(
    client: AsyncClient,
    test_session,
) -> AsyncGenerator[AsyncClient, None]:
    """Client whose credit store raises on reads; server errors are returned, not raised."""
    async def override_get_credit_repository():
        return UnavailableCreditRepository(test_session)

    app.dependency_overrides[get_credit_repository] = override_get_credit_repository

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestServerErrors:
    """Tests for unexpected failures."""

    @pytest.mark.asyncio
    async def test_store_failure_returns_opaque_500(
        self,
        client_with_failing_store: AsyncClient,
    ):
        response = await client_with_failing_store.get(
            CREDITS_URL,
            params={"customerId": 1},
        )

        assert response.status_code == 500

        data = response.json()
        assert data["status"] == 500
        assert data["title"] == "Internal Server Error"
        assert "database unavailable" not in response.text


class TestRequestId:
    """Tests for the X-Request-ID header."""

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_request_id_is_propagated(self, client: AsyncClient, customer):
        response = await client.post(
            CREDITS_URL,
            json=build_credit_payload(customer.id, numberOfInstallments=50),
            headers={"X-Request-ID": "req-123"},
        )

        assert response.headers["X-Request-ID"] == "req-123"
        assert response.json()["requestId"] == "req-123"


class TestMetrics:
    """Tests for GET /metrics and the business counters."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(self, client: AsyncClient):
        response = await client.get("/metrics")

        assert response.status_code == 200
        assert "credit_created_total" in response.text
        assert "credit_http_requests_total" in response.text

    @pytest.mark.asyncio
    async def test_created_credit_increments_counter(self, client: AsyncClient, customer):
        labels = {"status": "IN_PROGRESS"}
        before = REGISTRY.get_sample_value("credit_created_total", labels) or 0.0

        await client.post(CREDITS_URL, json=build_credit_payload(customer.id))

        after = REGISTRY.get_sample_value("credit_created_total", labels)
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_rejected_credit_increments_counter(self, client: AsyncClient, customer):
        labels = {"reason": "validation"}
        before = REGISTRY.get_sample_value("credit_rejected_total", labels) or 0.0

        await client.post(
            CREDITS_URL,
            json=build_credit_payload(customer.id, numberOfInstallments=50),
        )

        after = REGISTRY.get_sample_value("credit_rejected_total", labels)
        assert after == before + 1


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health_reports_service(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200

        data = response.json()
        assert data["service"] == "credit-application-system"
        assert data["database"] in {"up", "uninitialized"}
