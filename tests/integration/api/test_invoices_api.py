"""Integration tests for Invoice API endpoints"""

import asyncio
import pytest
from decimal import Decimal
from httpx import AsyncClient

from config import ApplicationConfig
from src.adapter.repositories.price_resolver import SqlAlchemyPriceResolver
from src.domain.invoice import Invoice
from tests.integration.helpers import count_rows

PREFIX = ApplicationConfig.API_PREFIX


@pytest.mark.usefixtures("catalog")
class TestInvoicesAPIIntegration:
    """Integration test suite for Invoice API endpoints"""

    @pytest.mark.asyncio
    async def test_create_invoice_success(self, client: AsyncClient):
        payload = {"customer_id": 5, "product_ids": [10, 20], "quantities": [2, 1]}

        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 201
        data = response.json()
        assert data["customer_id"] == 5
        assert Decimal(data["total_amount"]) == Decimal("250.00")
        assert [line["line_number"] for line in data["line_items"]] == [1, 2]
        assert Decimal(data["line_items"][0]["unit_price"]) == Decimal("100.00")

    @pytest.mark.asyncio
    async def test_created_invoice_can_be_read_back(self, client: AsyncClient):
        created = await client.post(
            f"{PREFIX}/invoices",
            json={"customer_id": 6, "product_ids": [30], "quantities": [4]},
        )
        invoice_id = created.json()["invoice_id"]

        response = await client.get(f"{PREFIX}/invoices/{invoice_id}")

        assert response.status_code == 200
        data = response.json()
        assert data["invoice_id"] == invoice_id
        assert Decimal(data["total_amount"]) == Decimal("50.00")
        assert data["created_at"] is not None

    @pytest.mark.asyncio
    async def test_get_unknown_invoice_returns_404(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/invoices/404")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_missing_product_returns_404(self, client: AsyncClient, session_factory):
        payload = {"customer_id": 5, "product_ids": [10, 999], "quantities": [1, 1]}

        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PRODUCT_NOT_FOUND"
        assert await count_rows(session_factory, Invoice) == 0

    @pytest.mark.asyncio
    async def test_length_mismatch_returns_400(self, client: AsyncClient):
        payload = {"customer_id": 5, "product_ids": [10, 20], "quantities": [1]}

        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_invalid_customer_id_returns_422(self, client: AsyncClient):
        payload = {"customer_id": 0, "product_ids": [10], "quantities": [1]}

        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 422  # Pydantic validation error

    @pytest.mark.asyncio
    async def test_unknown_customer_returns_409(self, client: AsyncClient):
        payload = {"customer_id": 404, "product_ids": [10], "quantities": [1]}

        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "PERSISTENCE_ERROR"

    @pytest.mark.asyncio
    async def test_deadline_exceeded_rolls_back(
        self, client: AsyncClient, session_factory, monkeypatch
    ):
        async def slow_resolve_price(self, product_id):
            await asyncio.sleep(5)

        monkeypatch.setattr(ApplicationConfig, "INVOICE_TIMEOUT_SECONDS", 0.2)
        monkeypatch.setattr(SqlAlchemyPriceResolver, "resolve_price", slow_resolve_price)

        payload = {"customer_id": 5, "product_ids": [10], "quantities": [1]}
        response = await client.post(f"{PREFIX}/invoices", json=payload)

        assert response.status_code == 504
        assert response.json()["error"]["code"] == "INVOICE_TIMEOUT"
        assert "re-check before retrying" in response.json()["error"]["reason"]
        assert await count_rows(session_factory, Invoice) == 0
