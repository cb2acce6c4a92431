"""Integration tests for Customer API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient

from config import ApplicationConfig

PREFIX = ApplicationConfig.API_PREFIX


@pytest.mark.usefixtures("catalog")
class TestCustomersAPIIntegration:
    @pytest.mark.asyncio
    async def test_get_customer(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/customers/5")

        assert response.status_code == 200
        data = response.json()
        assert data["first_name"] == "Alice"
        assert data["city"] == "Lyon"

    @pytest.mark.asyncio
    async def test_get_unknown_customer_returns_404(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/customers/404")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CUSTOMER_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_customers_in_city(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/customers", params={"city": "Lyon"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [c["customer_id"] for c in data["customers"]] == [5, 7]

    @pytest.mark.asyncio
    async def test_count_customers(self, client: AsyncClient):
        response = await client.get(f"{PREFIX}/customers/count")

        assert response.status_code == 200
        assert response.json()["total_customers"] == 3

    @pytest.mark.asyncio
    async def test_summary_after_invoicing(self, client: AsyncClient):
        await client.post(
            f"{PREFIX}/invoices",
            json={"customer_id": 5, "product_ids": [10, 20], "quantities": [2, 1]},
        )

        response = await client.get(f"{PREFIX}/customers/5/summary")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Martin"
        assert data["invoice_count"] == 1
        assert Decimal(data["total_amount"]) == Decimal("250.00")
