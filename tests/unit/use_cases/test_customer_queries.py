"""Unit tests for the read-only customer use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.count_customers import CountCustomers
from src.app.use_cases.invoicing.find_customer import FindCustomer
from src.app.use_cases.invoicing.get_customer_summary import GetCustomerSummary
from src.app.use_cases.invoicing.list_customers_in_city import ListCustomersInCity
from src.domain.customer import Customer


@pytest.fixture
def mock_query_repo():
    """Mock customer query repository"""
    return MagicMock()


@pytest.fixture
def alice():
    return Customer(id=5, first_name="Alice", last_name="Martin", street="1 rue de la Paix", city="Lyon")


@pytest.mark.asyncio
class TestFindCustomer:
    async def test_found(self, mock_query_repo, alice):
        mock_query_repo.find_customer = AsyncMock(return_value=alice)

        result = await FindCustomer(mock_query_repo).execute(5)

        assert result.is_ok()
        assert result.value.customer_id == 5
        assert result.value.first_name == "Alice"
        assert result.value.street == "1 rue de la Paix"

    async def test_not_found(self, mock_query_repo):
        mock_query_repo.find_customer = AsyncMock(return_value=None)

        result = await FindCustomer(mock_query_repo).execute(404)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"


@pytest.mark.asyncio
class TestGetCustomerSummary:
    async def test_summary_combines_aggregates(self, mock_query_repo):
        mock_query_repo.name_of_customer = AsyncMock(return_value="Martin")
        mock_query_repo.number_of_invoices_for_customer = AsyncMock(return_value=3)
        mock_query_repo.total_for_customer = AsyncMock(return_value=Decimal("750.00"))

        result = await GetCustomerSummary(mock_query_repo).execute(5)

        assert result.is_ok()
        assert result.value.name == "Martin"
        assert result.value.invoice_count == 3
        assert result.value.total_amount == Decimal("750.00")

    async def test_unknown_customer(self, mock_query_repo):
        mock_query_repo.name_of_customer = AsyncMock(return_value=None)
        mock_query_repo.total_for_customer = AsyncMock()

        result = await GetCustomerSummary(mock_query_repo).execute(404)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_query_repo.total_for_customer.assert_not_called()


@pytest.mark.asyncio
class TestListAndCount:
    async def test_customers_in_city(self, mock_query_repo, alice):
        mock_query_repo.customers_in_city = AsyncMock(return_value=[alice])

        result = await ListCustomersInCity(mock_query_repo).execute("Lyon")

        assert result.is_ok()
        assert result.value.count == 1
        assert result.value.customers[0].last_name == "Martin"

    async def test_unknown_city_is_empty(self, mock_query_repo):
        mock_query_repo.customers_in_city = AsyncMock(return_value=[])

        result = await ListCustomersInCity(mock_query_repo).execute("Atlantis")

        assert result.is_ok()
        assert result.value.customers == []

    async def test_count(self, mock_query_repo):
        mock_query_repo.number_of_customers = AsyncMock(return_value=12)

        result = await CountCustomers(mock_query_repo).execute()

        assert result.value.total_customers == 12
