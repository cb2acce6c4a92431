"""Customer API Routes

Read-only customer queries.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.use_cases.invoicing.dtos import (
    CustomerDTO,
    CustomerListResponseDTO,
    CustomerSummaryResponseDTO,
    CustomerCountResponseDTO,
)
from src.app.use_cases.invoicing.count_customers import CountCustomers
from src.app.use_cases.invoicing.find_customer import FindCustomer
from src.app.use_cases.invoicing.get_customer_summary import GetCustomerSummary
from src.app.use_cases.invoicing.list_customers_in_city import ListCustomersInCity
from src.adapter.repositories.customer_query_repository import SqlAlchemyCustomerQueryRepository
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/customers", tags=["Customers"])

CUSTOMER_NOT_FOUND_RESPONSE = {
    404: {
        "description": "Customer not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "CUSTOMER_NOT_FOUND",
                        "message": "Customer with ID 5 not found"
                    }
                }
            }
        }
    }
}


def _raise_for_error(result):
    if result.error.code == "CUSTOMER_NOT_FOUND":
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
    raise ClientError(result.error)


@router.get(
    "/count",
    response_model=CustomerCountResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def count_customers(session: AsyncSession = Depends(get_session)):
    """Number of customers."""
    use_case = CountCustomers(SqlAlchemyCustomerQueryRepository(session))
    result = await use_case.execute()
    return result.value


@router.get(
    "",
    response_model=CustomerListResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_customers_in_city(
    city: str = Query(..., min_length=1, description="City to search"),
    session: AsyncSession = Depends(get_session)
):
    """
    Customers living in a city, ordered by ID.

    **Query parameters:**
    - `city` (required): City name, exact match
    """
    use_case = ListCustomersInCity(SqlAlchemyCustomerQueryRepository(session))
    result = await use_case.execute(city)
    return result.value


@router.get(
    "/{customer_id}",
    response_model=CustomerDTO,
    status_code=status.HTTP_200_OK,
    responses=CUSTOMER_NOT_FOUND_RESPONSE,
)
async def get_customer(
    customer_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve a customer.

    **Returns:**
    - 200: Customer found
    - 404: Customer not found
    """
    use_case = FindCustomer(SqlAlchemyCustomerQueryRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        _raise_for_error(result)

    return result.value


@router.get(
    "/{customer_id}/summary",
    response_model=CustomerSummaryResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=CUSTOMER_NOT_FOUND_RESPONSE,
)
async def get_customer_summary(
    customer_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Name, number of invoices and revenue of a customer.

    **Example response:**
    ```json
    {
      "customer_id": 5,
      "name": "Smith",
      "invoice_count": 3,
      "total_amount": "750.00"
    }
    ```

    **Returns:**
    - 200: Summary computed
    - 404: Customer not found
    """
    use_case = GetCustomerSummary(SqlAlchemyCustomerQueryRepository(session))
    result = await use_case.execute(customer_id)

    if result.is_err():
        _raise_for_error(result)

    return result.value
