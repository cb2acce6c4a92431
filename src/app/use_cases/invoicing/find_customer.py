"""FindCustomer Use Case

Retrieves a customer by ID.
"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_query_repository import CustomerQueryRepository
from src.domain.customer import Customer
from .dtos import CustomerDTO


def to_customer_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        customer_id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        street=customer.street,
        city=customer.city,
    )


class FindCustomer:
    """
    Find Customer Use Case

    Read-only lookup of one customer.

    Errors:
        CUSTOMER_NOT_FOUND: No customer with that ID
    """

    def __init__(self, query_repo: CustomerQueryRepository):
        self.query_repo = query_repo

    async def execute(self, customer_id: int) -> Result[CustomerDTO]:
        customer = await self.query_repo.find_customer(customer_id)

        if not customer:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer with ID {customer_id} not found",
                )
            )

        return Return.ok(to_customer_dto(customer))
