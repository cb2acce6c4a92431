"""GetCustomerSummary Use Case

Name, invoice count and revenue of a customer.
"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_query_repository import CustomerQueryRepository
from .dtos import CustomerSummaryResponseDTO


class GetCustomerSummary:
    """
    Get Customer Summary Use Case

    Combines the read-only aggregates of one customer.

    Errors:
        CUSTOMER_NOT_FOUND: No customer with that ID
    """

    def __init__(self, query_repo: CustomerQueryRepository):
        self.query_repo = query_repo

    async def execute(self, customer_id: int) -> Result[CustomerSummaryResponseDTO]:
        name = await self.query_repo.name_of_customer(customer_id)

        if name is None:
            return Return.err(
                Error(
                    code="CUSTOMER_NOT_FOUND",
                    message=f"Customer with ID {customer_id} not found",
                )
            )

        invoice_count = await self.query_repo.number_of_invoices_for_customer(customer_id)
        total_amount = await self.query_repo.total_for_customer(customer_id)

        return Return.ok(
            CustomerSummaryResponseDTO(
                customer_id=customer_id,
                name=name,
                invoice_count=invoice_count,
                total_amount=total_amount,
            )
        )
