"""CountCustomers Use Case"""

from libs.result import Result, Return
from src.app.repositories.customer_query_repository import CustomerQueryRepository
from .dtos import CustomerCountResponseDTO


class CountCustomers:
    def __init__(self, query_repo: CustomerQueryRepository):
        self.query_repo = query_repo

    async def execute(self) -> Result[CustomerCountResponseDTO]:
        total = await self.query_repo.number_of_customers()
        return Return.ok(CustomerCountResponseDTO(total_customers=total))
