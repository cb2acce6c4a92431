"""ListCustomersInCity Use Case"""

from libs.result import Result, Return
from src.app.repositories.customer_query_repository import CustomerQueryRepository
from .dtos import CustomerListResponseDTO
from .find_customer import to_customer_dto


class ListCustomersInCity:
    """
    Lists the customers living in a city, ordered by ID.
    An unknown city yields an empty list, not an error.
    """

    def __init__(self, query_repo: CustomerQueryRepository):
        self.query_repo = query_repo

    async def execute(self, city: str) -> Result[CustomerListResponseDTO]:
        customers = await self.query_repo.customers_in_city(city)

        return Return.ok(
            CustomerListResponseDTO(
                city=city,
                customers=[to_customer_dto(c) for c in customers],
                count=len(customers),
            )
        )
