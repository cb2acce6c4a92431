"""Customer Query Repository Interface

Read-only accessors for customers and their invoicing aggregates.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, List
from src.domain.customer import Customer


class CustomerQueryRepository(ABC):
    """
    Read-only queries over customers and invoices

    No transactional semantics; every method is a single statement.
    """

    @abstractmethod
    async def total_for_customer(self, customer_id: int) -> Decimal:
        """
        Revenue of a customer: sum of quantity * price over all invoice items

        Returns:
            Total amount, 0 if the customer has no invoices or does not exist
        """
        pass

    @abstractmethod
    async def name_of_customer(self, customer_id: int) -> Optional[str]:
        """
        Returns:
            Last name of the customer, None if not found
        """
        pass

    @abstractmethod
    async def number_of_customers(self) -> int:
        pass

    @abstractmethod
    async def number_of_invoices_for_customer(self, customer_id: int) -> int:
        pass

    @abstractmethod
    async def find_customer(self, customer_id: int) -> Optional[Customer]:
        """
        Returns:
            Customer if found, None otherwise
        """
        pass

    @abstractmethod
    async def customers_in_city(self, city: str) -> List[Customer]:
        """
        Returns:
            Customers living in the city, ordered by ID
        """
        pass
