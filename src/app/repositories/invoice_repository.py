"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, List
from src.domain.invoice import Invoice
from src.domain.item import Item


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice and Item persistence

    Write methods run inside the caller's transaction and never commit.
    """

    @abstractmethod
    async def insert_header(self, customer_id: int) -> int:
        """
        Insert an invoice header row

        Args:
            customer_id: Owning customer ID

        Returns:
            The invoice ID generated by the database

        Raises:
            PersistenceError: insert did not affect exactly one row
        """
        pass

    @abstractmethod
    async def insert_item(
        self,
        invoice_id: int,
        line_number: int,
        product_id: int,
        quantity: int,
        price: Decimal,
    ) -> Item:
        """
        Insert one line item row

        Args:
            invoice_id: Invoice the line belongs to
            line_number: 1-based line number
            product_id: Product billed
            quantity: Quantity billed
            price: Unit price snapshot

        Returns:
            The inserted Item

        Raises:
            PersistenceError: insert did not affect exactly one row
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_items(self, invoice_id: int) -> List[Item]:
        """
        Retrieve the items of an invoice ordered by line number

        Args:
            invoice_id: Invoice ID

        Returns:
            List of Item rows
        """
        pass
