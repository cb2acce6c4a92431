"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
Inserts go through Core statements with RETURNING so the number of
affected rows and the generated key are read from the same result.
"""

import logging
from decimal import Decimal
from typing import Optional, List
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.errors import PersistenceError
from src.domain.invoice import Invoice
from src.domain.item import Item

logger = logging.getLogger(__name__)


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Never commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert_header(self, customer_id: int) -> int:
        """
        Insert an invoice header and read back its generated ID

        Args:
            customer_id: Owning customer ID

        Returns:
            Generated invoice ID
        """
        table = Invoice.__table__
        statement = (
            insert(table)
            .values(customer_id=customer_id)
            .returning(table.c.id)
        )
        row = await self._insert_one(statement, f"invoice header for customer {customer_id}")
        invoice_id = row[0]
        logger.debug(f"Inserted invoice header id={invoice_id} customer_id={customer_id}")
        return invoice_id

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

        Returns:
            The inserted Item
        """
        table = Item.__table__
        statement = (
            insert(table)
            .values(
                invoice_id=invoice_id,
                line_number=line_number,
                product_id=product_id,
                quantity=quantity,
                price=price,
            )
            .returning(table.c.line_number)
        )
        await self._insert_one(
            statement, f"line {line_number} (product {product_id}) of invoice {invoice_id}"
        )
        return Item(
            invoice_id=invoice_id,
            line_number=line_number,
            product_id=product_id,
            quantity=quantity,
            price=price,
        )

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_items(self, invoice_id: int) -> List[Item]:
        statement = (
            select(Item)
            .where(Item.invoice_id == invoice_id)
            .order_by(Item.line_number)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def _insert_one(self, statement, description: str):
        try:
            result = await self.session.execute(statement)
            rows = result.all()
        except SQLAlchemyError as e:
            raise PersistenceError(
                f"Failed to insert {description}",
                reason=str(e),
            ) from e

        if len(rows) != 1:
            raise PersistenceError(
                f"Insert of {description} affected {len(rows)} rows, expected 1",
                reason=f"rowcount={len(rows)}",
            )

        return rows[0]
