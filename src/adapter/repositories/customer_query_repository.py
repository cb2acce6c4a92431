"""SQLAlchemy Customer Query Repository Implementation

Read-only customer and invoicing aggregates.
"""

from decimal import Decimal
from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_query_repository import CustomerQueryRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.item import Item


class SqlAlchemyCustomerQueryRepository(CustomerQueryRepository):
    """
    SQLAlchemy implementation of CustomerQueryRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def total_for_customer(self, customer_id: int) -> Decimal:
        """
        Sum of quantity * price over every item of every invoice of the customer

        Args:
            customer_id: Customer ID

        Returns:
            Total amount, Decimal("0") when nothing was invoiced
        """
        statement = (
            select(func.sum(Item.quantity * Item.price))
            .select_from(Item)
            .join(Invoice, Invoice.id == Item.invoice_id)
            .where(Invoice.customer_id == customer_id)
        )
        result = await self.session.execute(statement)
        total = result.scalar_one_or_none()

        if total is None:
            return Decimal("0")

        return Decimal(str(total))

    async def name_of_customer(self, customer_id: int) -> Optional[str]:
        statement = select(Customer.last_name).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def number_of_customers(self) -> int:
        statement = select(func.count()).select_from(Customer)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def number_of_invoices_for_customer(self, customer_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.customer_id == customer_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def find_customer(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def customers_in_city(self, city: str) -> List[Customer]:
        statement = (
            select(Customer)
            .where(Customer.city == city)
            .order_by(Customer.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
