"""SQLAlchemy Price Resolver Implementation

Reads the current product price through the caller's session, so the
lookup runs inside the same transaction as the invoice inserts.
"""

from decimal import Decimal
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.price_resolver import PriceResolver
from src.domain.errors import NotFoundError
from src.domain.product import Product


class SqlAlchemyPriceResolver(PriceResolver):
    """
    SQLAlchemy implementation of PriceResolver

    The product row is not locked; a concurrent price change may be observed.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def resolve_price(self, product_id: int) -> Decimal:
        statement = select(Product.price).where(Product.id == product_id)
        result = await self.session.execute(statement)
        price = result.scalar_one_or_none()

        if price is None:
            raise NotFoundError(product_id, reason="Product does not exist")

        return price
