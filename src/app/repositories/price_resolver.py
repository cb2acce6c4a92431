"""Price Resolver Interface

Looks up the current unit price of a product.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class PriceResolver(ABC):
    """
    Resolves product prices for invoice line items

    Side-effect free. Repeated calls for the same product are allowed.
    """

    @abstractmethod
    async def resolve_price(self, product_id: int) -> Decimal:
        """
        Return the current unit price of a product

        Args:
            product_id: Product ID

        Returns:
            Current unit price

        Raises:
            NotFoundError: no product with that ID exists
        """
        pass
