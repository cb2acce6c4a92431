from .invoice_repository import InvoiceRepository
from .price_resolver import PriceResolver
from .customer_query_repository import CustomerQueryRepository

__all__ = [
    "InvoiceRepository",
    "PriceResolver",
    "CustomerQueryRepository",
]
