from .invoice_repository import SqlAlchemyInvoiceRepository
from .price_resolver import SqlAlchemyPriceResolver
from .customer_query_repository import SqlAlchemyCustomerQueryRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyPriceResolver",
    "SqlAlchemyCustomerQueryRepository",
]
