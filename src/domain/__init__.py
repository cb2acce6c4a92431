from .base import BaseModel
from .customer import Customer
from .product import Product
from .invoice import Invoice, InvoiceCreationState
from .item import Item
from .errors import (
    InvoicingError,
    ValidationError,
    NotFoundError,
    PersistenceError,
    TransactionError,
    RollbackError,
)

__all__ = [
    "BaseModel",
    "Customer",
    "Product",
    "Invoice",
    "InvoiceCreationState",
    "Item",
    "InvoicingError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
    "TransactionError",
    "RollbackError",
]
