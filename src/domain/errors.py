"""Invoicing domain errors

Each error carries a stable code so use cases can turn it into a
``libs.result.Error`` without losing which condition occurred.
"""

from typing import Optional
from libs.result import Error


class InvoicingError(Exception):
    """Base class for failures of the invoicing workflow"""

    code = "CREATE_INVOICE_FAILED"

    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.reason = reason

    def to_error(self) -> Error:
        return Error(code=self.code, message=self.message, reason=self.reason)


class ValidationError(InvoicingError):
    """Malformed call arguments, detected before any I/O"""

    code = "VALIDATION_ERROR"


class NotFoundError(InvoicingError):
    """A referenced product does not exist"""

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int, reason: Optional[str] = None):
        super().__init__(f"Product with ID {product_id} not found", reason)
        self.product_id = product_id


class PersistenceError(InvoicingError):
    """An insert did not affect exactly one row or was rejected by the database"""

    code = "PERSISTENCE_ERROR"


class TransactionError(InvoicingError):
    """Commit or rollback failed; the outcome of the call is indeterminate"""

    code = "TRANSACTION_ERROR"


class RollbackError(TransactionError):
    """Rollback after a failure did not complete; the outcome is indeterminate"""
