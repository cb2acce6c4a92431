"""GetInvoice Use Case

Reads back a committed invoice with its lines. Also the way to check
whether an invoice exists after an indeterminate TRANSACTION_ERROR.
"""

from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .create_invoice import to_invoice_response
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """
    Use Case: Retrieve an invoice and its line items

    Errors:
        INVOICE_NOT_FOUND: No invoice with that ID
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceResponseDTO]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)

        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                    reason="Invoice does not exist",
                )
            )

        items = await self.invoice_repo.get_items(invoice_id)

        return Return.ok(
            to_invoice_response(
                invoice_id=invoice.id,
                customer_id=invoice.customer_id,
                items=items,
                created_at=invoice.created_at,
            )
        )
