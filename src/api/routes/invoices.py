"""Invoice API Routes

FastAPI routes for invoice creation and retrieval.
"""

import asyncio
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.price_resolver import SqlAlchemyPriceResolver
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/invoices", tags=["Invoices"])

CREATE_INVOICE_ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "PRODUCT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PERSISTENCE_ERROR": status.HTTP_409_CONFLICT,
    "TRANSACTION_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_example(code: str, message: str) -> dict:
    return {
        "application/json": {
            "example": {"error": {"code": code, "message": message}}
        }
    }


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {
            "description": "Validation error",
            "content": _error_example(
                "VALIDATION_ERROR", "product_ids and quantities must have the same length"
            ),
        },
        404: {
            "description": "Product not found",
            "content": _error_example("PRODUCT_NOT_FOUND", "Product with ID 999 not found"),
        },
        409: {
            "description": "Insert rejected by the database",
            "content": _error_example("PERSISTENCE_ERROR", "Failed to insert invoice header"),
        },
        503: {
            "description": "Commit or rollback failed, outcome unknown",
            "content": _error_example(
                "TRANSACTION_ERROR", "Commit failed; invoice state is indeterminate"
            ),
        },
        504: {
            "description": "Deadline exceeded, outcome unknown",
            "content": _error_example("INVOICE_TIMEOUT", "Invoice creation timed out"),
        },
    }
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create an invoice for a customer.

    Inserts the invoice header and one line per product in a single
    transaction. Each line records the product price at invoice time.
    Nothing is persisted if any step fails.

    **Request body:**
    - `customer_id` (required): Existing customer ID
    - `product_ids` (required): Products in line order
    - `quantities` (required): Quantity per product, same length, each > 0

    **Example request:**
    ```json
    {
      "customer_id": 5,
      "product_ids": [10, 20],
      "quantities": [2, 1]
    }
    ```

    **Returns:**
    - 201: Invoice created
    - 400: Invalid request
    - 404: A product does not exist
    - 409: Database rejected an insert
    - 503: Commit/rollback failed; re-check the invoice before retrying
    - 504: Deadline exceeded; re-check the invoice before retrying
    """
    # Create UnitOfWork, repositories and services on one session
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)
    price_resolver = SqlAlchemyPriceResolver(session)

    # Convert request schema to command DTO
    command = CreateInvoiceCommandDTO(
        customer_id=request.customer_id,
        product_ids=request.product_ids,
        quantities=request.quantities,
    )

    # Execute use case under a deadline; cancellation rolls the transaction back
    use_case = CreateInvoice(uow, invoice_repo, price_resolver)
    timeout = ApplicationConfig.INVOICE_TIMEOUT_SECONDS
    try:
        result = await asyncio.wait_for(use_case.execute(command), timeout=timeout)
    except asyncio.TimeoutError:
        raise ClientError(
            Error(
                code="INVOICE_TIMEOUT",
                message="Invoice creation timed out",
                reason=f"Exceeded {timeout}s deadline; outcome unknown, re-check before retrying",
            ),
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        )

    # Handle errors
    if result.is_err():
        raise ClientError(
            result.error,
            status_code=CREATE_INVOICE_ERROR_STATUS.get(
                result.error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
        )

    # Return successful response
    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {
            "description": "Invoice not found",
            "content": _error_example("INVOICE_NOT_FOUND", "Invoice with ID 123 not found"),
        }
    }
)
async def get_invoice(
    invoice_id: int,
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve an invoice with its lines and total.

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = GetInvoice(invoice_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        if result.error.code == "INVOICE_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
