"""CreateInvoice Use Case

Creates an invoice header and one line item per product in a single
transaction. Either every row of the call is committed or none is.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.price_resolver import PriceResolver
from src.domain.errors import (
    InvoicingError,
    PersistenceError,
    RollbackError,
    TransactionError,
    ValidationError,
)
from src.domain.invoice import InvoiceCreationState
from src.domain.item import Item
from .dtos import CreateInvoiceCommandDTO, InvoiceLineDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)

_OPEN_STATES = (
    InvoiceCreationState.TRANSACTION_OPEN,
    InvoiceCreationState.HEADER_INSERTED,
    InvoiceCreationState.ITEM_INSERTED,
)


@dataclass
class _InvoiceCreation:
    """Progress of one execute() call"""

    customer_id: int
    state: InvoiceCreationState = InvoiceCreationState.NOT_STARTED
    invoice_id: Optional[int] = None
    items: List[Item] = field(default_factory=list)

    @property
    def transaction_open(self) -> bool:
        return self.state in _OPEN_STATES

    def advance(self, state: InvoiceCreationState) -> None:
        logger.debug(
            f"Invoice creation for customer {self.customer_id}: "
            f"{self.state.value} -> {state.value}"
        )
        self.state = state


def to_invoice_response(
    invoice_id: int,
    customer_id: int,
    items: List[Item],
    created_at: Optional[datetime] = None,
) -> InvoiceResponseDTO:
    line_dtos = [
        InvoiceLineDTO(
            line_number=item.line_number,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=item.price,
            total_price=item.total_price,
        )
        for item in items
    ]

    return InvoiceResponseDTO(
        invoice_id=invoice_id,
        customer_id=customer_id,
        total_amount=sum((line.total_price for line in line_dtos), Decimal("0")),
        line_items=line_dtos,
        created_at=created_at,
    )


class CreateInvoice:
    """
    Use Case: Create an invoice with its line items

    Business Rules:
    1. product_ids and quantities must have the same length
    2. Every quantity must be a positive integer
    3. Line numbers run 1..N in the order products were given
    4. Each line stores the product price read at invoice time
    5. Header and all lines are committed together or not at all

    Flow:
    1. Validate the command (no storage access)
    2. Open transaction
    3. Insert invoice header, read back generated ID
    4. For each product: resolve price, insert line item
    5. Commit transaction
    6. Return response

    Steps 2-5 run inside ``async with uow``: any exception, cancellation
    included, rolls back before the error is returned.
    A failed commit or rollback is reported as TRANSACTION_ERROR: the
    caller must re-query before retrying.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        price_resolver: PriceResolver,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.price_resolver = price_resolver

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer_id, product_ids, quantities

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error

        Errors:
            VALIDATION_ERROR: Malformed command, storage untouched
            PRODUCT_NOT_FOUND: A product does not exist, nothing persisted
            PERSISTENCE_ERROR: An insert failed or affected != 1 row, nothing persisted
            TRANSACTION_ERROR: Commit or rollback failed, outcome indeterminate
            CREATE_INVOICE_FAILED: Unexpected failure, rolled back
        """
        # Step 1: Validate before touching storage
        validation_error = self._validate(command)
        if validation_error:
            logger.info(
                f"Rejected invoice for customer {command.customer_id}: {validation_error.message}"
            )
            return Return.err(validation_error.to_error())

        creation = _InvoiceCreation(customer_id=command.customer_id)

        try:
            # Leaving this block by any exception rolls the transaction back
            async with self.uow:
                creation.advance(InvoiceCreationState.TRANSACTION_OPEN)
                await self._create(command, creation)
        except InvoicingError as e:
            return self._fail(creation, e)
        except SQLAlchemyError as e:
            return self._fail(
                creation,
                PersistenceError("Database error while creating invoice", reason=str(e)),
            )
        except asyncio.CancelledError:
            logger.warning(
                f"Invoice creation for customer {creation.customer_id} cancelled "
                f"in state {creation.state.value}"
            )
            raise
        except Exception as e:
            logger.exception(f"Unexpected failure creating invoice for customer {command.customer_id}")
            return self._fail(
                creation,
                InvoicingError("Failed to create invoice", reason=str(e)),
            )

        # Step 6: Build response
        response = to_invoice_response(
            invoice_id=creation.invoice_id,
            customer_id=command.customer_id,
            items=creation.items,
        )

        logger.info(
            f"Created invoice {response.invoice_id} for customer {response.customer_id} "
            f"with {len(response.line_items)} lines, total={response.total_amount}"
        )

        return Return.ok(response)

    async def _create(self, command: CreateInvoiceCommandDTO, creation: _InvoiceCreation) -> None:
        # Runs inside the transaction opened by the unit of work

        # Step 3: Insert header and read back its generated ID
        creation.invoice_id = await self.invoice_repo.insert_header(command.customer_id)
        creation.advance(InvoiceCreationState.HEADER_INSERTED)

        # Step 4: One line per product, numbered locally
        lines = zip(command.product_ids, command.quantities)
        for line_number, (product_id, quantity) in enumerate(lines, start=1):
            price = await self.price_resolver.resolve_price(product_id)

            item = await self.invoice_repo.insert_item(
                invoice_id=creation.invoice_id,
                line_number=line_number,
                product_id=product_id,
                quantity=quantity,
                price=price,
            )
            creation.items.append(item)
            creation.advance(InvoiceCreationState.ITEM_INSERTED)

        # Step 5: Commit
        try:
            await self.uow.commit()
        except Exception as e:
            raise TransactionError(
                "Commit failed; invoice state is indeterminate",
                reason=str(e),
            ) from e
        creation.advance(InvoiceCreationState.COMMITTED)

    def _fail(self, creation: _InvoiceCreation, error: InvoicingError) -> Result[InvoiceResponseDTO]:
        """Record the rollback done by the unit of work and turn the failure into a Result"""
        if creation.transaction_open and not isinstance(error, RollbackError):
            creation.advance(InvoiceCreationState.ROLLED_BACK)

        logger.warning(
            f"Invoice creation for customer {creation.customer_id} failed "
            f"in state {creation.state.value}: {error.code} {error.message}"
        )
        return Return.err(error.to_error())

    def _validate(self, command: CreateInvoiceCommandDTO) -> Optional[ValidationError]:
        if command.customer_id <= 0:
            return ValidationError(
                "customer_id must be a positive integer",
                reason=f"customer_id={command.customer_id}",
            )

        if len(command.product_ids) != len(command.quantities):
            return ValidationError(
                "product_ids and quantities must have the same length",
                reason=f"len(product_ids)={len(command.product_ids)}, "
                       f"len(quantities)={len(command.quantities)}",
            )

        for line_number, quantity in enumerate(command.quantities, start=1):
            if quantity <= 0:
                return ValidationError(
                    f"Quantity on line {line_number} must be a positive integer",
                    reason=f"quantity={quantity}",
                )

        return None
