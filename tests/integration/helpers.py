"""Shared helpers for integration tests"""

from sqlmodel import select, func
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.dtos import CreateInvoiceCommandDTO
from src.adapter.repositories.customer_query_repository import SqlAlchemyCustomerQueryRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.price_resolver import SqlAlchemyPriceResolver
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


async def create_invoice(session_factory, customer_id, product_ids, quantities):
    """Run CreateInvoice on its own session, as a request handler would"""
    async with session_factory() as session:
        use_case = CreateInvoice(
            SqlAlchemyUnitOfWork(session),
            SqlAlchemyInvoiceRepository(session),
            SqlAlchemyPriceResolver(session),
        )
        command = CreateInvoiceCommandDTO(
            customer_id=customer_id,
            product_ids=product_ids,
            quantities=quantities,
        )
        return await use_case.execute(command)


async def count_rows(session_factory, model) -> int:
    async with session_factory() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()


async def invoices_for(session_factory, customer_id) -> int:
    async with session_factory() as session:
        repo = SqlAlchemyCustomerQueryRepository(session)
        return await repo.number_of_invoices_for_customer(customer_id)
