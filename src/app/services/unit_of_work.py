"""Unit of Work Interface

Transaction boundary shared by the repositories of one use case call.
"""

import logging
from abc import ABC, abstractmethod
from src.domain.errors import InvoicingError, RollbackError, TransactionError

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, InvoicingError):
        return f"{exc.code}: {exc.message}"
    return f"{type(exc).__name__}: {exc}"


class UnitOfWork(ABC):
    """
    Transaction boundary for a single use case execution

    Repositories built on the same session write inside the transaction
    opened by begin(); nothing is visible to other sessions until commit().

    Used as ``async with uow:``. Entering opens the transaction. Leaving
    the block by any exception, cancellation included, rolls it back. The
    block is expected to commit before it exits normally.
    """

    async def __aenter__(self):
        try:
            await self.begin()
        except Exception as e:
            raise TransactionError("Failed to open transaction", reason=str(e)) from e
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is None:
            return False

        try:
            await self.rollback()
        except Exception as rollback_error:
            if not isinstance(exc, Exception):
                # Keep cancellation and interpreter exits propagating
                logger.exception(f"Rollback failed while unwinding {exc_type.__name__}")
                return False
            logger.error(f"Rollback failed after {_describe(exc)}: {rollback_error}")
            raise RollbackError(
                "Rollback failed; outcome is indeterminate",
                reason=f"{_describe(exc)}; rollback error: {rollback_error}",
            ) from rollback_error

        return False

    @abstractmethod
    async def begin(self):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
