import pytest
from unittest.mock import AsyncMock
from src.app.services.unit_of_work import UnitOfWork


class RecordingUnitOfWork(UnitOfWork):
    """UnitOfWork whose transaction calls are AsyncMocks

    ``async with`` scoping runs the real UnitOfWork logic on top of them.
    """

    def __init__(self):
        self.begin = AsyncMock()
        self.commit = AsyncMock()
        self.rollback = AsyncMock()

    async def begin(self):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest.fixture
def mock_uow():
    """Unit of work with mocked begin/commit/rollback"""
    return RecordingUnitOfWork()
