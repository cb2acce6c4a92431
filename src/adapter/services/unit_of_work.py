from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Session-backed unit of work; ``async with`` scoping comes from UnitOfWork"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def begin(self):
        # A session that already autobegan (e.g. after a read) keeps its transaction
        if not self.session.in_transaction():
            await self.session.begin()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
