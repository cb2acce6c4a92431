from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
import src.domain  # noqa: F401  registers tables on SQLModel.metadata


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(db_uri: str = ApplicationConfig.DB_URI) -> AsyncEngine:
    engine = create_async_engine(db_uri, echo=ApplicationConfig.DB_ECHO, future=True)
    if engine.dialect.name == "sqlite" and ApplicationConfig.SQLITE_FOREIGN_KEYS:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        bind, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def init_db(bind: AsyncEngine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


engine = build_engine()

AsyncSessionLocal = build_session_factory(engine)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
