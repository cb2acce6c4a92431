import pytest_asyncio
from decimal import Decimal
from httpx import ASGITransport, AsyncClient
from src.depends import build_engine, build_session_factory, get_session, init_db
from src.domain.customer import Customer
from src.domain.product import Product


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create test database engine on a throwaway SQLite file"""
    # A file (not :memory:) so concurrent sessions see the same database
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'invoicing_test.db'}"

    engine = build_engine(test_db_url)
    await init_db(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(session_factory):
    """Customers 5, 6, 7 and products 10 (100.00), 20 (50.00), 30 (12.50)"""
    async with session_factory() as session:
        session.add_all([
            Customer(id=5, first_name="Alice", last_name="Martin", street="1 rue de la Paix", city="Lyon"),
            Customer(id=6, first_name="Bruno", last_name="Durand", street="8 quai Voltaire", city="Paris"),
            Customer(id=7, first_name="Chloe", last_name="Bernard", street="3 place Bellecour", city="Lyon"),
            Product(id=10, price=Decimal("100.00")),
            Product(id=20, price=Decimal("50.00")),
            Product(id=30, price=Decimal("12.50")),
        ])
        await session.commit()


@pytest_asyncio.fixture
async def client(session_factory):
    """Create test client with a fresh test session per request"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
