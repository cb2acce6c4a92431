"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from src.api.error import ClientError, client_error_handler
from src.api.routes import customers, invoices
from src.depends import engine, init_db

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """Build the API with routes, error handling and logging configured"""
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            await init_db(engine)
            logger.info("Database tables ensured")
        yield
        await engine.dispose()

    app = FastAPI(title="Invoicing Service", lifespan=lifespan)
    app.add_exception_handler(ClientError, client_error_handler)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(customers.router, prefix=config.API_PREFIX)
    return app
