"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from src.api.error import ClientError, client_error_handler
from src.api.middleware import RequestLoggingMiddleware
from src.api.routes import subscriptions
from src.depends import engine
from src.domain.subscription import Subscription  # noqa: F401  registers the table

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    """
    Build the Subscription Service app

    Args:
        config: ApplicationConfig-like object

    Returns:
        Configured FastAPI app
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield
        await engine.dispose()

    app = FastAPI(
        title="Subscription Service",
        description="Tracks user subscriptions and aggregates their monthly cost",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(ClientError, client_error_handler)

    app.include_router(subscriptions.router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["System"])
    async def health():
        return {"ok": True}

    return app
