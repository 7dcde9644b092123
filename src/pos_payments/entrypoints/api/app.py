"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from pos_payments import __version__
from pos_payments.application.ports import TimeProvider
from pos_payments.config import Settings, get_settings
from pos_payments.entrypoints.api.errors import register_exception_handlers
from pos_payments.entrypoints.api.routes import monitoring_router, payment_router
from pos_payments.infrastructure.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from pos_payments.infrastructure.logging_config import configure_logging
from pos_payments.infrastructure.time_provider import SystemTimeProvider

logger = structlog.get_logger(__name__)


def create_app(
    settings: Settings | None = None,
    time_provider: TimeProvider | None = None,
) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to the cached environment settings.
        time_provider: Clock used to stamp payments; defaults to the system clock.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        create_schema(engine)
        logger.info("application_started", app_name=settings.app_name, app_env=settings.app_env)
        yield
        engine.dispose()
        logger.info("application_stopped", app_name=settings.app_name)

    app = FastAPI(
        title="POS Payments API",
        description="Payments, payment items and confirmations at the cash desks",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.time_provider = time_provider or SystemTimeProvider()

    register_exception_handlers(app)
    app.include_router(payment_router)
    app.include_router(monitoring_router)
    return app
