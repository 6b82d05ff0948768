"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from skilifts import __version__
from skilifts.api.errors import register_error_handlers
from skilifts.api.routes import health, skilifts
from skilifts.core.config import AppSettings
from skilifts.core.log import configure_logging
from skilifts.core.protocols import ISkiLiftStore
from skilifts.persistence import create_persistence

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level)
    if app.state.store is None:
        app.state.store = create_persistence(settings)
    logger.info("SkiLifts API started (table: %s)", app.state.store.table_name)
    yield
    logger.info("SkiLifts API shutting down")


def create_app(settings: AppSettings | None = None, store: ISkiLiftStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``store`` replaces the DynamoDB store built from ``settings``; tests use it
    to hand in a store bound to a mocked table.
    """
    if settings is None:
        settings = AppSettings()

    app = FastAPI(
        title="SkiLifts API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.server.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(skilifts.router)
    return app
