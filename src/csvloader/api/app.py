"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from csvloader.api.routes import health, upload
from csvloader.core.config import AppSettings
from csvloader.core.logging_config import configure_logging
from csvloader.core.protocols import RecordStore
from csvloader.ingest.pipeline import IngestionPipeline
from csvloader.persistence import create_record_store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire settings, logging, record store and pipeline onto app state."""
    settings = getattr(app.state, "settings", None) or AppSettings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    if getattr(app.state, "record_store", None) is None:
        app.state.record_store = create_record_store(settings)
    app.state.pipeline = IngestionPipeline(app.state.record_store, settings.ingest)
    yield


def create_app(
    settings: AppSettings | None = None, record_store: RecordStore | None = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``settings`` and ``record_store`` override what the lifespan would build.
    """
    app = FastAPI(
        title="csvloader",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.record_store = record_store
    app.include_router(health.router)
    app.include_router(upload.router, prefix="/api")
    return app
