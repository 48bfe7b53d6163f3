"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from rdl_summary.api.middleware.error_handler import register_error_handlers
from rdl_summary.api.routes import health, rating, summaries
from rdl_summary.core.config import AppSettings
from rdl_summary.core.logging_config import setup_logging
from rdl_summary.core.startup_checks import validate_settings
from rdl_summary.store.memory_store import MemorySummaryStore


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("rdl-summary")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    configure_logging: bool = True,
) -> FastAPI:
    """Build the API. Settings are read from the environment when not given."""
    app_settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application startup/shutdown lifecycle."""
        validate_settings(app_settings)
        if configure_logging:
            setup_logging(app_settings.observability)
        app.state.settings = app_settings
        app.state.store = MemorySummaryStore(max_entries=app_settings.store.max_entries)
        yield

    app = FastAPI(
        title=app_settings.api.title,
        description=app_settings.api.description,
        version=_get_version(),
        lifespan=lifespan,
    )
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(summaries.router, prefix="/api")
    app.include_router(rating.router, prefix="/api")
    return app


app = create_app()
