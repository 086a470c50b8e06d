"""Catalog Viewer main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers and startup/shutdown events.
"""

import asyncio
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI

from catalog_viewer.api.errors import register_error_handlers
from catalog_viewer.api.health import router as health_router
from catalog_viewer.api.middleware import setup_middleware
from catalog_viewer.api.pages import router as pages_router
from catalog_viewer.api.view import router as view_router
from catalog_viewer.application.loader import CatalogLoader
from catalog_viewer.catalog.view import CatalogView
from catalog_viewer.infrastructure.catalog_client import CatalogClient
from catalog_viewer.infrastructure.config import Settings
from catalog_viewer.infrastructure.config import settings as default_settings
from catalog_viewer.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Starts the first catalog fetch without waiting for it, so the page can
    show its loading indicator while the fetch is pending.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    settings: Settings = app.state.settings
    loader: CatalogLoader = app.state.loader

    logger.info(
        "Starting Catalog Viewer",
        version=settings.api_version,
        catalog_api_url=settings.catalog_api_url,
    )

    initial_fetch: asyncio.Task | None = None
    if settings.fetch_on_startup:
        initial_fetch = asyncio.create_task(loader.reload())

    yield

    if initial_fetch is not None and not initial_fetch.done():
        initial_fetch.cancel()
        with suppress(asyncio.CancelledError):
            await initial_fetch
    await loader.client.close()
    logger.info("Shutting down Catalog Viewer")


def create_app(
    settings: Settings | None = None,
    client: CatalogClient | None = None,
) -> FastAPI:
    """Build the application with its view, loader and routes.

    Args:
        settings: Settings to use; the environment-loaded settings by default.
        client: Catalog source; built from settings by default.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level, json_output=settings.log_json)

    view = CatalogView(page_size=settings.default_page_size)
    client = client or CatalogClient(settings.catalog_api_url, timeout=settings.request_timeout)

    app = FastAPI(
        title="Catalog Viewer",
        description="Search, sort and page through a remote product catalog",
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.view = view
    app.state.loader = CatalogLoader(view, client)

    setup_middleware(app)
    register_error_handlers(app)

    app.include_router(health_router, tags=["Health"])
    app.include_router(pages_router)
    app.include_router(view_router)

    return app


app = create_app()
