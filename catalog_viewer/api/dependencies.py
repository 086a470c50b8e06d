"""FastAPI dependencies.

The view, loader and settings live on ``app.state`` for the lifetime of
the process; one view is shared by every request.
"""

from fastapi import Request

from catalog_viewer.application.loader import CatalogLoader
from catalog_viewer.catalog.view import CatalogView
from catalog_viewer.infrastructure.config import Settings


def get_view(request: Request) -> CatalogView:
    """Get catalog view dependency."""
    return request.app.state.view


def get_loader(request: Request) -> CatalogLoader:
    """Get catalog loader dependency."""
    return request.app.state.loader


def get_settings(request: Request) -> Settings:
    """Get settings dependency."""
    return request.app.state.settings
