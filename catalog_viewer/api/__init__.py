"""API layer module.

Contains the catalog page, JSON view and health routers.
"""

from catalog_viewer.api.health import router as health_router
from catalog_viewer.api.pages import router as pages_router
from catalog_viewer.api.view import router as view_router

__all__ = [
    "health_router",
    "pages_router",
    "view_router",
]
