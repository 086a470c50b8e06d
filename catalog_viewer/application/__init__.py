"""Application services.

Coordinates the catalog source and the view.
"""

from catalog_viewer.application.loader import CatalogLoader, LoadStatus

__all__ = [
    "CatalogLoader",
    "LoadStatus",
]
