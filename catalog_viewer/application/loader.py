"""Catalog loader.

Runs a catalog fetch and hands the result to the view. A failed fetch
leaves the view exactly as it was and records a message for the page.
"""

from enum import Enum

import structlog

from catalog_viewer.catalog.view import CatalogView
from catalog_viewer.domain.exceptions import CatalogFetchError
from catalog_viewer.infrastructure.catalog_client import CatalogClient

logger = structlog.get_logger()


class LoadStatus(str, Enum):
    """Catalog load status shown by the page."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class CatalogLoader:
    """Fetches the catalog and loads it into a CatalogView.

    Overlapping reloads are allowed: each one that succeeds calls
    ``view.load`` when it completes, so the last to finish wins.
    """

    def __init__(self, view: CatalogView, client: CatalogClient) -> None:
        """Initialize loader.

        Args:
            view: View to load products into.
            client: Catalog source.
        """
        self.view = view
        self.client = client
        self.status = LoadStatus.IDLE
        self.error_message: str | None = None
        self._in_flight = 0

    @property
    def is_loading(self) -> bool:
        """Check if a fetch is pending."""
        return self._in_flight > 0

    async def reload(self) -> bool:
        """Fetch the catalog and replace the view's products.

        Returns:
            True if the catalog was loaded, False if the fetch failed.
        """
        self._in_flight += 1
        self.status = LoadStatus.LOADING
        try:
            products = await self.client.fetch_catalog()
        except CatalogFetchError as e:
            self.error_message = f"Failed to load products: {e.message}. Please try again later!"
            self.status = LoadStatus.FAILED
            logger.warning(
                "Catalog load failed",
                error_code=e.error_code,
                error=e.message,
                kept_products=self.view.total_products,
            )
            return False
        finally:
            self._in_flight -= 1

        self.view.load(products)
        self.error_message = None
        self.status = LoadStatus.LOADED
        logger.info("Catalog loaded", product_count=len(products))
        return True
