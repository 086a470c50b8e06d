"""Product Catalog View.

In-memory search, sort and pagination over a fetched product catalog.
"""

from catalog_viewer.catalog.collation import collation_key
from catalog_viewer.catalog.models import PaginationSummary, Product, ProductCategory, SortKey
from catalog_viewer.catalog.view import DEFAULT_PAGE_SIZE, CatalogView, parse_page_size

__all__ = [
    # Models
    "Product",
    "ProductCategory",
    "SortKey",
    "PaginationSummary",
    # Ordering
    "collation_key",
    # View
    "CatalogView",
    "DEFAULT_PAGE_SIZE",
    "parse_page_size",
]
