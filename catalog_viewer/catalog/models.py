"""Catalog models.

Defines the Product record as returned by the catalog endpoint, the sort
keys understood by the view and the pagination summary it reports.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Product
# ============================================================================


class ProductCategory(BaseModel):
    """Category a product belongs to. Display-only."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str | None = Field(None, description="Category ID")
    name: str | None = Field(None, description="Category name")
    slug: str | None = Field(None, description="URL slug")
    image: str | None = Field(None, description="Category image URL")


class Product(BaseModel):
    """Product record from the catalog endpoint.

    Only title and price take part in searching and sorting; the other
    fields are carried through to the renderer untouched. Fields the
    endpoint adds beyond these are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int | str = Field(..., description="Product ID")
    title: str = Field(..., description="Product title")
    price: int | float = Field(..., description="Product price")
    description: str | None = Field(None, description="Product description")
    category: ProductCategory | None = Field(None, description="Product category")
    images: tuple[str, ...] = Field(default=(), description="Image URLs, in display order")

    @property
    def category_name(self) -> str | None:
        """Get category name, if any."""
        if self.category is None:
            return None
        return self.category.name or None


# ============================================================================
# Sorting
# ============================================================================


class SortKey(str, Enum):
    """Sort orders offered by the viewer.

    NONE keeps the order the catalog endpoint returned.
    """

    NONE = "none"
    PRICE_ASC = "priceAsc"
    PRICE_DESC = "priceDesc"
    NAME_ASC = "nameAsc"
    NAME_DESC = "nameDesc"

    @property
    def is_descending(self) -> bool:
        """Check if the sort runs high-to-low."""
        return self in (SortKey.PRICE_DESC, SortKey.NAME_DESC)


# ============================================================================
# Pagination
# ============================================================================


@dataclass(frozen=True)
class PaginationSummary:
    """Where the visible page sits within the matching products.

    Attributes:
        page_index: Current page (1-indexed).
        total_pages: Number of pages, at least 1.
        first_item_ordinal: 1-based position of the first visible item, 0 if none.
        last_item_ordinal: 1-based position of the last visible item, 0 if none.
        total_matching: Number of products matching the search term.
    """

    page_index: int
    total_pages: int
    first_item_ordinal: int
    last_item_ordinal: int
    total_matching: int

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_index < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page_index > 1

    @property
    def range_label(self) -> str:
        """Short range description, e.g. "1-10 of 25"."""
        return f"{self.first_item_ordinal}-{self.last_item_ordinal} of {self.total_matching}"
