"""Pydantic schemas for the JSON view endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from catalog_viewer.application.loader import LoadStatus
from catalog_viewer.catalog.models import PaginationSummary, Product, SortKey


class ErrorResponse(BaseModel):
    """Error response envelope."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: dict = Field(default_factory=dict, description="Additional context")


class PaginationSummarySchema(BaseModel):
    """Position of the visible page within the matching products."""

    page_index: int = Field(..., ge=1, description="Current page (1-based)")
    total_pages: int = Field(..., ge=1, description="Number of pages")
    first_item_ordinal: int = Field(..., ge=0, description="First visible item, 0 if none")
    last_item_ordinal: int = Field(..., ge=0, description="Last visible item, 0 if none")
    total_matching: int = Field(..., ge=0, description="Products matching the search")
    has_next: bool
    has_prev: bool
    range_label: str = Field(..., description='Range text, e.g. "1-10 of 25"')

    @classmethod
    def from_summary(cls, summary: PaginationSummary) -> "PaginationSummarySchema":
        """Create from a view pagination summary."""
        return cls(
            page_index=summary.page_index,
            total_pages=summary.total_pages,
            first_item_ordinal=summary.first_item_ordinal,
            last_item_ordinal=summary.last_item_ordinal,
            total_matching=summary.total_matching,
            has_next=summary.has_next,
            has_prev=summary.has_prev,
            range_label=summary.range_label,
        )


class ViewResponse(BaseModel):
    """Current page of the catalog view plus the state that produced it."""

    items: list[Product] = Field(..., description="Products on the current page")
    summary: PaginationSummarySchema
    search_term: str
    sort_key: SortKey
    page_size: int
    catalog_status: LoadStatus
    error_message: str | None = None


class ViewUpdateRequest(BaseModel):
    """Changes to apply to the view, in the order page size, sort, search, page."""

    search: str | None = Field(None, description="New search term")
    sort: SortKey | None = Field(None, description="New sort key")
    page_size: int | None = Field(None, description="New page size")
    page: Literal["next", "prev"] | None = Field(None, description="Page move")
