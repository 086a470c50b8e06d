"""HTML rendering of the visible catalog page."""

from catalog_viewer.rendering.table import (
    ImageCell,
    ProductRow,
    SortButton,
    build_page_context,
    build_row,
    format_price,
    placeholder_image_url,
)

__all__ = [
    "ImageCell",
    "ProductRow",
    "SortButton",
    "build_page_context",
    "build_row",
    "format_price",
    "placeholder_image_url",
]
