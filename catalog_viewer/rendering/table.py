"""Product table rendering adapter.

Turns the view's visible page and pagination summary into the values the
``catalog.html`` template prints. Nothing here reads or changes view
state beyond the public read operations.
"""

from dataclasses import dataclass, field
from typing import Any

from catalog_viewer.catalog.models import PaginationSummary, Product, SortKey
from catalog_viewer.catalog.view import CatalogView

DEFAULT_PLACEHOLDER_TEMPLATE = "https://placehold.co/80x80/667eea/white?text=IMG+{index}"
MISSING_CATEGORY = "N/A"
MISSING_DESCRIPTION = "No description"
NO_RESULTS_MESSAGE = "No products found"
TABLE_COLUMNS = ("ID", "Images", "Title", "Price", "Category", "Description")

SORT_BUTTONS = (
    (SortKey.PRICE_ASC, "Price: Low to High"),
    (SortKey.PRICE_DESC, "Price: High to Low"),
    (SortKey.NAME_ASC, "Name: A-Z"),
    (SortKey.NAME_DESC, "Name: Z-A"),
)


@dataclass(frozen=True)
class ImageCell:
    """One product image plus the placeholder shown if it fails to load."""

    src: str
    alt: str
    fallback: str


@dataclass(frozen=True)
class ProductRow:
    """Display values for one table row."""

    id: str
    title: str
    price: str
    category: str
    description: str
    images: list[ImageCell] = field(default_factory=list)


@dataclass(frozen=True)
class SortButton:
    """Sort trigger with its highlight state."""

    key: str
    label: str
    active: bool


def placeholder_image_url(index: int, template: str = DEFAULT_PLACEHOLDER_TEMPLATE) -> str:
    """Build the placeholder URL for an image that failed to load.

    Args:
        index: 1-based position of the image within its product.
        template: URL template with an ``{index}`` field.

    Returns:
        Placeholder image URL.
    """
    return template.format(index=index)


def format_price(price: int | float) -> str:
    """Format a price for display, e.g. 25 -> "$25", 9.5 -> "$9.5"."""
    if isinstance(price, float) and price.is_integer():
        price = int(price)
    return f"${price}"


def build_row(product: Product, placeholder_template: str = DEFAULT_PLACEHOLDER_TEMPLATE) -> ProductRow:
    """Build the display row for a product.

    Args:
        product: Product to display.
        placeholder_template: Fallback image URL template.

    Returns:
        Row display values.
    """
    return ProductRow(
        id=str(product.id),
        title=product.title,
        price=format_price(product.price),
        category=product.category_name or MISSING_CATEGORY,
        description=product.description or MISSING_DESCRIPTION,
        images=[
            ImageCell(
                src=src,
                alt=product.title,
                fallback=placeholder_image_url(index, placeholder_template),
            )
            for index, src in enumerate(product.images, start=1)
        ],
    )


def page_label(summary: PaginationSummary) -> str:
    """Page position, e.g. "Page 2 / 3"."""
    return f"Page {summary.page_index} / {summary.total_pages}"


def count_label(summary: PaginationSummary) -> str:
    """Visible range, e.g. "Showing 1-10 of 25 products"."""
    return f"Showing {summary.range_label} products"


def sort_buttons(active: SortKey) -> list[SortButton]:
    """Get the four sort triggers, marking the active one."""
    return [SortButton(key=key.value, label=label, active=key is active) for key, label in SORT_BUTTONS]


def page_size_choices(current: int, options: list[int]) -> list[int]:
    """Get the page-size selector values, always including the current size."""
    choices = set(options)
    choices.add(current)
    return sorted(choices)


def build_page_context(
    view: CatalogView,
    *,
    loading: bool = False,
    error_message: str | None = None,
    page_size_options: list[int] | None = None,
    placeholder_template: str = DEFAULT_PLACEHOLDER_TEMPLATE,
) -> dict[str, Any]:
    """Build the template context for the catalog page.

    Args:
        view: View to render.
        loading: Whether a catalog fetch is pending.
        error_message: Fetch failure message to show, if any.
        page_size_options: Values offered by the page-size selector.
        placeholder_template: Fallback image URL template.

    Returns:
        Template context.
    """
    summary = view.pagination_summary()
    return {
        "columns": TABLE_COLUMNS,
        "rows": [build_row(p, placeholder_template) for p in view.visible_items()],
        "no_results_message": NO_RESULTS_MESSAGE,
        "summary": summary,
        "page_label": page_label(summary),
        "count_label": count_label(summary),
        "prev_disabled": not summary.has_prev,
        "next_disabled": not summary.has_next,
        "sort_buttons": sort_buttons(view.sort_key),
        "search_term": view.search_term,
        "page_size": view.page_size,
        "page_size_choices": page_size_choices(view.page_size, page_size_options or []),
        "loading": loading,
        "error_message": error_message,
    }
