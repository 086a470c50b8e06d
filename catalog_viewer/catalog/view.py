"""Catalog view.

Holds the loaded catalog plus the search, sort and pagination parameters,
and derives the page that should currently be shown. No I/O happens here:
the loader feeds products in, the renderer pulls pages out.
"""

from collections.abc import Iterable

import structlog

from catalog_viewer.catalog.collation import collation_key
from catalog_viewer.catalog.models import PaginationSummary, Product, SortKey
from catalog_viewer.domain.exceptions import InvalidArgumentError

logger = structlog.get_logger()

DEFAULT_PAGE_SIZE = 10


class CatalogView:
    """Search, sort and paginate an in-memory product catalog.

    All state changes go through the operations below. Derived data
    (filtered and sorted products, page count, visible slice) is computed
    on read, so callers re-pull ``visible_items()`` and
    ``pagination_summary()`` after each operation.

    Example usage:
        view = CatalogView(page_size=10)
        view.load(products)
        view.set_search("shirt")
        view.set_sort(SortKey.PRICE_ASC)
        view.next_page()

        rows = view.visible_items()
        summary = view.pagination_summary()
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """Initialize an empty view.

        Args:
            page_size: Initial number of products per page.

        Raises:
            InvalidArgumentError: If page_size is not positive.
        """
        self._validate_page_size(page_size)
        self._products: tuple[Product, ...] = ()
        self._version = 0
        self._search_term = ""
        self._sort_key = SortKey.NONE
        self._page_index = 1
        self._page_size = page_size
        self._cache_key: tuple[str, SortKey, int] | None = None
        self._cache: tuple[Product, ...] = ()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def search_term(self) -> str:
        """Current normalized search term."""
        return self._search_term

    @property
    def sort_key(self) -> SortKey:
        """Current sort key."""
        return self._sort_key

    @property
    def page_index(self) -> int:
        """Current page (1-indexed)."""
        return self._page_index

    @property
    def page_size(self) -> int:
        """Products per page."""
        return self._page_size

    @property
    def total_products(self) -> int:
        """Number of products in the loaded catalog."""
        return len(self._products)

    @property
    def version(self) -> int:
        """Catalog version, bumped on every load."""
        return self._version

    # =========================================================================
    # Operations
    # =========================================================================

    def load(self, products: Iterable[Product]) -> None:
        """Replace the catalog and reset search, sort and page.

        The page size is kept. The given sequence is copied, never
        reordered.

        Args:
            products: Products in the order the catalog source returned them.
        """
        self._products = tuple(products)
        self._version += 1
        self._search_term = ""
        self._sort_key = SortKey.NONE
        self._page_index = 1
        logger.debug(
            "Catalog loaded into view",
            product_count=len(self._products),
            version=self._version,
        )

    def set_search(self, term: str) -> None:
        """Filter by case-insensitive substring of the product title.

        Args:
            term: Search text; surrounding whitespace is ignored.
        """
        self._search_term = term.strip().lower()
        self._page_index = 1
        logger.debug("Search term set", search_term=self._search_term)

    def set_sort(self, key: SortKey | str) -> None:
        """Set the sort order. SortKey.NONE restores load order.

        Args:
            key: Sort key or its string value (e.g. "priceAsc").

        Raises:
            InvalidArgumentError: If key is not a known sort key.
        """
        try:
            self._sort_key = SortKey(key)
        except ValueError:
            raise InvalidArgumentError(
                "sort key",
                key,
                f"expected one of {[k.value for k in SortKey]}",
            ) from None
        self._page_index = 1
        logger.debug("Sort key set", sort_key=self._sort_key.value)

    def set_page_size(self, size: int) -> None:
        """Set the number of products per page.

        Args:
            size: Products per page.

        Raises:
            InvalidArgumentError: If size is not positive. The previous page
                size is kept.
        """
        self._validate_page_size(size)
        self._page_size = size
        self._page_index = 1
        logger.debug("Page size set", page_size=size)

    def next_page(self) -> None:
        """Move forward one page. Does nothing on the last page."""
        if self._page_index < self._total_pages(len(self.filtered_sorted())):
            self._page_index += 1

    def prev_page(self) -> None:
        """Move back one page. Does nothing on the first page."""
        if self._page_index > 1:
            self._page_index -= 1

    # =========================================================================
    # Derived Data
    # =========================================================================

    def filtered_sorted(self) -> tuple[Product, ...]:
        """Get all products matching the search term, in sort order.

        Returns:
            Matching products. Load order when the sort key is NONE.
        """
        cache_key = (self._search_term, self._sort_key, self._version)
        if cache_key != self._cache_key:
            self._cache = self._sort(self._filter(self._products))
            self._cache_key = cache_key
        return self._cache

    def visible_items(self) -> list[Product]:
        """Get the products on the current page.

        Returns:
            Current page slice, possibly empty.
        """
        start = (self._page_index - 1) * self._page_size
        return list(self.filtered_sorted()[start : start + self._page_size])

    def pagination_summary(self) -> PaginationSummary:
        """Describe the current page.

        Returns:
            Page position, page count and 1-based bounds of the visible slice.
        """
        total = len(self.filtered_sorted())
        if total == 0:
            first = last = 0
        else:
            first = (self._page_index - 1) * self._page_size + 1
            last = min(self._page_index * self._page_size, total)
        return PaginationSummary(
            page_index=self._page_index,
            total_pages=self._total_pages(total),
            first_item_ordinal=first,
            last_item_ordinal=last,
            total_matching=total,
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _filter(self, products: tuple[Product, ...]) -> tuple[Product, ...]:
        if not self._search_term:
            return products
        return tuple(p for p in products if self._search_term in p.title.lower())

    def _sort(self, products: tuple[Product, ...]) -> tuple[Product, ...]:
        # sorted() is stable, including with reverse=True
        key = self._sort_key
        if key is SortKey.NONE:
            return products
        if key in (SortKey.PRICE_ASC, SortKey.PRICE_DESC):
            return tuple(sorted(products, key=lambda p: p.price, reverse=key.is_descending))
        return tuple(
            sorted(products, key=lambda p: collation_key(p.title), reverse=key.is_descending)
        )

    def _total_pages(self, total: int) -> int:
        return max(1, -(-total // self._page_size))

    @staticmethod
    def _validate_page_size(size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgumentError("page size", size, "must be an integer")
        if size <= 0:
            raise InvalidArgumentError("page size", size, "must be a positive integer")


def parse_page_size(raw: str) -> int:
    """Parse page-size input from a form or query string.

    Args:
        raw: Raw text, e.g. "25".

    Returns:
        Parsed page size.

    Raises:
        InvalidArgumentError: If raw is not a positive integer.
    """
    try:
        size = int(raw.strip())
    except ValueError:
        raise InvalidArgumentError("page size", raw, "must be a number") from None
    if size <= 0:
        raise InvalidArgumentError("page size", size, "must be a positive integer")
    return size
