"""Tests for catalog models."""

import pytest
from pydantic import ValidationError

from catalog_viewer.catalog.models import PaginationSummary, Product, SortKey


class TestProduct:
    """Tests for the Product model."""

    def test_parses_api_record(self) -> None:
        """A catalog endpoint record maps onto Product, extra fields ignored."""
        product = Product.model_validate(
            {
                "id": 4,
                "title": "Handmade Fresh Table",
                "slug": "handmade-fresh-table",
                "price": 687,
                "description": "Andy shoes are designed to keep in mind durability",
                "category": {"id": 5, "name": "Others", "image": "https://placehold.co/600x400", "slug": "others"},
                "images": ["https://placehold.co/600x400", "https://placehold.co/600x401"],
                "creationAt": "2024-01-01T00:00:00.000Z",
            }
        )

        assert product.id == 4
        assert product.price == 687
        assert isinstance(product.price, int)
        assert product.category_name == "Others"
        assert product.images == ("https://placehold.co/600x400", "https://placehold.co/600x401")

    def test_optional_fields_default(self) -> None:
        """Category, description and images are optional."""
        product = Product(id=1, title="Bare", price=1.5)

        assert product.category is None
        assert product.category_name is None
        assert product.description is None
        assert product.images == ()

    def test_blank_category_name(self) -> None:
        """An empty category name counts as missing."""
        product = Product.model_validate({"id": 1, "title": "x", "price": 1, "category": {"name": ""}})

        assert product.category_name is None

    def test_title_required(self) -> None:
        """Records without a title are rejected."""
        with pytest.raises(ValidationError):
            Product.model_validate({"id": 1, "price": 1})

    def test_products_are_immutable(self) -> None:
        """Products cannot be modified after loading."""
        product = Product(id=1, title="Fixed", price=1)

        with pytest.raises(ValidationError):
            product.title = "Changed"  # type: ignore[misc]


class TestSortKey:
    """Tests for SortKey."""

    def test_values_match_control_names(self) -> None:
        """Sort keys use the identifiers the page controls send."""
        assert [k.value for k in SortKey] == ["none", "priceAsc", "priceDesc", "nameAsc", "nameDesc"]

    def test_direction(self) -> None:
        """Only the two Desc keys are descending."""
        assert SortKey.PRICE_DESC.is_descending
        assert SortKey.NAME_DESC.is_descending
        assert not SortKey.PRICE_ASC.is_descending
        assert not SortKey.NONE.is_descending


class TestPaginationSummary:
    """Tests for PaginationSummary."""

    def test_middle_page(self) -> None:
        """A middle page has both neighbours."""
        summary = PaginationSummary(
            page_index=2,
            total_pages=3,
            first_item_ordinal=11,
            last_item_ordinal=20,
            total_matching=25,
        )

        assert summary.has_next
        assert summary.has_prev
        assert summary.range_label == "11-20 of 25"
