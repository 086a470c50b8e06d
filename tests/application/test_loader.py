"""Tests for the catalog loader."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from catalog_viewer.application.loader import CatalogLoader, LoadStatus
from catalog_viewer.catalog.models import Product, SortKey
from catalog_viewer.catalog.view import CatalogView
from catalog_viewer.domain.exceptions import DecodeError, NetworkError
from tests.conftest import make_product


@pytest.fixture
def loader(mock_catalog_client: MagicMock) -> CatalogLoader:
    """Create loader with an empty view."""
    return CatalogLoader(CatalogView(), mock_catalog_client)


class TestCatalogLoader:
    """Tests for CatalogLoader."""

    def test_initial_status(self, loader: CatalogLoader) -> None:
        """Nothing has been fetched yet."""
        assert loader.status is LoadStatus.IDLE
        assert loader.error_message is None
        assert not loader.is_loading

    @pytest.mark.asyncio
    async def test_reload_loads_view(self, loader: CatalogLoader, products: list[Product]) -> None:
        """A successful fetch replaces the view's products."""
        assert await loader.reload() is True

        assert loader.status is LoadStatus.LOADED
        assert loader.view.total_products == len(products)
        assert not loader.is_loading

    @pytest.mark.asyncio
    async def test_reload_resets_view_state(self, loader: CatalogLoader) -> None:
        """Reloading clears the search and sort like any load."""
        await loader.reload()
        loader.view.set_search("product 1")
        loader.view.set_sort(SortKey.NAME_DESC)

        await loader.reload()

        assert loader.view.search_term == ""
        assert loader.view.sort_key is SortKey.NONE

    @pytest.mark.asyncio
    async def test_network_failure_keeps_empty_view(
        self, loader: CatalogLoader, mock_catalog_client: MagicMock
    ) -> None:
        """A failed first fetch leaves the view empty and records the message."""
        mock_catalog_client.fetch_catalog.side_effect = NetworkError(
            "HTTP error! status: 500", status_code=500
        )

        assert await loader.reload() is False

        assert loader.status is LoadStatus.FAILED
        assert loader.view.total_products == 0
        assert loader.error_message == (
            "Failed to load products: HTTP error! status: 500. Please try again later!"
        )

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_catalog(
        self, loader: CatalogLoader, mock_catalog_client: MagicMock
    ) -> None:
        """A failed reload keeps the previous catalog and view state."""
        await loader.reload()
        loader.view.set_search("product 2")
        version = loader.view.version

        mock_catalog_client.fetch_catalog.side_effect = DecodeError("Invalid JSON")
        await loader.reload()

        assert loader.view.version == version
        assert loader.view.search_term == "product 2"
        assert loader.view.total_products == 25
        assert "Invalid JSON" in loader.error_message

    @pytest.mark.asyncio
    async def test_success_clears_previous_error(
        self, loader: CatalogLoader, mock_catalog_client: MagicMock, products: list[Product]
    ) -> None:
        """Retrying after a failure clears the error message."""
        mock_catalog_client.fetch_catalog.side_effect = NetworkError("Request failed")
        await loader.reload()

        mock_catalog_client.fetch_catalog.side_effect = None
        mock_catalog_client.fetch_catalog.return_value = products
        await loader.reload()

        assert loader.error_message is None
        assert loader.status is LoadStatus.LOADED

    @pytest.mark.asyncio
    async def test_last_completed_fetch_wins(self) -> None:
        """Overlapping reloads keep whichever fetch finished last."""
        slow_started = asyncio.Event()
        release_slow = asyncio.Event()

        async def fetch_slow() -> list[Product]:
            slow_started.set()
            await release_slow.wait()
            return [make_product(1, "Slow")]

        async def fetch_fast() -> list[Product]:
            return [make_product(2, "Fast")]

        responses = iter([fetch_slow, fetch_fast])

        async def fetch_catalog() -> list[Product]:
            return await next(responses)()

        client = MagicMock()
        client.fetch_catalog = AsyncMock(side_effect=fetch_catalog)

        loader = CatalogLoader(CatalogView(), client)

        slow = asyncio.create_task(loader.reload())
        await slow_started.wait()
        assert loader.is_loading

        await loader.reload()
        assert [p.title for p in loader.view.visible_items()] == ["Fast"]
        assert loader.is_loading

        release_slow.set()
        await slow

        assert [p.title for p in loader.view.visible_items()] == ["Slow"]
        assert not loader.is_loading
