"""Shared fixtures for catalog viewer tests."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from catalog_viewer.catalog.models import Product
from catalog_viewer.catalog.view import CatalogView
from catalog_viewer.infrastructure.catalog_client import CatalogClient
from catalog_viewer.infrastructure.config import Settings


def make_product(
    product_id: int,
    title: str | None = None,
    price: int | float = 10,
    **extra,
) -> Product:
    """Create a product with sensible defaults."""
    return Product(
        id=product_id,
        title=title if title is not None else f"Product {product_id}",
        price=price,
        **extra,
    )


@pytest.fixture
def products() -> list[Product]:
    """25 products in load order, prices descending from 250."""
    return [make_product(i, price=(26 - i) * 10) for i in range(1, 26)]


@pytest.fixture
def view(products: list[Product]) -> CatalogView:
    """View loaded with 25 products, page size 10."""
    view = CatalogView(page_size=10)
    view.load(products)
    return view


@pytest.fixture
def mock_catalog_client(products: list[Product]) -> MagicMock:
    """Create a mock catalog client returning the 25 products."""
    client = MagicMock(spec=CatalogClient)
    client.fetch_catalog = AsyncMock(return_value=products)
    client.close = AsyncMock()
    return client


@pytest.fixture
def viewer_settings() -> Settings:
    """Settings that skip the startup fetch."""
    return Settings(
        fetch_on_startup=False,
        log_json=False,
        catalog_api_url="http://catalog.test/api/v1/products",
    )


@pytest.fixture
def app(viewer_settings: Settings, mock_catalog_client: MagicMock) -> FastAPI:
    """Create application wired to the mock catalog client."""
    from catalog_viewer.main import create_app

    return create_app(settings=viewer_settings, client=mock_catalog_client)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Create test client with an empty catalog."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def loaded_client(client: TestClient) -> TestClient:
    """Create test client after the catalog has been loaded."""
    response = client.post("/reload", follow_redirects=False)
    assert response.status_code == 303
    return client
