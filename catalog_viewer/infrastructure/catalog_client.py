"""Catalog HTTP client.

Fetches the product catalog from the remote REST endpoint and decodes it
into Product models.
"""

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from catalog_viewer.catalog.models import Product
from catalog_viewer.domain.exceptions import DecodeError, NetworkError

logger = structlog.get_logger()

_product_list = TypeAdapter(list[Product])


class CatalogClient:
    """HTTP client for the product catalog endpoint.

    One GET returns the whole catalog as a JSON array. Failures are raised
    as NetworkError or DecodeError; nothing is retried here.
    """

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        """Initialize the catalog client.

        Args:
            url: Catalog endpoint URL.
            timeout: Request timeout in seconds.
        """
        self.url = url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_catalog(self) -> list[Product]:
        """Fetch every product from the catalog endpoint.

        Returns:
            Products in the order the endpoint returned them.

        Raises:
            NetworkError: On transport failure, timeout or non-2xx status.
            DecodeError: If the body is not a JSON array of products.
        """
        client = await self._get_client()
        logger.info("Fetching catalog", url=self.url)

        try:
            response = await client.get(self.url)
        except httpx.TimeoutException as e:
            logger.error("Catalog request timed out", url=self.url, error=str(e))
            raise NetworkError(f"Request timed out: {self.url}") from e
        except httpx.RequestError as e:
            logger.error("Catalog request failed", url=self.url, error=str(e))
            raise NetworkError(f"Request failed: {e}") from e

        if response.status_code >= 400:
            logger.error(
                "Catalog endpoint returned an error",
                url=self.url,
                status_code=response.status_code,
            )
            raise NetworkError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Catalog response is not JSON", url=self.url, error=str(e))
            raise DecodeError(f"Invalid JSON in catalog response: {e}") from e

        products = decode_products(data)
        logger.info("Catalog fetched", url=self.url, product_count=len(products))
        return products


def decode_products(data: Any) -> list[Product]:
    """Validate a decoded JSON payload as a product list.

    Args:
        data: Decoded JSON body.

    Returns:
        Products in payload order.

    Raises:
        DecodeError: If data is not a list of valid product records.
    """
    if not isinstance(data, list):
        raise DecodeError(
            f"Expected a JSON array of products, got {type(data).__name__}",
            details={"payload_type": type(data).__name__},
        )
    try:
        return _product_list.validate_python(data)
    except ValidationError as e:
        raise DecodeError(
            f"Invalid product record: {e.errors()[0]['msg']}",
            details={"error_count": e.error_count()},
        ) from e
