"""Domain errors shared by the view, the catalog client and the API."""

from catalog_viewer.domain.exceptions import (
    CatalogFetchError,
    DecodeError,
    InvalidArgumentError,
    NetworkError,
    ViewerError,
)

__all__ = [
    "ViewerError",
    "InvalidArgumentError",
    "CatalogFetchError",
    "NetworkError",
    "DecodeError",
]
