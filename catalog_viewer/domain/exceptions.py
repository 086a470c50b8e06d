"""Viewer exceptions.

Errors raised by the catalog view and by the catalog source. The view
itself only ever raises InvalidArgumentError; fetch failures come from the
HTTP client and are handled by the loader.
"""

from typing import Any


class ViewerError(Exception):
    """Base class for all catalog viewer exceptions.

    Carries a human-readable message and an optional details dictionary
    that the API layer copies into error responses.
    """

    error_code = "VIEWER_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize viewer error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# View Errors
# ============================================================================


class InvalidArgumentError(ViewerError):
    """Raised when a view operation receives an argument outside its domain.

    The view rejects the value instead of clamping it, so the caller can
    drop the input and keep the previous state.
    """

    error_code = "INVALID_ARGUMENT"

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument.
            value: The rejected value.
            reason: Why the value was rejected.
        """
        super().__init__(
            f"Invalid {argument} {value!r}: {reason}",
            details={"argument": argument, "value": value, "reason": reason},
        )


# ============================================================================
# Catalog Source Errors
# ============================================================================


class CatalogFetchError(ViewerError):
    """Base class for failures fetching the catalog."""

    error_code = "CATALOG_FETCH_FAILED"


class NetworkError(CatalogFetchError):
    """Raised when the catalog endpoint cannot be reached or answers non-2xx."""

    error_code = "NETWORK_ERROR"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize network error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code, if a response was received.
        """
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code


class DecodeError(CatalogFetchError):
    """Raised when the catalog payload is not a valid product list."""

    error_code = "DECODE_ERROR"
