"""Error responses for the catalog viewer.

Every error leaves the app in the same envelope:
``{"error_code", "message", "details", "request_id"}``. Browsers posting
the page forms are sent back to the page instead, with a short error
code in the query string for the page to explain.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_viewer.domain.exceptions import CatalogFetchError, InvalidArgumentError, ViewerError

logger = structlog.get_logger()

PAGE_ERROR_MESSAGES = {
    "internal": "Something went wrong. Please try again.",
}


def page_error_message(code: str | None) -> str | None:
    """Get the page message for an error code from the query string."""
    if code is None:
        return None
    return PAGE_ERROR_MESSAGES.get(code)


def wants_html(request: Request) -> bool:
    """Check if the request came from the HTML page rather than an API client."""
    if request.url.path.startswith("/api/"):
        return False
    return "text/html" in request.headers.get("accept", "")


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Build an error response in the shared envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or {},
            "request_id": getattr(request.state, "request_id", None),
        },
    )


def back_to_page_with_error(code: str) -> RedirectResponse:
    """Redirect a browser to the page, flagging the error."""
    return RedirectResponse(url=f"/?error={code}", status_code=status.HTTP_303_SEE_OTHER)


# ============================================================================
# Exception Handlers
# ============================================================================


async def viewer_exception_handler(request: Request, exc: ViewerError) -> JSONResponse:
    """Map viewer errors to 400 (bad input) or 502 (catalog source)."""
    if isinstance(exc, InvalidArgumentError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, CatalogFetchError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.warning(
        "Request rejected",
        path=request.url.path,
        error_code=exc.error_code,
        error=exc.message,
    )
    return error_response(request, status_code, exc.error_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap routing errors (unknown path, wrong method) in the shared envelope."""
    error_code = {
        status.HTTP_404_NOT_FOUND: "NOT_FOUND",
        status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
    }.get(exc.status_code, "HTTP_ERROR")
    response = error_response(request, exc.status_code, error_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the application.

    Registered on Starlette's HTTPException so router 404/405 errors are
    covered as well as any raised by FastAPI code.
    """
    app.add_exception_handler(ViewerError, viewer_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
