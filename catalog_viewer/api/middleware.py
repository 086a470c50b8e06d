"""Request middleware for the catalog viewer.

``RequestIdMiddleware`` tags each request with an ``X-Request-ID`` and logs
one line per request. ``UnhandledErrorMiddleware`` turns crashes inside a
route into either the JSON error envelope or, for the HTML page, a
redirect back to ``/`` that tells the page to show an error.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_viewer.api.errors import back_to_page_with_error, error_response, wants_html

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a request ID to the request state, the logs and the response."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Catch exceptions no route or handler dealt with.

    Page requests go back to the catalog page with ``?error=internal``;
    everything else gets a 500 ``INTERNAL_ERROR`` envelope.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(
                "Unhandled exception",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            if wants_html(request):
                return back_to_page_with_error("internal")
            return error_response(
                request,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "INTERNAL_ERROR",
                "An internal error occurred",
            )


def setup_middleware(app: FastAPI) -> None:
    """Install middleware. The request ID layer is added last so it runs first."""
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestIdMiddleware)
