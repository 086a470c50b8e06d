"""Catalog page endpoints.

Serves the HTML product table and the form posts behind its controls.
Each control maps onto one CatalogView operation and redirects back to
the page, which renders the view afresh.
"""

from pathlib import Path
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from catalog_viewer.api.dependencies import get_loader, get_settings, get_view
from catalog_viewer.api.errors import page_error_message
from catalog_viewer.application.loader import CatalogLoader
from catalog_viewer.catalog.view import CatalogView, parse_page_size
from catalog_viewer.domain.exceptions import InvalidArgumentError
from catalog_viewer.infrastructure.config import Settings
from catalog_viewer.rendering.table import build_page_context

logger = structlog.get_logger()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Catalog Page"])


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def catalog_page(
    request: Request,
    view: Annotated[CatalogView, Depends(get_view)],
    loader: Annotated[CatalogLoader, Depends(get_loader)],
    settings: Annotated[Settings, Depends(get_settings)],
    error: str | None = None,
) -> HTMLResponse:
    """Render the product table for the current view state.

    ``error`` is set by the redirect after a failed form post.
    """
    context = build_page_context(
        view,
        loading=loader.is_loading,
        error_message=loader.error_message or page_error_message(error),
        page_size_options=settings.page_size_options,
        placeholder_template=settings.placeholder_image_template,
    )
    return templates.TemplateResponse(
        request,
        "catalog.html",
        {"title": "Product Catalog", **context},
    )


@router.post("/search", response_class=RedirectResponse)
async def search(
    view: Annotated[CatalogView, Depends(get_view)],
    q: Annotated[str, Form()] = "",
) -> RedirectResponse:
    """Filter products by title."""
    view.set_search(q)
    return _back_to_page()


@router.post("/sort", response_class=RedirectResponse)
async def sort(
    view: Annotated[CatalogView, Depends(get_view)],
    key: Annotated[str, Form()],
) -> RedirectResponse:
    """Change the sort order. Unknown keys are ignored."""
    try:
        view.set_sort(key)
    except InvalidArgumentError as e:
        logger.warning("Ignoring sort request", error=e.message)
    return _back_to_page()


@router.post("/page/next", response_class=RedirectResponse)
async def next_page(
    view: Annotated[CatalogView, Depends(get_view)],
) -> RedirectResponse:
    """Go to the next page."""
    view.next_page()
    return _back_to_page()


@router.post("/page/prev", response_class=RedirectResponse)
async def prev_page(
    view: Annotated[CatalogView, Depends(get_view)],
) -> RedirectResponse:
    """Go to the previous page."""
    view.prev_page()
    return _back_to_page()


@router.post("/page-size", response_class=RedirectResponse)
async def page_size(
    view: Annotated[CatalogView, Depends(get_view)],
    size: Annotated[str, Form()],
) -> RedirectResponse:
    """Change the page size. Invalid input keeps the previous size."""
    try:
        view.set_page_size(parse_page_size(size))
    except InvalidArgumentError as e:
        logger.warning(
            "Ignoring page size input",
            error=e.message,
            page_size=view.page_size,
        )
    return _back_to_page()


@router.post("/reload", response_class=RedirectResponse)
async def reload(
    loader: Annotated[CatalogLoader, Depends(get_loader)],
) -> RedirectResponse:
    """Fetch the catalog again. Failures are shown on the page."""
    await loader.reload()
    return _back_to_page()
