"""JSON view endpoints.

Lets non-HTML render targets read the visible page and drive the same
view operations as the page controls.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_viewer.api.dependencies import get_loader, get_view
from catalog_viewer.api.schemas import (
    ErrorResponse,
    PaginationSummarySchema,
    ViewResponse,
    ViewUpdateRequest,
)
from catalog_viewer.application.loader import CatalogLoader
from catalog_viewer.catalog.view import CatalogView

router = APIRouter(prefix="/api/view", tags=["View"])


def _to_response(view: CatalogView, loader: CatalogLoader) -> ViewResponse:
    return ViewResponse(
        items=view.visible_items(),
        summary=PaginationSummarySchema.from_summary(view.pagination_summary()),
        search_term=view.search_term,
        sort_key=view.sort_key,
        page_size=view.page_size,
        catalog_status=loader.status,
        error_message=loader.error_message,
    )


@router.get("", response_model=ViewResponse)
async def get_view_state(
    view: Annotated[CatalogView, Depends(get_view)],
    loader: Annotated[CatalogLoader, Depends(get_loader)],
) -> ViewResponse:
    """Get the visible page and pagination summary.

    Returns:
        Current page of products with the view state.
    """
    return _to_response(view, loader)


@router.patch(
    "",
    response_model=ViewResponse,
    responses={400: {"model": ErrorResponse}},
)
async def update_view_state(
    request: ViewUpdateRequest,
    view: Annotated[CatalogView, Depends(get_view)],
    loader: Annotated[CatalogLoader, Depends(get_loader)],
) -> ViewResponse:
    """Apply view operations and return the resulting page.

    Page size is applied first so a rejected size leaves the view
    untouched.

    Args:
        request: Operations to apply.

    Returns:
        Current page of products with the view state.

    Raises:
        InvalidArgumentError: If the page size is not positive.
    """
    if request.page_size is not None:
        view.set_page_size(request.page_size)
    if request.sort is not None:
        view.set_sort(request.sort)
    if request.search is not None:
        view.set_search(request.search)
    if request.page == "next":
        view.next_page()
    elif request.page == "prev":
        view.prev_page()
    return _to_response(view, loader)
