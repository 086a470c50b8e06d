"""Health check endpoints.

Provides endpoints for monitoring service health and catalog readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from catalog_viewer.api.dependencies import get_loader, get_settings
from catalog_viewer.application.loader import CatalogLoader
from catalog_viewer.infrastructure.config import Settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness response schema."""

    status: str
    catalog_status: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="catalog-viewer",
        version=settings.api_version,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    loader: Annotated[CatalogLoader, Depends(get_loader)],
) -> ReadinessResponse:
    """Report whether a catalog has been loaded.

    The service answers "ready" even when the last fetch failed; the page
    shows the error and offers a reload.
    """
    return ReadinessResponse(
        status="ready",
        catalog_status=loader.status.value,
        product_count=loader.view.total_products,
    )
