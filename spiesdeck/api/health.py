"""
Health check endpoints.

Provides a liveness probe and a readiness probe that checks the catalog.
"""

from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel

from spiesdeck.services.catalog_loader import CatalogError, get_catalog

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    catalog_cards: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(request: Request, response: Response) -> HealthResponse:
    """
    Readiness probe.

    Returns ready once the card catalog is loaded. Returns 503 if it cannot be.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        try:
            catalog = get_catalog()
        except CatalogError:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
            return HealthResponse(status="not ready")
        request.app.state.catalog = catalog
    return HealthResponse(status="ready", catalog_cards=len(catalog))
