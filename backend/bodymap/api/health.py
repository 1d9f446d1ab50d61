"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bodymap import __version__
from bodymap.dependencies import get_catalog
from bodymap.models.regions import RegionCatalog
from bodymap.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(catalog: RegionCatalog = Depends(get_catalog)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        regions_loaded=catalog.region_count,
    )
