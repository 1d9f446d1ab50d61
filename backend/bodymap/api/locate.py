"""POST /api/locate — resolve a pointer position to a region."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bodymap.config import Settings
from bodymap.dependencies import build_diagram, get_catalog, get_frame_cache, get_settings
from bodymap.engine.frame import FrameCache
from bodymap.models.regions import RegionCatalog
from bodymap.models.requests import LocateRequest
from bodymap.models.responses import LocateResponse
from bodymap.svg.primitives import Point

router = APIRouter()


@router.post("/locate", response_model=LocateResponse)
async def locate(
    req: LocateRequest,
    catalog: RegionCatalog = Depends(get_catalog),
    frames: FrameCache = Depends(get_frame_cache),
    cfg: Settings = Depends(get_settings),
) -> LocateResponse:
    diagram = build_diagram(req, catalog, frames, cfg)
    pan = (req.pan_x, req.pan_y)
    svg_point = diagram.transform(req.width, req.height, pan).inverse(Point(req.x, req.y))
    hit = diagram.locate((req.x, req.y), (req.width, req.height), pan)

    return LocateResponse(
        region=hit.region_id if hit else None,
        side=hit.side if hit else None,
        svg_x=svg_point.x,
        svg_y=svg_point.y,
    )
