"""POST /api/render — SVG document for a styled selection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from bodymap.config import Settings
from bodymap.dependencies import build_diagram, get_catalog, get_frame_cache, get_settings
from bodymap.engine.frame import FrameCache
from bodymap.models.regions import RegionCatalog
from bodymap.models.requests import RenderRequest

router = APIRouter()


@router.post("/render", response_class=Response)
async def render(
    req: RenderRequest,
    catalog: RegionCatalog = Depends(get_catalog),
    frames: FrameCache = Depends(get_frame_cache),
    cfg: Settings = Depends(get_settings),
) -> Response:
    diagram = build_diagram(req, catalog, frames, cfg)
    svg = diagram.render(req.width, req.height, (req.pan_x, req.pan_y))
    return Response(content=svg, media_type="image/svg+xml")
