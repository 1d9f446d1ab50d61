"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import HTTPException, Request

from bodymap.config import Settings, settings
from bodymap.engine.diagram import BodyDiagram
from bodymap.engine.frame import FrameCache
from bodymap.models.regions import RegionCatalog, body_key
from bodymap.models.requests import RenderRequest, SelectionRequest
from bodymap.models.styling import Color


def get_settings() -> Settings:
    return settings


def get_catalog(request: Request) -> RegionCatalog:
    return request.app.state.catalog


def get_frame_cache(request: Request) -> FrameCache:
    return request.app.state.frames


def build_diagram(
    req: SelectionRequest,
    catalog: RegionCatalog,
    frames: FrameCache,
    cfg: Settings,
) -> BodyDiagram:
    """Diagram for a request; 404 when the catalog has no artwork for the body."""
    key = body_key(req.gender, req.side)
    if key not in catalog.bodies:
        raise HTTPException(status_code=404, detail=f"No artwork for {key}")

    disabled = catalog.group_members(cfg.disabled_group) if req.disabled is None else set(req.disabled)
    kwargs: dict = {
        "palette": [Color.from_hex(c) for c in cfg.palette],
        "border": Color.from_hex(cfg.border_color),
    }
    if isinstance(req, RenderRequest):
        kwargs["data"] = req.data
        if req.colors is not None:
            kwargs["palette"] = req.colors
        if not req.show_border:
            kwargs["border"] = None
        elif req.border is not None:
            kwargs["border"] = req.border

    return BodyDiagram(
        catalog,
        frames,
        gender=req.gender,
        side=req.side,
        section=req.section,
        scale=getattr(req, "scale", 1.0),
        disabled=disabled,
        disabled_fill=Color.from_hex(cfg.disabled_fill),
        hidden=set(req.hidden),
        default_fill=Color.from_hex(cfg.default_fill),
        curve_samples=cfg.curve_samples,
        **kwargs,
    )
