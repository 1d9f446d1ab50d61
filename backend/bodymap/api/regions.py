"""GET /api/regions/* — parsed geometry and view frame for a selection."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bodymap.config import Settings
from bodymap.dependencies import build_diagram, get_catalog, get_frame_cache, get_settings
from bodymap.engine.frame import FrameCache
from bodymap.models.regions import BodySection, BodySide, Gender, RegionCatalog
from bodymap.models.requests import SelectionRequest
from bodymap.models.responses import FrameModel, RegionPathsModel, RegionsResponse
from bodymap.svg.serializer import path_to_d

router = APIRouter(prefix="/regions")


@router.get("/{gender}/{side}/{section}", response_model=RegionsResponse)
async def get_regions(
    gender: Gender,
    side: BodySide,
    section: BodySection,
    catalog: RegionCatalog = Depends(get_catalog),
    frames: FrameCache = Depends(get_frame_cache),
    cfg: Settings = Depends(get_settings),
) -> RegionsResponse:
    diagram = build_diagram(
        SelectionRequest(gender=gender, side=side, section=section), catalog, frames, cfg
    )
    frame = diagram.frame()
    border = diagram.border_path()

    return RegionsResponse(
        key=diagram.key,
        frame=FrameModel(x=frame.x, y=frame.y, width=frame.width, height=frame.height),
        viewbox=frame.as_viewbox(),
        border=path_to_d(border) if border is not None else None,
        regions=[
            RegionPathsModel(
                id=r.region_id,
                groups=catalog.groups_of(r.region_id),
                common=[path_to_d(p) for p in r.common],
                left=[path_to_d(p) for p in r.left],
                right=[path_to_d(p) for p in r.right],
            )
            for r in diagram.visible_regions()
        ],
    )
