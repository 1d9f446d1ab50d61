"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bodymap.models.regions import LateralSide


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    regions_loaded: int = 0


class FrameModel(BaseModel):
    x: float
    y: float
    width: float
    height: float


class RegionPathsModel(BaseModel):
    id: str
    groups: list[str] = Field(default_factory=list)
    common: list[str] = Field(default_factory=list)
    left: list[str] = Field(default_factory=list)
    right: list[str] = Field(default_factory=list)


class RegionsResponse(BaseModel):
    key: str
    frame: FrameModel
    viewbox: str
    border: str | None = None
    regions: list[RegionPathsModel] = Field(default_factory=list)


class LocateResponse(BaseModel):
    region: str | None = None
    side: LateralSide | None = None
    svg_x: float
    svg_y: float
