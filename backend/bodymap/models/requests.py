"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bodymap.models.regions import BodySection, BodySide, Gender
from bodymap.models.styling import BodyPartData, Color


class SelectionRequest(BaseModel):
    gender: Gender = Field(default=Gender.WOMAN, description="Artwork variant")
    side: BodySide = Field(default=BodySide.ANTERIOR, description="Front or back view")
    section: BodySection = Field(default=BodySection.FULL, description="Upper, lower or full body")
    hidden: list[str] = Field(default_factory=list, description="Region IDs left out entirely")
    disabled: list[str] | None = Field(
        default=None,
        description="Region IDs drawn greyed out and never tappable (default: skeletal group)",
    )


class ViewRequest(SelectionRequest):
    width: float = Field(..., ge=0, description="View width in pixels")
    height: float = Field(..., ge=0, description="View height in pixels")
    scale: float = Field(default=1.0, ge=0, description="User zoom factor")
    pan_x: float = Field(default=0.0, description="Horizontal pan offset in pixels")
    pan_y: float = Field(default=0.0, description="Vertical pan offset in pixels")


class LocateRequest(ViewRequest):
    x: float = Field(..., description="Pointer x in view pixels")
    y: float = Field(..., description="Pointer y in view pixels")


class RenderRequest(ViewRequest):
    data: list[BodyPartData] = Field(default_factory=list, description="Per-region user data")
    colors: list[Color] | None = Field(default=None, description="Intensity palette")
    border: Color | None = Field(default=None, description="Outline color (default from settings)")
    show_border: bool = Field(default=True, description="Draw the body outline")
