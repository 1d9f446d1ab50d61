"""Per-region user data and fill resolution."""

from __future__ import annotations

import string
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from bodymap.models.regions import LateralSide, RegionCatalog

_HEX_DIGITS = frozenset(string.hexdigits)


class Color(BaseModel, frozen=True):
    """8-bit RGBA color."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    @model_validator(mode="before")
    @classmethod
    def _accept_hex(cls, data: object) -> object:
        if isinstance(data, str):
            return cls.from_hex(data).model_dump()
        return data

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """``rgb``, ``rrggbb`` or ``aarrggbb`` (alpha first), with or without '#'.

        Anything else is opaque black.
        """
        digits = text.strip(string.punctuation + string.whitespace)
        if not digits or any(ch not in _HEX_DIGITS for ch in digits):
            return cls()
        value = int(digits, 16)
        if len(digits) == 3:
            return cls(r=(value >> 8) * 17, g=(value >> 4 & 0xF) * 17, b=(value & 0xF) * 17)
        if len(digits) == 6:
            return cls(r=value >> 16, g=value >> 8 & 0xFF, b=value & 0xFF)
        if len(digits) == 8:
            return cls(a=value >> 24, r=value >> 16 & 0xFF, g=value >> 8 & 0xFF, b=value & 0xFF)
        return cls()

    @property
    def is_clear(self) -> bool:
        return self.a == 0

    def to_svg(self) -> str:
        if self.a == 255:
            return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.is_clear:
            return "none"
        return f"rgba({self.r},{self.g},{self.b},{self.a / 255:.3g})"


CLEAR = Color(a=0)


class BodyPartStyle(BaseModel, frozen=True):
    fill: Color = Field(default_factory=lambda: Color.from_hex("#3f3f3f"))
    stroke: Color = CLEAR
    stroke_width: float = 0.0


class BodyPartData(BaseModel):
    """User data attached to one region (``slug``) or a whole group."""

    slug: str | None = None
    group: str | None = None
    style: BodyPartStyle | None = None
    color: Color | None = None
    intensity: int | None = None
    side: LateralSide | None = None
    override: bool = False

    @model_validator(mode="after")
    def _one_target(self) -> BodyPartData:
        if (self.slug is None) == (self.group is None):
            raise ValueError("exactly one of slug or group must be set")
        return self

    @property
    def id(self) -> str:
        return (self.slug or self.group or "") + (self.side.value if self.side else "")

    def matches(self, region_id: str, side: LateralSide | None = None, catalog: RegionCatalog | None = None) -> bool:
        if self.side is not None and self.side != side:
            return False
        if self.slug is not None:
            return self.slug == region_id
        if self.group is not None and catalog is not None:
            return region_id in catalog.group_members(self.group)
        return False


def find_user_data(
    data: Sequence[BodyPartData],
    region_id: str,
    side: LateralSide | None = None,
    catalog: RegionCatalog | None = None,
) -> BodyPartData | None:
    return next((d for d in data if d.matches(region_id, side, catalog)), None)


class FillContext(BaseModel):
    """Everything fill resolution needs besides the user data."""

    palette: list[Color]
    default_fill: Color
    disabled_fill: Color
    disabled: bool = False


FillRule = Callable[[Optional[BodyPartData], FillContext], Optional[Color]]


def _disabled_rule(data: BodyPartData | None, ctx: FillContext) -> Color | None:
    if ctx.disabled and (data is None or not data.override):
        return ctx.disabled_fill
    return None


def _style_rule(data: BodyPartData | None, ctx: FillContext) -> Color | None:
    return data.style.fill if data is not None and data.style is not None else None


def _color_rule(data: BodyPartData | None, ctx: FillContext) -> Color | None:
    return data.color if data is not None else None


def _intensity_rule(data: BodyPartData | None, ctx: FillContext) -> Color | None:
    if data is None or data.intensity is None:
        return None
    if 0 < data.intensity <= len(ctx.palette):
        return ctx.palette[data.intensity - 1]
    return None


# Evaluated in order; first non-None wins, default fill otherwise.
FILL_RULES: tuple[FillRule, ...] = (_disabled_rule, _style_rule, _color_rule, _intensity_rule)


def resolve_fill(data: BodyPartData | None, ctx: FillContext) -> Color:
    for rule in FILL_RULES:
        color = rule(data, ctx)
        if color is not None:
            return color
    return ctx.default_fill


def resolve_style(data: BodyPartData | None, ctx: FillContext) -> BodyPartStyle:
    """User style when given, else a plain style carrying the resolved fill.

    A disabled region without override keeps the disabled fill even when the
    user supplied a style. This is deliberate: disabled outranks the style fill.
    """
    fill = resolve_fill(data, ctx)
    if data is not None and data.style is not None:
        return data.style.model_copy(update={"fill": fill})
    return BodyPartStyle(fill=fill)
