"""BodyDiagram — one selection of regions, ready to draw and hit-test.

Wires the region catalog, the view-frame cache, the view transform and the hit
tester together, and applies the hidden/disabled/user-data rules on top.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from bodymap.engine.frame import FrameCache, ViewFrame
from bodymap.engine.hit_test import Hit, locate_model_point
from bodymap.engine.transform import ViewTransform
from bodymap.models.regions import (
    BodySection,
    BodySide,
    Gender,
    LateralSide,
    RegionCatalog,
    RegionGeometry,
    selection_key,
)
from bodymap.models.styling import (
    CLEAR,
    BodyPartData,
    BodyPartStyle,
    Color,
    FillContext,
    find_user_data,
    resolve_style,
)
from bodymap.svg.primitives import Path, Point
from bodymap.svg.serializer import fmt, path_to_d, serialize_svg
from bodymap.utils.geometry import DEFAULT_CURVE_SAMPLES

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = (Color.from_hex("#0984e3"), Color.from_hex("#74b9ff"))
DEFAULT_FILL = Color.from_hex("#3f3f3f")
DISABLED_FILL = Color.from_hex("#ebebe4")
BORDER_COLOR = Color.from_hex("#dfdfdf")
DISABLED_GROUP = "skeletal_etc"

# Border stroke width in view pixels, independent of zoom.
_BORDER_WIDTH_PX = 2.0


class BodyDiagram:
    """Drawing and hit-testing for one gender/side/section selection."""

    def __init__(
        self,
        catalog: RegionCatalog,
        frames: FrameCache,
        gender: Gender = Gender.WOMAN,
        side: BodySide = BodySide.ANTERIOR,
        section: BodySection = BodySection.FULL,
        data: Sequence[BodyPartData] = (),
        palette: Sequence[Color] = DEFAULT_PALETTE,
        scale: float = 1.0,
        border: Color | None = BORDER_COLOR,
        disabled: set[str] | frozenset[str] | None = None,
        disabled_fill: Color = DISABLED_FILL,
        hidden: set[str] | frozenset[str] = frozenset(),
        default_fill: Color = DEFAULT_FILL,
        default_stroke: Color = CLEAR,
        default_stroke_width: float = 0.0,
        curve_samples: int = DEFAULT_CURVE_SAMPLES,
    ) -> None:
        self.catalog = catalog
        self.frames = frames
        self.gender = gender
        self.side = side
        self.section = section
        self.data = list(data)
        self.palette = list(palette)
        self.scale = scale
        self.border = border
        self.disabled = frozenset(catalog.group_members(DISABLED_GROUP) if disabled is None else disabled)
        self.disabled_fill = disabled_fill
        self.hidden = frozenset(hidden)
        self.default_fill = default_fill
        self.default_stroke = default_stroke
        self.default_stroke_width = default_stroke_width
        self.curve_samples = curve_samples

    @property
    def key(self) -> str:
        return selection_key(self.gender, self.side, self.section)

    # ── Geometry ──

    def selected_regions(self) -> list[RegionGeometry]:
        """All regions of the selection in draw order, hidden ones included."""
        return self.catalog.regions_for(self.gender, self.side, self.section)

    def visible_regions(self) -> list[RegionGeometry]:
        return [r for r in self.selected_regions() if r.region_id not in self.hidden]

    def border_path(self) -> Path | None:
        return self.catalog.border(self.gender, self.side)

    def frame(self) -> ViewFrame:
        """Cached per selection key; derived from the full selection."""
        return self.frames.get_or_compute(
            self.key,
            lambda: [p for region in self.selected_regions() for p in region.all_paths()],
        )

    def transform(
        self,
        view_width: float,
        view_height: float,
        pan: tuple[float, float] = (0.0, 0.0),
        scale: float | None = None,
    ) -> ViewTransform:
        user_scale = self.scale if scale is None else scale
        return ViewTransform(view_width, view_height, self.frame(), user_scale, pan[0], pan[1])

    # ── Interaction ──

    def locate(
        self,
        view_point: Point | tuple[float, float],
        view_size: tuple[float, float],
        pan: tuple[float, float] = (0.0, 0.0),
        scale: float | None = None,
    ) -> Hit | None:
        """Region under a pointer position; disabled and hidden regions never match."""
        t = self.transform(view_size[0], view_size[1], pan, scale)
        model = t.inverse(Point(*view_point))
        candidates = [r for r in self.visible_regions() if r.region_id not in self.disabled]
        hit = locate_model_point(model, candidates, self.curve_samples)
        logger.debug("%s: view %s -> model %s -> %s", self.key, tuple(view_point), tuple(model), hit)
        return hit

    # ── Styling ──

    def user_data(self, region_id: str, side: LateralSide | None = None) -> BodyPartData | None:
        """Side-specific entry first, then the common one."""
        common = find_user_data(self.data, region_id, None, self.catalog)
        if side is None:
            return common
        return find_user_data(self.data, region_id, side, self.catalog) or common

    def style_for(self, region_id: str, side: LateralSide | None = None) -> BodyPartStyle:
        ctx = FillContext(
            palette=self.palette,
            default_fill=self.default_fill,
            disabled_fill=self.disabled_fill,
            disabled=region_id in self.disabled,
        )
        data = self.user_data(region_id, side)
        style = resolve_style(data, ctx)
        if data is None or data.style is None:
            style = style.model_copy(
                update={"stroke": self.default_stroke, "stroke_width": self.default_stroke_width}
            )
        return style

    # ── Rendering ──

    def render_elements(self, transform: ViewTransform) -> list[dict[str, Any]]:
        """SVG element tree in view space for ``serialize_svg``."""
        children: list[dict[str, Any]] = []
        s = transform.scale_factor

        border = self.border_path()
        if self.border is not None and not self.border.is_clear and border is not None and s > 0:
            children.append(
                {
                    "tag": "path",
                    "d": path_to_d(border),
                    "fill": "none",
                    "stroke": self.border.to_svg(),
                    "stroke-width": fmt(_BORDER_WIDTH_PX / s),
                    "class": "border",
                }
            )

        for region in self.visible_regions():
            for side, paths in region.groups():
                if not paths:
                    continue
                style = self.style_for(region.region_id, side)
                for path in paths:
                    children.append(
                        {
                            "tag": "path",
                            "d": path_to_d(path),
                            "fill": style.fill.to_svg(),
                            "stroke": style.stroke.to_svg() if style.stroke_width > 0 else None,
                            "stroke-width": fmt(style.stroke_width) if style.stroke_width > 0 else None,
                            "data-region": region.region_id,
                            "data-side": side.value if side else None,
                        }
                    )

        return [{"tag": "g", "transform": transform.svg_matrix(), "children": children}]

    def render(
        self,
        view_width: float,
        view_height: float,
        pan: tuple[float, float] = (0.0, 0.0),
        scale: float | None = None,
    ) -> str:
        t = self.transform(view_width, view_height, pan, scale)
        svg = serialize_svg(self.render_elements(t), view_width, view_height, title=self.key)
        logger.debug("Rendered %s at %sx%s (scale factor %.4f)", self.key, view_width, view_height, t.scale_factor)
        return svg
