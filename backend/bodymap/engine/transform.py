"""Model ↔ view coordinate mapping shared by drawing and hit-testing.

    view  = (model - frame.origin) * s + centering + pan
    model = (view - centering - pan) / s + frame.origin

where ``s = min(view_w / frame_w, view_h / frame_h) * user_scale``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from bodymap.engine.frame import ViewFrame
from bodymap.svg.primitives import Point
from bodymap.svg.serializer import fmt


@dataclass(frozen=True)
class ViewTransform:
    view_width: float
    view_height: float
    frame: ViewFrame
    user_scale: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0

    @cached_property
    def scale_factor(self) -> float:
        """Fit-to-view scale times the user's zoom. 0 when view or frame has no area."""
        if self.frame.is_degenerate or self.view_width <= 0 or self.view_height <= 0:
            return 0.0
        fit = min(self.view_width / self.frame.width, self.view_height / self.frame.height)
        return fit * self.user_scale

    @cached_property
    def centering_offset(self) -> Point:
        s = self.scale_factor
        return Point(
            (self.view_width - self.frame.width * s) / 2,
            (self.view_height - self.frame.height * s) / 2,
        )

    @property
    def translation(self) -> Point:
        """Centering plus pan: where the frame origin lands in view space."""
        c = self.centering_offset
        return Point(c.x + self.pan_x, c.y + self.pan_y)

    def forward(self, model: Point) -> Point:
        s = self.scale_factor
        t = self.translation
        return Point(
            (model.x - self.frame.x) * s + t.x,
            (model.y - self.frame.y) * s + t.y,
        )

    def inverse(self, view: Point) -> Point:
        """Exact inverse of ``forward``; a zero scale maps everything to the frame origin."""
        s = self.scale_factor
        if s == 0:
            return self.frame.origin
        t = self.translation
        return Point(
            (view.x - t.x) / s + self.frame.x,
            (view.y - t.y) / s + self.frame.y,
        )

    def svg_matrix(self) -> str:
        """SVG ``transform`` attribute equivalent of ``forward``."""
        s = self.scale_factor
        t = self.translation
        tx = t.x - self.frame.x * s
        ty = t.y - self.frame.y * s
        return f"matrix({fmt(s)} 0 0 {fmt(s)} {fmt(tx)} {fmt(ty)})"
