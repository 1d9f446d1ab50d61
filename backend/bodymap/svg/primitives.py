"""Path primitives — points, segment variants, immutable paths and their bounds.

Segments are a closed set of frozen dataclasses. Every consumer matches on the
full set and ends in ``assert_never`` so a new variant cannot fall through.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, NamedTuple, Union

from typing_extensions import assert_never


class Point(NamedTuple):
    x: float
    y: float


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class QuadCurveTo:
    control: Point
    end: Point


@dataclass(frozen=True)
class ClosePath:
    pass


Segment = Union[MoveTo, LineTo, CubicCurveTo, QuadCurveTo, ClosePath]


def segment_points(seg: Segment) -> tuple[Point, ...]:
    """Every point a segment carries, control points included."""
    if isinstance(seg, MoveTo):
        return (seg.point,)
    elif isinstance(seg, LineTo):
        return (seg.point,)
    elif isinstance(seg, CubicCurveTo):
        return (seg.control1, seg.control2, seg.end)
    elif isinstance(seg, QuadCurveTo):
        return (seg.control, seg.end)
    elif isinstance(seg, ClosePath):
        return ()
    else:
        assert_never(seg)


@dataclass(frozen=True)
class BoundingBox:
    """(min_x, min_y, max_x, max_y). ``EMPTY`` stands for "no points at all"."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    @property
    def center(self) -> Point:
        if self.is_empty:
            return ORIGIN
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def contains(self, point: Point) -> bool:
        if self.is_empty:
            return False
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def encloses(self, other: BoundingBox) -> bool:
        """True when ``other`` lies within this box on all four bounds."""
        if other.is_empty:
            return True
        if self.is_empty:
            return False
        return (
            self.min_x <= other.min_x
            and self.min_y <= other.min_y
            and self.max_x >= other.max_x
            and self.max_y >= other.max_y
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        if self.is_empty:
            return other
        if other.is_empty:
            return self
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


EMPTY_BOX = BoundingBox(math.inf, math.inf, -math.inf, -math.inf)


@dataclass(frozen=True)
class Path:
    """Ordered, immutable segment sequence. Equality is exact and element-wise."""

    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @cached_property
    def bounding_box(self) -> BoundingBox:
        """Control-polygon bound: every endpoint and control point, folded min/max."""
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for seg in self.segments:
            for p in segment_points(seg):
                min_x = min(min_x, p.x)
                min_y = min(min_y, p.y)
                max_x = max(max_x, p.x)
                max_y = max(max_y, p.y)
        if min_x > max_x:
            return EMPTY_BOX
        return BoundingBox(min_x, min_y, max_x, max_y)


def bounding_box(path: Path) -> BoundingBox:
    return path.bounding_box


def union_bounding_box(paths: Iterable[Path]) -> BoundingBox:
    """Fold per-path boxes. No paths (or only empty ones) gives the empty box."""
    box = EMPTY_BOX
    for path in paths:
        box = box.union(path.bounding_box)
    return box
