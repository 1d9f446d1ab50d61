"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from typing_extensions import assert_never

from bodymap.svg.primitives import ClosePath, CubicCurveTo, LineTo, MoveTo, Path, QuadCurveTo

# Points emitted per cubic/quadratic when flattening, endpoint included.
DEFAULT_CURVE_SAMPLES = 16


def _cubic_points(p0, p1, p2, p3, samples: int) -> NDArray[np.float64]:
    t = np.linspace(0.0, 1.0, samples + 1)[1:, None]
    mt = 1.0 - t
    return (
        mt**3 * np.asarray(p0)
        + 3 * mt**2 * t * np.asarray(p1)
        + 3 * mt * t**2 * np.asarray(p2)
        + t**3 * np.asarray(p3)
    )


def _quad_points(p0, p1, p2, samples: int) -> NDArray[np.float64]:
    t = np.linspace(0.0, 1.0, samples + 1)[1:, None]
    mt = 1.0 - t
    return mt**2 * np.asarray(p0) + 2 * mt * t * np.asarray(p1) + t**2 * np.asarray(p2)


def flatten_path(path: Path, samples: int = DEFAULT_CURVE_SAMPLES) -> list[NDArray[np.float64]]:
    """Flatten a path into closed Nx2 rings, one per subpath.

    Open subpaths are closed implicitly, as a fill would close them. Drawing
    commands before any move start at the origin.
    """
    rings: list[NDArray[np.float64]] = []
    current: list[NDArray[np.float64]] = []
    pen = np.zeros(2)
    start = np.zeros(2)

    def finish() -> None:
        if len(current) >= 2:
            ring = np.vstack(current)
            if not np.array_equal(ring[0], ring[-1]):
                ring = np.vstack([ring, ring[:1]])
            rings.append(ring)
        current.clear()

    for seg in path.segments:
        if isinstance(seg, MoveTo):
            finish()
            pen = start = np.asarray(seg.point, dtype=np.float64)
            current.append(pen[None, :])
        elif isinstance(seg, LineTo):
            if not current:
                current.append(pen[None, :])
            pen = np.asarray(seg.point, dtype=np.float64)
            current.append(pen[None, :])
        elif isinstance(seg, CubicCurveTo):
            if not current:
                current.append(pen[None, :])
            current.append(_cubic_points(pen, seg.control1, seg.control2, seg.end, samples))
            pen = np.asarray(seg.end, dtype=np.float64)
        elif isinstance(seg, QuadCurveTo):
            if not current:
                current.append(pen[None, :])
            current.append(_quad_points(pen, seg.control, seg.end, samples))
            pen = np.asarray(seg.end, dtype=np.float64)
        elif isinstance(seg, ClosePath):
            finish()
            # A drawing command after close continues from the subpath start.
            pen = start
        else:
            assert_never(seg)

    finish()
    return rings


def winding_number(point: tuple[float, float], ring: NDArray[np.float64]) -> int:
    """Winding number of point w.r.t. a closed ring (first point repeated last).

    Upward edge crossings with the point on their left count +1, downward
    crossings with the point on their right count -1.
    """
    px, py = point
    x0 = ring[:-1, 0]
    y0 = ring[:-1, 1]
    x1 = ring[1:, 0]
    y1 = ring[1:, 1]

    cross = (x1 - x0) * (py - y0) - (px - x0) * (y1 - y0)
    upward = (y0 <= py) & (y1 > py) & (cross > 0)
    downward = (y0 > py) & (y1 <= py) & (cross < 0)
    return int(np.count_nonzero(upward)) - int(np.count_nonzero(downward))


def path_winding_number(
    point: tuple[float, float], path: Path, samples: int = DEFAULT_CURVE_SAMPLES
) -> int:
    """Sum of winding numbers over every subpath of ``path``."""
    return sum(winding_number(point, ring) for ring in flatten_path(path, samples))
