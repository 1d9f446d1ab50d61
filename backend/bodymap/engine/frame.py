"""View frames — normalized, padded, aspect-consistent bounds for a set of paths.

Artwork for different subjects and orientations has different natural extents.
Each frame is stretched to the fixed 700:1500 reference aspect around the
content center, so on-screen scale stays consistent across variants.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, Sequence

from bodymap.svg.primitives import ORIGIN, Path, Point, union_bounding_box
from bodymap.svg.serializer import fmt

logger = logging.getLogger(__name__)

NORMALIZED_WIDTH = 700.0
NORMALIZED_HEIGHT = 1500.0
PADDING = 20.0


@dataclass(frozen=True)
class ViewFrame:
    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def as_viewbox(self) -> str:
        return " ".join(fmt(v) for v in (self.x, self.y, self.width, self.height))


EMPTY_FRAME = ViewFrame(ORIGIN.x, ORIGIN.y, 0.0, 0.0)


def compute_frame(paths: Iterable[Path]) -> ViewFrame:
    """Centered frame with the reference aspect, padded on every side.

    No points at all gives a zero-size frame at the origin.
    """
    raw = union_bounding_box(paths)
    if raw.is_empty:
        return EMPTY_FRAME

    ratio = max(raw.width / NORMALIZED_WIDTH, raw.height / NORMALIZED_HEIGHT)
    final_width = NORMALIZED_WIDTH * ratio + 2 * PADDING
    final_height = NORMALIZED_HEIGHT * ratio + 2 * PADDING

    center = raw.center
    return ViewFrame(
        x=center.x - final_width / 2,
        y=center.y - final_height / 2,
        width=final_width,
        height=final_height,
    )


class FrameCache:
    """Memoizes one ``ViewFrame`` per key for the lifetime of the cache.

    Reads are lock-free. The lock only guards insertion, and the first
    computed value for a key wins if two callers race on it.
    """

    def __init__(self, compute: Callable[[Iterable[Path]], ViewFrame] = compute_frame) -> None:
        self._compute = compute
        self._frames: dict[Hashable, ViewFrame] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, key: Hashable, paths: Sequence[Path] | Callable[[], Sequence[Path]]) -> ViewFrame:
        """Return the cached frame for ``key``, deriving it from ``paths`` on first access.

        ``paths`` may be a zero-argument callable so callers can skip
        collecting geometry on a cache hit.
        """
        frame = self._frames.get(key)
        if frame is not None:
            return frame

        source = paths() if callable(paths) else paths
        computed = self._compute(source)
        with self._lock:
            frame = self._frames.setdefault(key, computed)
        if frame is computed:
            logger.debug("Computed view frame for %s: %s", key, frame)
        return frame

    def get(self, key: Hashable) -> ViewFrame | None:
        return self._frames.get(key)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._frames

    def __len__(self) -> int:
        return len(self._frames)
