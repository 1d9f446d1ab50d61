"""bodymap geometry engine: view frames, transforms, hit-testing, diagrams."""

from bodymap.engine.diagram import BodyDiagram
from bodymap.engine.frame import FrameCache, ViewFrame, compute_frame
from bodymap.engine.hit_test import Hit, locate, path_contains
from bodymap.engine.transform import ViewTransform

__all__ = [
    "BodyDiagram",
    "FrameCache",
    "ViewFrame",
    "compute_frame",
    "Hit",
    "locate",
    "path_contains",
    "ViewTransform",
]
