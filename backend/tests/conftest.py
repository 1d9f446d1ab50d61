"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bodymap.engine.frame import FrameCache
from bodymap.models.regions import RegionCatalog


# Sample path data

SQUARE_D = "M 0 0 L 10 0 L 10 10 L 0 10 Z"

LINES_D = "M 0 0 L 10 10 20 20"

CUBIC_THEN_SMOOTH_D = "M 0 0 C 10 0 20 10 30 10 S 50 20 60 0"

QUAD_THEN_SMOOTH_D = "M 0 0 Q 10 20 20 0 T 40 0"

RELATIVE_D = "m 10 10 l 5 0 h 5 v 5 c 0 5 -5 5 -5 5 z"

# Outer ring CCW, inner ring CW: non-zero leaves the center empty
DONUT_D = "M 0 0 L 30 0 L 30 30 L 0 30 Z M 10 10 L 10 20 L 20 20 L 20 10 Z"

# Both rings CCW: non-zero fills the center, even-odd would not
DOUBLE_WOUND_D = "M 0 0 L 30 0 L 30 30 L 0 30 Z M 10 10 L 20 10 L 20 20 L 10 20 Z"


# Minimal catalog: two overlapping regions and a disabled one

SMALL_CATALOG = {
    "sections": {
        "anterior": {"upper": ["chest", "head"], "lower": ["legs"]},
    },
    "groups": {
        "skeletal_etc": ["head"],
        "torso": ["chest", "belly"],
    },
    "bodies": {
        "man-anterior": {
            "border": "M 0 0 H 200 V 400 H 0 Z",
            "regions": {
                "head": {"common": ["M 80 0 H 120 V 40 H 80 Z"]},
                "chest": {
                    "left": ["M 40 50 H 100 V 150 H 40 Z"],
                    "right": ["M 100 50 H 160 V 150 H 100 Z"],
                },
                "belly": {"common": ["M 60 100 H 140 V 200 H 60 Z"]},
                "legs": {
                    "left": ["M 50 220 H 95 V 400 H 50 Z"],
                    "right": ["M 105 220 H 150 V 400 H 105 Z"],
                },
            },
        },
    },
}


@pytest.fixture
def small_catalog() -> RegionCatalog:
    return RegionCatalog.from_dict(SMALL_CATALOG)


@pytest.fixture
def frame_cache() -> FrameCache:
    return FrameCache()
