"""Tests for pointer-to-region resolution."""

from __future__ import annotations

from bodymap.engine.frame import compute_frame
from bodymap.engine.hit_test import Hit, locate, locate_model_point, path_contains
from bodymap.engine.transform import ViewTransform
from bodymap.models.regions import BodySection, BodySide, Gender, LateralSide, RegionGeometry
from bodymap.svg.parser import parse_path_data
from bodymap.svg.primitives import Point
from tests.conftest import DONUT_D, DOUBLE_WOUND_D, SQUARE_D


def _full(catalog):
    return catalog.regions_for(Gender.MAN, BodySide.ANTERIOR, BodySection.FULL)


def test_path_contains_square():
    square = parse_path_data(SQUARE_D)
    assert path_contains(square, Point(5, 5))
    assert not path_contains(square, Point(50, 5))


def test_path_contains_curve():
    blob = parse_path_data("M 0 0 C 0 40 40 40 40 0 Z")
    assert path_contains(blob, Point(20, 20))
    # Inside the control polygon but outside the curve
    assert not path_contains(blob, Point(2, 28))


def test_nonzero_rule():
    assert not path_contains(parse_path_data(DONUT_D), Point(15, 15))
    assert path_contains(parse_path_data(DONUT_D), Point(5, 15))
    assert path_contains(parse_path_data(DOUBLE_WOUND_D), Point(15, 15))


def test_first_region_in_order_wins(small_catalog):
    regions = _full(small_catalog)
    # chest-left and belly overlap at (80, 120); chest comes first
    assert locate_model_point(Point(80, 120), regions) == Hit("chest", LateralSide.LEFT)
    assert locate_model_point(Point(80, 120), list(reversed(regions))) == Hit("belly", None)


def test_region_sides(small_catalog):
    regions = _full(small_catalog)
    assert locate_model_point(Point(130, 120), regions) == Hit("chest", LateralSide.RIGHT)
    assert locate_model_point(Point(100, 180), regions) == Hit("belly", None)
    assert locate_model_point(Point(100, 20), regions) == Hit("head", None)
    assert locate_model_point(Point(70, 300), regions) == Hit("legs", LateralSide.LEFT)


def test_miss_returns_none(small_catalog):
    regions = _full(small_catalog)
    assert locate_model_point(Point(100, 210), regions) is None
    assert locate_model_point(Point(100, 300), regions) is None
    assert locate_model_point(Point(-50, -50), regions) is None


def test_common_before_left_before_right():
    region = RegionGeometry.from_strings("all", common=[SQUARE_D], left=[SQUARE_D], right=[SQUARE_D])
    assert locate_model_point(Point(5, 5), [region]) == Hit("all", None)

    sided = RegionGeometry.from_strings("pair", left=[SQUARE_D], right=[SQUARE_D])
    assert locate_model_point(Point(5, 5), [sided]) == Hit("pair", LateralSide.LEFT)


def test_locate_from_view_space(small_catalog):
    regions = _full(small_catalog)
    frame = compute_frame(p for r in regions for p in r.all_paths())
    t = ViewTransform(390, 844, frame, 1.5, 20, -30)
    view = t.forward(Point(130, 120))
    assert locate(view, (390, 844), frame, regions, 1.5, (20, -30)) == Hit("chest", LateralSide.RIGHT)
    assert locate(t.forward(Point(100, 210)), (390, 844), frame, regions, 1.5, (20, -30)) is None


def test_locate_in_degenerate_view_hits_frame_origin():
    region = RegionGeometry.from_strings("corner", common=["M -5 -5 H 5 V 5 H -5 Z"])
    frame = compute_frame([])
    assert locate(Point(100, 100), (0, 0), frame, [region]) == Hit("corner", None)
