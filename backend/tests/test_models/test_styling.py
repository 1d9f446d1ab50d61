"""Tests for colors, user data matching and fill resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bodymap.models.regions import LateralSide
from bodymap.models.styling import (
    CLEAR,
    BodyPartData,
    BodyPartStyle,
    Color,
    FillContext,
    find_user_data,
    resolve_fill,
    resolve_style,
)

PALETTE = [Color.from_hex("#0984e3"), Color.from_hex("#74b9ff")]
DEFAULT = Color.from_hex("#3f3f3f")
DISABLED = Color.from_hex("#ebebe4")


def _ctx(disabled: bool = False) -> FillContext:
    return FillContext(palette=PALETTE, default_fill=DEFAULT, disabled_fill=DISABLED, disabled=disabled)


@pytest.mark.parametrize(
    "text, rgba",
    [
        ("#ff8000", (255, 128, 0, 255)),
        ("ff8000", (255, 128, 0, 255)),
        ("#f80", (255, 136, 0, 255)),
        ("#80ff0000", (255, 0, 0, 128)),
        ("  #ABCDEF ", (171, 205, 239, 255)),
        ("#12345", (0, 0, 0, 255)),
        ("#zzzzzz", (0, 0, 0, 255)),
        ("", (0, 0, 0, 255)),
    ],
)
def test_from_hex(text, rgba):
    c = Color.from_hex(text)
    assert (c.r, c.g, c.b, c.a) == rgba


def test_color_accepts_hex_string_in_models():
    data = BodyPartData.model_validate({"slug": "belly", "color": "#00ff00"})
    assert data.color == Color(r=0, g=255, b=0)


def test_to_svg():
    assert Color.from_hex("#0984e3").to_svg() == "#0984e3"
    assert CLEAR.to_svg() == "none"
    assert CLEAR.is_clear
    assert Color(r=255, a=0x80).to_svg() == "rgba(255,0,0,0.502)"
    assert Color.from_hex("#00ff0000").to_svg() == "none"


def test_slug_or_group_required():
    with pytest.raises(ValidationError):
        BodyPartData()
    with pytest.raises(ValidationError):
        BodyPartData(slug="a", group="b")


def test_id_includes_side():
    assert BodyPartData(slug="biceps").id == "biceps"
    assert BodyPartData(slug="biceps", side=LateralSide.LEFT).id == "bicepsleft"


def test_matches_side(small_catalog):
    left = BodyPartData(slug="chest", side=LateralSide.LEFT)
    assert left.matches("chest", LateralSide.LEFT)
    assert not left.matches("chest", LateralSide.RIGHT)
    assert not left.matches("chest", None)
    assert BodyPartData(slug="chest").matches("chest", None)


def test_matches_group_needs_catalog(small_catalog):
    torso = BodyPartData(group="torso")
    assert torso.matches("belly", None, small_catalog)
    assert not torso.matches("legs", None, small_catalog)
    assert not torso.matches("belly")


def test_find_user_data_first_match_wins(small_catalog):
    first = BodyPartData(group="torso", intensity=1)
    second = BodyPartData(slug="belly", intensity=2)
    assert find_user_data([first, second], "belly", None, small_catalog) is first
    assert find_user_data([first, second], "legs", None, small_catalog) is None


def test_fill_priority():
    red = Color.from_hex("#ff0000")
    styled = BodyPartData(slug="x", style=BodyPartStyle(fill=red), color=Color.from_hex("#00ff00"), intensity=1)
    assert resolve_fill(styled, _ctx()) == red
    assert resolve_fill(BodyPartData(slug="x", color=red, intensity=1), _ctx()) == red
    assert resolve_fill(BodyPartData(slug="x", intensity=2), _ctx()) == PALETTE[1]
    assert resolve_fill(None, _ctx()) == DEFAULT


@pytest.mark.parametrize("intensity", [0, 3, -1])
def test_out_of_range_intensity_falls_back(intensity):
    assert resolve_fill(BodyPartData(slug="x", intensity=intensity), _ctx()) == DEFAULT


def test_disabled_fill_and_override():
    red = Color.from_hex("#ff0000")
    assert resolve_fill(None, _ctx(disabled=True)) == DISABLED
    assert resolve_fill(BodyPartData(slug="x", color=red), _ctx(disabled=True)) == DISABLED
    assert resolve_fill(BodyPartData(slug="x", color=red, override=True), _ctx(disabled=True)) == red


def test_resolve_style_keeps_user_stroke():
    style = BodyPartStyle(fill=DEFAULT, stroke=Color.from_hex("#000"), stroke_width=2)
    resolved = resolve_style(BodyPartData(slug="x", style=style), _ctx(disabled=True))
    assert resolved.fill == DISABLED
    assert resolved.stroke_width == 2
    assert resolve_style(None, _ctx()) == BodyPartStyle(fill=DEFAULT)
