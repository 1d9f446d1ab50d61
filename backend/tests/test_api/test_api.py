"""Tests for API endpoints."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from bodymap.config import Settings
from bodymap.engine.frame import ViewFrame
from bodymap.engine.transform import ViewTransform
from bodymap.main import app, create_app
from bodymap.svg.primitives import Point
from tests.conftest import SMALL_CATALOG


client = TestClient(app)

VIEW = {"width": 300, "height": 600}
MAN_FRONT = {"gender": "man", "side": "anterior", "section": "full"}


@pytest.fixture
def small_client(tmp_path) -> TestClient:
    path = tmp_path / "regions.json"
    path.write_text(json.dumps(SMALL_CATALOG), encoding="utf-8")
    return TestClient(create_app(Settings(catalog_path=path)))


def _view_point(small_client: TestClient, model: Point, scale: float = 1.0, pan=(0.0, 0.0)) -> Point:
    frame = small_client.get("/api/regions/man/anterior/full").json()["frame"]
    t = ViewTransform(VIEW["width"], VIEW["height"], ViewFrame(**frame), scale, *pan)
    return t.forward(model)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["regions_loaded"] > 0


def test_bundled_regions():
    response = client.get("/api/regions/woman/posterior/upper")
    assert response.status_code == 200
    data = response.json()
    assert data["key"] == "woman-posterior-upper"
    assert data["regions"]
    assert data["frame"]["width"] > 0


def test_regions_small_catalog(small_client):
    data = small_client.get("/api/regions/man/anterior/upper").json()
    assert [r["id"] for r in data["regions"]] == ["chest", "head"]
    chest = data["regions"][0]
    assert chest["common"] == []
    assert chest["left"] == ["M 40 50 L 100 50 L 100 150 L 40 150 Z"]
    assert data["border"] == "M 0 0 L 200 0 L 200 400 L 0 400 Z"
    assert chest["groups"] == ["torso"]
    assert data["regions"][1]["groups"] == ["skeletal_etc"]
    frame = data["frame"]
    assert [float(v) for v in data["viewbox"].split()] == pytest.approx(
        [frame["x"], frame["y"], frame["width"], frame["height"]]
    )


def test_regions_unknown_body_404(small_client):
    response = small_client.get("/api/regions/woman/anterior/full")
    assert response.status_code == 404


def test_regions_bad_enum_422():
    assert client.get("/api/regions/alien/anterior/full").status_code == 422


def test_locate_hit(small_client):
    p = _view_point(small_client, Point(130, 120))
    response = small_client.post("/api/locate", json={**MAN_FRONT, **VIEW, "x": p.x, "y": p.y})
    assert response.status_code == 200
    data = response.json()
    assert data["region"] == "chest"
    assert data["side"] == "right"
    assert data["svg_x"] == pytest.approx(130)
    assert data["svg_y"] == pytest.approx(120)


def test_locate_with_zoom_and_pan(small_client):
    p = _view_point(small_client, Point(100, 180), scale=2.0, pan=(15.0, -40.0))
    body = {**MAN_FRONT, **VIEW, "x": p.x, "y": p.y, "scale": 2.0, "pan_x": 15.0, "pan_y": -40.0}
    assert small_client.post("/api/locate", json=body).json()["region"] == "belly"


def test_locate_miss(small_client):
    p = _view_point(small_client, Point(100, 210))
    data = small_client.post("/api/locate", json={**MAN_FRONT, **VIEW, "x": p.x, "y": p.y}).json()
    assert data["region"] is None
    assert data["side"] is None


def test_locate_disabled_and_hidden(small_client):
    head = _view_point(small_client, Point(100, 20))
    body = {**MAN_FRONT, **VIEW, "x": head.x, "y": head.y}
    assert small_client.post("/api/locate", json=body).json()["region"] is None
    assert small_client.post("/api/locate", json={**body, "disabled": []}).json()["region"] == "head"

    overlap = _view_point(small_client, Point(80, 120))
    body = {**MAN_FRONT, **VIEW, "x": overlap.x, "y": overlap.y, "hidden": ["chest"]}
    assert small_client.post("/api/locate", json=body).json()["region"] == "belly"


def test_locate_validation(small_client):
    response = small_client.post("/api/locate", json={**MAN_FRONT, "width": -1, "height": 600, "x": 0, "y": 0})
    assert response.status_code == 422


def test_render_svg(small_client):
    body = {**MAN_FRONT, **VIEW, "data": [{"slug": "belly", "color": "#ff0000"}]}
    response = small_client.post("/api/render", json=body)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    svg = response.text
    assert 'data-region="belly"' in svg
    assert 'fill="#ff0000"' in svg
    assert 'class="border"' in svg


def test_render_options(small_client):
    body = {**MAN_FRONT, **VIEW, "show_border": False, "hidden": ["legs"]}
    svg = small_client.post("/api/render", json=body).text
    assert 'class="border"' not in svg
    assert 'data-region="legs"' not in svg


def test_render_unknown_body_404(small_client):
    body = {**MAN_FRONT, **VIEW, "gender": "woman"}
    assert small_client.post("/api/render", json=body).status_code == 404


def test_render_rejects_bad_user_data(small_client):
    body = {**MAN_FRONT, **VIEW, "data": [{"color": "#ff0000"}]}
    assert small_client.post("/api/render", json=body).status_code == 422
