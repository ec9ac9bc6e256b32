"""
Unit tests for main.py (FastAPI host) via fastapi.testclient.
"""

import json

import pytest
from fastapi.testclient import TestClient

from conftest import make_phase, make_scene
from main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_health_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
        assert resp.json()["compositions"] == ["SqlexDemo"]


class TestCompositions:

    def test_list(self, client):
        data = client.get("/compositions").json()
        assert data["total"] == 1
        assert data["compositions"][0]["id"] == "SqlexDemo"

    def test_get_one(self, client):
        assert client.get("/compositions/SqlexDemo").json()["fps"] == 30

    def test_unknown_is_404(self, client):
        assert client.get("/compositions/Nope").status_code == 404


class TestFrames:

    def test_frame_json(self, client):
        data = client.get("/compositions/SqlexDemo/frames/0").json()
        assert data["frame"] == 0
        assert data["lines"][0]["kind"] == "command"

    def test_frame_text(self, client):
        resp = client.get("/compositions/SqlexDemo/frames/0/text")
        assert resp.status_code == 200
        assert resp.text == "$ █"

    def test_frame_past_duration_is_400(self, client):
        assert client.get("/compositions/SqlexDemo/frames/300").status_code == 400

    def test_negative_frame_is_400(self, client):
        assert client.get("/compositions/SqlexDemo/frames/-1").status_code == 400

    def test_unknown_composition_frame_is_404(self, client):
        assert client.get("/compositions/Nope/frames/0").status_code == 404

    def test_same_frame_same_body(self, client):
        a = client.get("/compositions/SqlexDemo/frames/123").content
        b = client.get("/compositions/SqlexDemo/frames/123").content
        assert a == b


class TestRenderLiteral:

    def test_renders_scene_literal(self, client):
        body = {"scene": make_scene(make_phase(output_start_frame=40)), "frame": 45}
        data = client.post("/render", json=body).json()
        assert [l["kind"] for l in data["lines"]] == ["command", "output", "output"]

    def test_offset_and_fade_override(self, client):
        body = {
            "scene": make_scene(make_phase(output_start_frame=40, delays=(0,))),
            "frame": 55,
            "offset": 10,
            "fade_duration_frames": 10,
        }
        data = client.post("/render", json=body).json()
        assert data["lines"][1]["opacity"] == pytest.approx(0.5)

    def test_invalid_scene_is_422_with_errors(self, client):
        body = {"scene": make_scene(make_phase(typing_speed=0)), "frame": 0}
        resp = client.post("/render", json=body)
        assert resp.status_code == 422
        assert any("typing_speed" in e for e in resp.json()["detail"])

    def test_infinite_speed_literal_is_422(self, client):
        body = json.dumps({"scene": make_scene(make_phase(typing_speed=float("inf"))), "frame": 5})
        resp = client.post("/render", content=body, headers={"Content-Type": "application/json"})
        assert resp.status_code == 422
        assert any("typing_speed" in e for e in resp.json()["detail"])

    def test_negative_frame_renders_empty(self, client):
        body = {"scene": make_scene(make_phase()), "frame": -3}
        assert client.post("/render", json=body).json() == {"frame": -3, "lines": []}
