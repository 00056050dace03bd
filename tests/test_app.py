"""HTTP preview API."""

import io

import pytest
from PIL import Image

from topo_heatmap.app import app

SQUARE = [[0, 0, 0], [4, 0, 4], [0, 4, 4], [4, 4, 8], [2, 2, 4]]


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


class TestApp:

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.get_json()["ok"] is True
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_heatmap_png(self, client):
        resp = client.post("/heatmap", json={"points": SQUARE, "interval": 1.0})
        assert resp.status_code == 200
        assert resp.headers["Content-Type"] == "image/png"
        im = Image.open(io.BytesIO(resp.data))
        assert im.size == (4, 4)
        assert float(resp.headers["X-Z-Max"]) <= 8.0

    def test_samples_csv(self, client):
        resp = client.post("/samples", json={"points": SQUARE, "interval": 1.0})
        assert resp.status_code == 200
        assert resp.headers["Content-Type"].startswith("text/csv")
        assert "1.000,2.000,3.000" in resp.get_data(as_text=True).splitlines()

    def test_too_few_points(self, client):
        resp = client.post("/heatmap", json={"points": SQUARE[:2]})
        assert resp.status_code == 400

    def test_malformed_points(self, client):
        resp = client.post("/heatmap", json={"points": [["a", 0, 0]] * 3})
        assert resp.status_code == 400

    def test_invalid_interval(self, client):
        resp = client.post("/heatmap", json={"points": SQUARE, "interval": 0})
        assert resp.status_code == 400
        assert "positive" in resp.get_json()["error"]

    def test_oversized_grid(self, client):
        pts = [[0, 0, 0], [10000, 0, 1], [0, 10000, 1]]
        resp = client.post("/heatmap", json={"points": pts, "interval": 1.0})
        assert resp.status_code == 413
        assert resp.get_json()["width"] == 10000

    def test_missing_body(self, client):
        resp = client.post("/heatmap", data="not json")
        assert resp.status_code == 400

    def test_body_must_be_object(self, client):
        resp = client.post("/heatmap", json=[1, 2, 3])
        assert resp.status_code == 400
        assert "JSON object" in resp.get_json()["error"]

    @pytest.mark.parametrize("points", [5, "abc", {"x": 1, "y": 2, "z": 3}])
    def test_points_must_be_a_list(self, client, points):
        resp = client.post("/samples", json={"points": points})
        assert resp.status_code == 400
