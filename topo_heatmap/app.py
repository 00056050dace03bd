# app.py — Flask API for heatmap previews of posted point clouds
# deps: pip install flask numpy pillow matplotlib

from __future__ import annotations
import io
import logging
from typing import Any, Dict, Tuple

from flask import Flask, request, jsonify, make_response

from .config import DEFAULT_INTERVAL, MAX_GRID_DIM
from .errors import EmptyGridError, GridTooLargeError, InvalidIntervalError, SurfaceLoadError
from .export import heatmap_image, samples_to_csv
from .heatmap import HeatmapResult, build_heatmap
from .surfaces import TinSurface

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "heatmap": "/heatmap (POST JSON)", "samples": "/samples (POST JSON)",
            "max_dim": MAX_GRID_DIM}

# ======= shared request handling =======
def _run(data: Dict[str, Any]) -> Tuple[HeatmapResult | None, Any]:
    """
    JSON body:
    {
      "points": [[x, y, z], ...],   // >= 3, not all collinear
      "interval": 1.0,
      "max_dim": 5000
    }
    Returns (result, None) or (None, error response).
    """
    if not isinstance(data, dict):
        return None, (jsonify({"error": "body must be a JSON object"}), 400)
    pts = data.get("points") or []
    if not isinstance(pts, list) or len(pts) < 3:
        return None, (jsonify({"error": "points must have at least 3 [x,y,z] rows"}), 400)
    try:
        interval = float(data.get("interval", DEFAULT_INTERVAL))
        max_dim = int(data.get("max_dim", MAX_GRID_DIM))
        surface = TinSurface("request", [[float(v) for v in p[:3]] for p in pts])
    except (TypeError, ValueError) as e:
        return None, (jsonify({"error": f"bad input: {e}"}), 400)
    except SurfaceLoadError as e:
        return None, (jsonify({"error": str(e)}), 400)

    try:
        result = build_heatmap(surface.bounds, interval, surface.elevation_at, max_dim)
    except InvalidIntervalError as e:
        return None, (jsonify({"error": str(e)}), 400)
    except GridTooLargeError as e:
        return None, (jsonify({"error": str(e), "width": e.W, "height": e.H}), 413)
    except EmptyGridError as e:
        return None, (jsonify({"error": str(e)}), 400)

    if not result.has_samples:
        return None, (jsonify({"error": "No valid sample points found on surface."}), 200)
    logger.debug(f"Heatmap request: {len(result.samples)} samples, {result.grid.W}x{result.grid.H}")
    return result, None

# ======= endpoints =======
@app.route("/heatmap", methods=["POST"])
def heatmap():
    result, err = _run(request.get_json(force=True, silent=True) or {})
    if err is not None:
        return err
    buf = io.BytesIO()
    heatmap_image(result.raster).save(buf, "PNG")
    buf.seek(0)
    resp = make_response(buf.read())
    resp.headers["Content-Type"] = "image/png"
    resp.headers["X-Z-Min"] = f"{result.samples.z_min:.3f}"
    resp.headers["X-Z-Max"] = f"{result.samples.z_max:.3f}"
    return resp

@app.route("/samples", methods=["POST"])
def samples():
    result, err = _run(request.get_json(force=True, silent=True) or {})
    if err is not None:
        return err
    resp = make_response(samples_to_csv(result.samples))
    resp.headers["Content-Type"] = "text/csv"
    return resp


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8081, threaded=True)
