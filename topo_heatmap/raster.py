# region Imports
from __future__ import annotations
import numpy as np
from .colors import heat_colors
from .config import BACKGROUND_RGB, NORM_EPS
from .grid import cell_index
from .models import Bounds, SampleSet
# endregion

# region Rasterizer
def rasterize(
    samples: SampleSet,
    bounds: Bounds,
    interval: float,
    W: int,
    H: int,
    z_min: float,
    z_max: float,
) -> np.ndarray:
    """
    Paint each sample's heat color into a black (H, W, 3) uint8 buffer.

    Row 0 is the top of the image (highest y). Samples whose pixel falls
    outside the buffer are dropped. The returned array is read-only.
    """
    if W <= 0 or H <= 0:
        raise ValueError(f"Raster dimensions must be positive, got {W}x{H}")
    if len(samples) == 0:
        raise ValueError("Cannot rasterize an empty sample set")

    buf = np.empty((H, W, 3), dtype=np.uint8)
    buf[...] = BACKGROUND_RGB

    pts = samples.as_array()
    t = np.clip((pts[:, 2] - z_min) / (z_max - z_min + NORM_EPS), 0.0, 1.0)
    rgb = heat_colors(t)

    px = cell_index(pts[:, 0], bounds.min_x, interval)
    py = (H - 1) - cell_index(pts[:, 1], bounds.min_y, interval)
    inside = (px >= 0) & (px < W) & (py >= 0) & (py < H)

    # Repeated pixels keep the last sample written
    buf[py[inside], px[inside]] = rgb[inside]
    buf.setflags(write=False)
    return buf
# endregion
