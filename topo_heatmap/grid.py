# region Imports
import math
import numpy as np
from .config import MAX_GRID_DIM, PIXEL_SNAP_EPS
from .errors import EmptyGridError, GridTooLargeError, InvalidIntervalError
from .models import Bounds, GridSpec
# endregion

# region Preconditions
def validate_interval(interval) -> float:
    try:
        value = float(interval)
    except (TypeError, ValueError):
        raise InvalidIntervalError(interval) from None
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidIntervalError(interval)
    return value


def grid_spec(bounds: Bounds, interval: float) -> GridSpec:
    """Raster size for sampling `bounds` every `interval` units."""
    interval = validate_interval(interval)
    W = int(math.ceil((bounds.max_x - bounds.min_x) / interval))
    H = int(math.ceil((bounds.max_y - bounds.min_y) / interval))
    return GridSpec(bounds=bounds, interval=interval, W=W, H=H)


def check_grid_size(spec: GridSpec, max_dim: int = MAX_GRID_DIM) -> GridSpec:
    if spec.W > max_dim or spec.H > max_dim:
        raise GridTooLargeError(spec.W, spec.H, max_dim)
    if spec.W <= 0 or spec.H <= 0:
        raise EmptyGridError(spec.W, spec.H)
    return spec
# endregion

# region Lattice Coordinates
def axis_coords(lo: float, hi: float, interval: float) -> np.ndarray:
    # Index-based so the step never accumulates drift
    n = int(math.floor((hi - lo) / interval + PIXEL_SNAP_EPS)) + 1
    coords = lo + np.arange(n, dtype=np.float64) * interval
    return np.minimum(coords, hi)


def cell_index(value, lo: float, interval: float):
    """Lattice column/row containing `value` (works on scalars and arrays)."""
    return np.floor((np.asarray(value, dtype=np.float64) - lo) / interval
                    + PIXEL_SNAP_EPS).astype(np.int64)
# endregion
