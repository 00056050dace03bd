# region Imports
import math
from typing import Tuple
import numpy as np
from .config import NORM_EPS
# endregion

# region Scalar Helpers
def clamp(value: float, lo: float, hi: float) -> float:
    if value < lo: return lo
    if value > hi: return hi
    return value


def normalize(z: float, z_min: float, z_max: float, eps: float = NORM_EPS) -> float:
    return clamp((z - z_min) / (z_max - z_min + eps), 0.0, 1.0)


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def heat_color(t: float) -> Tuple[int, int, int]:
    """
    Linear blue (t=0) to red (t=1) ramp with no green.
    Channels round half up, so heat_color(0.5) == (128, 0, 128).
    """
    t = clamp(float(t), 0.0, 1.0)
    return _round_half_up(255.0 * t), 0, _round_half_up(255.0 * (1.0 - t))
# endregion

# region Vectorized
def heat_colors(t: np.ndarray) -> np.ndarray:
    """Array form of heat_color: (n,) values -> (n, 3) uint8 RGB."""
    t = np.clip(np.asarray(t, dtype=np.float64), 0.0, 1.0)
    rgb = np.zeros(t.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = np.floor(255.0 * t + 0.5).astype(np.uint8)
    rgb[..., 2] = np.floor(255.0 * (1.0 - t) + 0.5).astype(np.uint8)
    return rgb
# endregion
