# region Imports
from __future__ import annotations
import logging
import math
from typing import Callable, List, Optional
from .grid import axis_coords, validate_interval
from .models import Bounds, Sample, SampleSet
# endregion

logger = logging.getLogger(__name__)

ElevationFn = Callable[[float, float], Optional[float]]

# region Grid Sampling
def sample(bounds: Bounds, interval: float, elevation_at: ElevationFn) -> SampleSet:
    """
    Query `elevation_at` on every lattice point of `bounds`, x outer and y inner.

    `elevation_at` must be total: it returns None for points without data.
    None, NaN and infinite values are all treated as no data and skipped.
    """
    interval = validate_interval(interval)
    xs = axis_coords(bounds.min_x, bounds.max_x, interval)
    ys = axis_coords(bounds.min_y, bounds.max_y, interval)

    samples: List[Sample] = []
    z_min, z_max = math.inf, -math.inf
    for x in xs:
        x = float(x)
        for y in ys:
            y = float(y)
            z = elevation_at(x, y)
            if z is None:
                continue
            z = float(z)
            if not math.isfinite(z):
                continue
            samples.append(Sample(x, y, z))
            if z < z_min: z_min = z
            if z > z_max: z_max = z

    logger.debug(f"Sampled {len(samples)} of {len(xs) * len(ys)} grid points")
    return SampleSet(samples=tuple(samples), z_min=z_min, z_max=z_max)
# endregion
