# region Imports
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np
from .config import MAX_GRID_DIM
from .grid import check_grid_size, grid_spec
from .models import Bounds, GridSpec, SampleSet
from .raster import rasterize
from .sampler import ElevationFn, sample
# endregion

# region Result Container
@dataclass
class HeatmapResult:
    grid: GridSpec
    samples: SampleSet
    raster: Optional[np.ndarray]  # None when no grid point had data

    @property
    def has_samples(self) -> bool:
        return not self.samples.is_empty
# endregion

# region Pipeline
def build_heatmap(
    bounds: Bounds,
    interval: float,
    elevation_at: ElevationFn,
    max_dim: int = MAX_GRID_DIM,
) -> HeatmapResult:
    # Size check runs before anything is sampled or allocated
    spec = check_grid_size(grid_spec(bounds, interval), max_dim)

    samples = sample(bounds, spec.interval, elevation_at)
    if samples.is_empty:
        return HeatmapResult(grid=spec, samples=samples, raster=None)

    raster = rasterize(samples, bounds, spec.interval, spec.W, spec.H,
                       samples.z_min, samples.z_max)
    return HeatmapResult(grid=spec, samples=samples, raster=raster)
# endregion
