"""Grid-sample elevation surfaces and render them as heatmaps."""

from .colors import clamp, heat_color, heat_colors, normalize
from .errors import (
    EmptyGridError,
    GridTooLargeError,
    InvalidIntervalError,
    SurfaceLoadError,
    TopoHeatmapError,
)
from .grid import check_grid_size, grid_spec, validate_interval
from .heatmap import HeatmapResult, build_heatmap
from .models import Bounds, GridSpec, Sample, SampleSet
from .raster import rasterize
from .sampler import sample

__version__ = "0.1.0"
