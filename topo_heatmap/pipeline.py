# region Imports
from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional
import numpy as np
from .config import MAX_GRID_DIM
from .errors import EmptyGridError, GridTooLargeError
from .export import output_paths, write_heatmap_png, write_samples_csv
from .grid import validate_interval
from .heatmap import build_heatmap
from .surfaces import Surface
# endregion

logger = logging.getLogger(__name__)

OK = "ok"
NO_BOUNDS = "no_bounds"
GRID_TOO_LARGE = "grid_too_large"
EMPTY_GRID = "empty_grid"
NO_SAMPLES = "no_samples"
WRITE_FAILED = "write_failed"

# region Report
@dataclass
class SurfaceReport:
    name: str
    status: str
    message: str = ""
    n_samples: int = 0
    W: int = 0
    H: int = 0
    z_min: Optional[float] = None
    z_max: Optional[float] = None
    csv_path: Optional[Path] = None
    png_path: Optional[Path] = None
    elapsed_sec: float = 0.0
    raster: Optional[np.ndarray] = None  # only kept when asked for

    @property
    def ok(self) -> bool:
        return self.status == OK
# endregion

# region Single Surface
def process_surface(
    surface: Surface,
    interval: float,
    out_dir=".",
    max_dim: int = MAX_GRID_DIM,
    timestamp: Optional[datetime] = None,
    name: Optional[str] = None,
    keep_raster: bool = False,
) -> SurfaceReport:
    t0 = time.perf_counter()
    name = name or surface.name

    if surface.bounds is None:
        logger.warning(f"Skipped surface {name!r} with no bounds.")
        return SurfaceReport(name, NO_BOUNDS, "Surface has no bounds.")

    try:
        result = build_heatmap(surface.bounds, interval, surface.elevation_at, max_dim)
    except GridTooLargeError as e:
        logger.error(f"{name}: {e}")
        return SurfaceReport(name, GRID_TOO_LARGE, str(e), W=e.W, H=e.H)
    except EmptyGridError as e:
        logger.warning(f"{name}: {e}")
        return SurfaceReport(name, EMPTY_GRID, str(e), W=e.W, H=e.H)

    spec = result.grid
    if not result.has_samples:
        logger.warning(f"No valid sample points found on surface {name!r}.")
        return SurfaceReport(name, NO_SAMPLES, "No valid sample points found on surface.",
                             W=spec.W, H=spec.H,
                             elapsed_sec=time.perf_counter() - t0)

    csv_path, png_path = output_paths(out_dir, name, timestamp)
    try:
        Path(out_dir).mkdir(parents=True, exist_ok=True)
        write_samples_csv(result.samples, csv_path)
        write_heatmap_png(result.raster, png_path)
    except OSError as e:
        logger.error(f"{name}: could not write outputs: {e}")
        return SurfaceReport(name, WRITE_FAILED, f"Could not write outputs: {e}",
                             n_samples=len(result.samples), W=spec.W, H=spec.H,
                             elapsed_sec=time.perf_counter() - t0)
    elapsed = time.perf_counter() - t0

    logger.info(f"{name}: {len(result.samples)} points sampled.")
    logger.info(f"CSV: {csv_path}")
    logger.info(f"Heatmap: {png_path}")
    logger.info(f"Elapsed time: {elapsed:.2f} seconds.")

    return SurfaceReport(
        name, OK,
        n_samples=len(result.samples),
        W=spec.W, H=spec.H,
        z_min=result.samples.z_min, z_max=result.samples.z_max,
        csv_path=csv_path, png_path=png_path,
        elapsed_sec=elapsed,
        raster=result.raster if keep_raster else None,
    )
# endregion

# region All Surfaces
def process_surfaces(
    surfaces: Iterable[Surface],
    interval: float,
    out_dir=".",
    max_dim: int = MAX_GRID_DIM,
    timestamp: Optional[datetime] = None,
    keep_raster: bool = False,
) -> List[SurfaceReport]:
    """Process every surface independently; one artifact pair per usable surface."""
    interval = validate_interval(interval)
    stamp = timestamp or datetime.now()
    reports = []
    seen = {}
    for s in surfaces:
        # Repeated names get a numeric suffix
        n = seen[s.name] = seen.get(s.name, 0) + 1
        name = s.name if n == 1 else f"{s.name}_{n}"
        reports.append(process_surface(s, interval, out_dir, max_dim, stamp,
                                       name=name, keep_raster=keep_raster))
    return reports
# endregion
